"""
Service Account Listing

Lists the access keys of every service account owned by a user, one
message per account.
"""

import click

from minio_admin.commands._common import emit, make_dispatcher, positional_args

GROUP = "svcacct"


@click.command(
    "ls",
    epilog="""\b
Examples:
  1. List service accounts of user 'foobar'.
     $ minio-admin user svcacct ls myminio foobar
""",
)
@positional_args
@click.pass_context
def list_accounts(ctx, args):
    """List service accounts of a user."""
    emit(ctx, make_dispatcher(ctx).list_service_accounts(args))


COMMANDS = [list_accounts]
