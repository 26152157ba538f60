"""
User Status

Enables or disables a MinIO user. A disabled user keeps its policies
and group membership but cannot authenticate.
"""

import click

from minio_admin.commands._common import emit, make_dispatcher, positional_args
from minio_admin.gateway import AccountStatus

GROUP = "user"


@click.command(
    "enable",
    epilog="""\b
Examples:
  1. Enable a user 'foobar' on MinIO server.
     $ minio-admin user enable myminio foobar
""",
)
@positional_args
@click.pass_context
def enable(ctx, args):
    """Enable user."""
    emit(ctx, make_dispatcher(ctx).set_user_status(args, AccountStatus.ENABLED))


@click.command(
    "disable",
    epilog="""\b
Examples:
  1. Disable a user 'foobar' on MinIO server.
     $ minio-admin user disable myminio foobar
""",
)
@positional_args
@click.pass_context
def disable(ctx, args):
    """Disable user."""
    emit(ctx, make_dispatcher(ctx).set_user_status(args, AccountStatus.DISABLED))


COMMANDS = [enable, disable]
