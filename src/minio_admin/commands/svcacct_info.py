"""Service account details: parent user, status and policy."""

import click

from minio_admin.commands._common import emit, make_dispatcher, positional_args

GROUP = "svcacct"


@click.command(
    "info",
    epilog="""\b
Examples:
  1. Display information of service account 'J123C4ZXEQN8RK6ND35I'.
     $ minio-admin user svcacct info myminio J123C4ZXEQN8RK6ND35I
""",
)
@positional_args
@click.pass_context
def info(ctx, args):
    """Display information of a service account."""
    emit(ctx, make_dispatcher(ctx).info_service_account(args))


COMMANDS = [info]
