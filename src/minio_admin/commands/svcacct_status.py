"""
Service Account Status

Enables or disables a service account without touching its parent user.
"""

import click

from minio_admin.commands._common import emit, make_dispatcher, positional_args
from minio_admin.gateway import AccountStatus

GROUP = "svcacct"


@click.command(
    "enable",
    epilog="""\b
Examples:
  1. Enable service account 'J123C4ZXEQN8RK6ND35I'.
     $ minio-admin user svcacct enable myminio J123C4ZXEQN8RK6ND35I
""",
)
@positional_args
@click.pass_context
def enable(ctx, args):
    """Enable a service account."""
    emit(ctx, make_dispatcher(ctx).set_service_account_status(args, AccountStatus.ENABLED))


@click.command(
    "disable",
    epilog="""\b
Examples:
  1. Disable service account 'J123C4ZXEQN8RK6ND35I'.
     $ minio-admin user svcacct disable myminio J123C4ZXEQN8RK6ND35I
""",
)
@positional_args
@click.pass_context
def disable(ctx, args):
    """Disable a service account."""
    emit(ctx, make_dispatcher(ctx).set_service_account_status(args, AccountStatus.DISABLED))


COMMANDS = [enable, disable]
