import click

from minio_admin.commands._common import emit, make_dispatcher, positional_args

GROUP = "svcacct"


@click.command(
    "rm",
    epilog="""\b
Examples:
  1. Remove service account 'J123C4ZXEQN8RK6ND35I'.
     $ minio-admin user svcacct rm myminio J123C4ZXEQN8RK6ND35I
""",
)
@positional_args
@click.pass_context
def remove(ctx, args):
    """Remove a service account."""
    emit(ctx, make_dispatcher(ctx).remove_service_account(args))


COMMANDS = [remove]
