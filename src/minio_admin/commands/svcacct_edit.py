"""
Service Account Editing

Replaces the secret key and/or the embedded policy of an existing
service account. Options left out are not changed.
"""

import click

from minio_admin.commands._common import emit, make_dispatcher, positional_args

GROUP = "svcacct"


@click.command(
    "edit",
    epilog="""\b
Examples:
  1. Change the secret key of service account 'J123C4ZXEQN8RK6ND35I'.
     $ minio-admin user svcacct edit myminio J123C4ZXEQN8RK6ND35I --secret-key 'xxxxxxx'
  2. Change the policy of service account 'J123C4ZXEQN8RK6ND35I'.
     $ minio-admin user svcacct edit myminio J123C4ZXEQN8RK6ND35I --policy ./policy.json
""",
)
@positional_args
@click.option("--secret-key", default="", help="set a new secret key for the service account")
@click.option("--policy", "policy_path", default="", help="path to a new JSON policy file")
@click.pass_context
def edit(ctx, args, secret_key, policy_path):
    """Edit an existing service account."""
    message = make_dispatcher(ctx).edit_service_account(
        args,
        secret_key=secret_key,
        policy_path=policy_path,
    )
    emit(ctx, message)


COMMANDS = [edit]
