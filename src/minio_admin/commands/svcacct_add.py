"""
Service Account Creation

Mints a new service account (access key pair) under a parent user.
The parent can be a regular MinIO user, an STS or an LDAP user.
Explicit keys and the policy are forwarded to the server as given;
key strength and format are checked there, not here.

Examples:
  minio-admin user svcacct add myminio foobar
  minio-admin user svcacct add myminio foobar --access-key sa-foobar --secret-key s3cr3tk3y
  minio-admin user svcacct add myminio foobar --policy ./readonly.json
"""

import click

from minio_admin.commands._common import emit, make_dispatcher, positional_args

GROUP = "svcacct"


@click.command(
    "add",
    epilog="""\b
Examples:
  1. Add a new service account for user 'foobar' to MinIO server.
     $ minio-admin user svcacct add myminio foobar
""",
)
@positional_args
@click.option("--access-key", default="", help="set an access key for the service account")
@click.option("--secret-key", default="", help="set a secret key for the service account")
@click.option("--policy", "policy_path", default="", help="path to a JSON policy file")
@click.pass_context
def add(ctx, args, access_key, secret_key, policy_path):
    """Add a new service account."""
    message = make_dispatcher(ctx).add_service_account(
        args,
        access_key=access_key,
        secret_key=secret_key,
        policy_path=policy_path,
    )
    emit(ctx, message)


COMMANDS = [add]
