from __future__ import annotations

import json
import secrets

import pytest
from click.testing import CliRunner

from minio_admin.commands import _common
from minio_admin.dispatcher import Dispatcher
from minio_admin.gateway import (
    AccountStatus,
    AddServiceAccountRequest,
    AdminAPIError,
    AdminClient,
    Credentials,
    ServiceAccountDetails,
    UpdateServiceAccountRequest,
)

VALID_POLICY = {
    "Version": "2012-10-17",
    "Statement": [
        {
            "Effect": "Allow",
            "Action": ["s3:GetObject"],
            "Resource": ["arn:aws:s3:::documents/*"],
        }
    ],
}


class FakeAdminClient(AdminClient):
    """In-memory admin client recording every call."""

    def __init__(self, fail_with: str | None = None):
        self.calls = []
        self.fail_with = fail_with
        self.accounts = {}

    def _record(self, name, *args):
        self.calls.append((name,) + args)
        if self.fail_with:
            raise AdminAPIError(self.fail_with)

    def add_service_account(self, request: AddServiceAccountRequest) -> Credentials:
        self._record("add_service_account", request)
        access_key = request.access_key or secrets.token_hex(10).upper()
        secret_key = request.secret_key or secrets.token_urlsafe(30)
        self.accounts[access_key] = request.target_user
        return Credentials(access_key=access_key, secret_key=secret_key)

    def set_user_status(self, user: str, status: AccountStatus) -> None:
        self._record("set_user_status", user, status)

    def list_service_accounts(self, user: str) -> list[str]:
        self._record("list_service_accounts", user)
        return sorted(key for key, parent in self.accounts.items() if parent == user)

    def info_service_account(self, access_key: str) -> ServiceAccountDetails:
        self._record("info_service_account", access_key)
        return ServiceAccountDetails(
            parent_user=self.accounts.get(access_key, "foobar"),
            account_status="on",
            implied_policy=True,
            member_of=["app-services"],
        )

    def delete_service_account(self, access_key: str) -> None:
        self._record("delete_service_account", access_key)
        self.accounts.pop(access_key, None)

    def update_service_account(self, access_key: str, request: UpdateServiceAccountRequest) -> None:
        self._record("update_service_account", access_key, request)


class CountingConnector:
    def __init__(self, client: AdminClient):
        self.client = client
        self.aliases = []

    def __call__(self, alias: str) -> AdminClient:
        self.aliases.append(alias)
        return self.client


@pytest.fixture()
def fake_client() -> FakeAdminClient:
    return FakeAdminClient()


@pytest.fixture()
def connector(fake_client) -> CountingConnector:
    return CountingConnector(fake_client)


@pytest.fixture()
def dispatcher(connector) -> Dispatcher:
    return Dispatcher(connect=connector)


@pytest.fixture()
def policy_file(tmp_path):
    path = tmp_path / "policy.json"
    path.write_text(json.dumps(VALID_POLICY))
    return path


@pytest.fixture()
def runner(monkeypatch, connector, tmp_path) -> CliRunner:
    """CLI runner whose commands talk to the fake client."""
    monkeypatch.setattr(_common, "connect", lambda alias, settings: connector(alias))
    monkeypatch.setenv("MC_CONFIG_DIR", str(tmp_path / "mc"))
    return CliRunner()
