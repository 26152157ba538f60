"""
Admin Client Gateway

Typed admin calls against a MinIO server. McAdminClient executes each
call as one `mc --json admin ...` process and parses its JSON output.
The alias credentials are handed to mc through MC_HOST_<alias>, so mc
needs no configuration of its own.

Example:
    client = connect("myminio", get_settings())
    creds = client.add_service_account(AddServiceAccountRequest(target_user="foobar"))
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import subprocess
import tempfile
from abc import ABC, abstractmethod
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum

from minio_admin.config import AliasConfig, Settings, alias_name, resolve_alias
from minio_admin.errors import AdminConnectionError

logger = logging.getLogger(__name__)

REDACTED_FLAGS = ("--secret-key",)


class AccountStatus(str, Enum):
    ENABLED = "enabled"
    DISABLED = "disabled"


@dataclass(frozen=True)
class AddServiceAccountRequest:
    target_user: str
    access_key: str = ""
    secret_key: str = field(default="", repr=False)
    policy: bytes | None = None


@dataclass(frozen=True)
class UpdateServiceAccountRequest:
    secret_key: str = field(default="", repr=False)
    policy: bytes | None = None
    status: AccountStatus | None = None


@dataclass(frozen=True)
class Credentials:
    access_key: str
    secret_key: str = field(repr=False)


@dataclass(frozen=True)
class ServiceAccountDetails:
    parent_user: str = ""
    account_status: str = ""
    implied_policy: bool = False
    policy: str = ""
    member_of: list[str] = field(default_factory=list)


class AdminAPIError(Exception):
    """The server (or mc on its behalf) reported a failed admin call."""


class AdminClient(ABC):
    """Admin operations on one MinIO alias."""

    @abstractmethod
    def add_service_account(self, request: AddServiceAccountRequest) -> Credentials:
        pass

    @abstractmethod
    def set_user_status(self, user: str, status: AccountStatus) -> None:
        pass

    @abstractmethod
    def list_service_accounts(self, user: str) -> list[str]:
        pass

    @abstractmethod
    def info_service_account(self, access_key: str) -> ServiceAccountDetails:
        pass

    @abstractmethod
    def delete_service_account(self, access_key: str) -> None:
        pass

    @abstractmethod
    def update_service_account(self, access_key: str, request: UpdateServiceAccountRequest) -> None:
        pass


def _redact(args: list) -> list:
    redacted = list(args)
    for i, arg in enumerate(redacted[:-1]):
        if arg in REDACTED_FLAGS:
            redacted[i + 1] = "REDACTED"
    return redacted


def _error_message(result: subprocess.CompletedProcess) -> str:
    """Extract mc's error text from its JSON error document, if any."""
    for line in (result.stdout + "\n" + result.stderr).splitlines():
        line = line.strip()
        if not line.startswith("{"):
            continue
        try:
            doc = json.loads(line)
        except json.JSONDecodeError:
            continue
        if doc.get("status") != "error":
            continue
        error = doc.get("error") or {}
        cause = (error.get("cause") or {}).get("message")
        return cause or error.get("message", "unknown error")
    return result.stderr.strip() or f"mc exited with status {result.returncode}"


@contextmanager
def _policy_file(policy: bytes | None):
    """Write policy bytes to a temp file for mc; yields None without a policy."""
    if policy is None:
        yield None
        return

    with tempfile.NamedTemporaryFile(mode="wb", suffix=".json", delete=False, prefix="policy-") as f:
        f.write(policy)
        policy_path = f.name

    try:
        yield policy_path
    finally:
        os.unlink(policy_path)


class McAdminClient(AdminClient):
    def __init__(self, alias: AliasConfig, mc_binary: str = "mc"):
        self.alias = alias
        self.mc_binary = mc_binary

    def _env(self) -> dict:
        env = dict(os.environ)
        env[f"MC_HOST_{self.alias.name}"] = self.alias.host_url()
        return env

    def _mc(self, args: list) -> subprocess.CompletedProcess:
        cmd = [self.mc_binary, "--json"] + args
        logger.debug("Running %s", " ".join(_redact(cmd)))
        try:
            return subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                env=self._env(),
            )
        except OSError as e:
            raise AdminAPIError(f"Unable to run {self.mc_binary}: {e}") from e

    def _mc_json(self, args: list) -> list[dict]:
        """Run an mc command and parse its JSON lines."""
        result = self._mc(args)
        if result.returncode != 0:
            raise AdminAPIError(_error_message(result))

        docs = []
        for line in result.stdout.splitlines():
            line = line.strip()
            if not line:
                continue
            try:
                docs.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise AdminAPIError(f"Unexpected mc output: {line}") from e
        return docs

    def add_service_account(self, request: AddServiceAccountRequest) -> Credentials:
        cmd = ["admin", "user", "svcacct", "add", self.alias.name, request.target_user]
        if request.access_key:
            cmd.extend(["--access-key", request.access_key])
        if request.secret_key:
            cmd.extend(["--secret-key", request.secret_key])

        with _policy_file(request.policy) as policy_path:
            if policy_path:
                cmd.extend(["--policy", policy_path])
            docs = self._mc_json(cmd)

        if not docs:
            raise AdminAPIError("mc returned no credentials")
        doc = docs[-1]
        return Credentials(access_key=doc.get("accessKey", ""), secret_key=doc.get("secretKey", ""))

    def set_user_status(self, user: str, status: AccountStatus) -> None:
        action = "enable" if status == AccountStatus.ENABLED else "disable"
        self._mc_json(["admin", "user", action, self.alias.name, user])

    def list_service_accounts(self, user: str) -> list[str]:
        docs = self._mc_json(["admin", "user", "svcacct", "ls", self.alias.name, user])
        return [doc["accessKey"] for doc in docs if doc.get("accessKey")]

    def info_service_account(self, access_key: str) -> ServiceAccountDetails:
        docs = self._mc_json(["admin", "user", "svcacct", "info", self.alias.name, access_key])
        if not docs:
            raise AdminAPIError(f"mc returned no details for {access_key}")
        doc = docs[-1]

        policy = doc.get("policy") or ""
        if not isinstance(policy, str):
            policy = json.dumps(policy)
        return ServiceAccountDetails(
            parent_user=doc.get("parentUser", ""),
            account_status=doc.get("accountStatus", ""),
            implied_policy=bool(doc.get("impliedPolicy", False)),
            policy=policy,
            member_of=list(doc.get("memberOf") or []),
        )

    def delete_service_account(self, access_key: str) -> None:
        self._mc_json(["admin", "user", "svcacct", "rm", self.alias.name, access_key])

    def update_service_account(self, access_key: str, request: UpdateServiceAccountRequest) -> None:
        if request.status is not None:
            action = "enable" if request.status == AccountStatus.ENABLED else "disable"
            self._mc_json(["admin", "user", "svcacct", action, self.alias.name, access_key])
            return

        cmd = ["admin", "user", "svcacct", "edit", self.alias.name, access_key]
        if request.secret_key:
            cmd.extend(["--secret-key", request.secret_key])
        with _policy_file(request.policy) as policy_path:
            if policy_path:
                cmd.extend(["--policy", policy_path])
            self._mc_json(cmd)


def connect(aliased_url: str, settings: Settings) -> McAdminClient:
    """Open an admin client for an alias, or fail with AdminConnectionError."""
    binary = shutil.which(settings.mc_binary)
    if binary is None:
        raise AdminConnectionError(
            "Unable to initialize admin connection.",
            cause=FileNotFoundError(f"'{settings.mc_binary}' not found in PATH"),
            trace=(aliased_url,),
        )

    alias = resolve_alias(aliased_url, settings)
    if alias is None or not alias.url:
        raise AdminConnectionError(
            "Unable to initialize admin connection.",
            cause=LookupError(f"alias '{alias_name(aliased_url)}' is not configured"),
            trace=(aliased_url,),
        )

    logger.debug("Using alias %s at %s", alias.name, alias.url)
    return McAdminClient(alias, mc_binary=binary)
