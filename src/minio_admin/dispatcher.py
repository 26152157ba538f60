"""
Operation Dispatcher

Runs one account lifecycle operation end to end:
  1. validate positional arguments (ALIAS ACCOUNT)
  2. resolve optional inputs (policy document, key overrides)
  3. connect to the alias
  4. make exactly one admin call
  5. map the result into an outcome message

Failures are raised as AdminCliError subclasses and never rendered
here; main() decides how the process ends.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence

from minio_admin.errors import RemoteOperationError
from minio_admin.gateway import (
    AccountStatus,
    AddServiceAccountRequest,
    AdminAPIError,
    AdminClient,
    UpdateServiceAccountRequest,
)
from minio_admin.outcome import (
    AccountRemoved,
    Operation,
    OutcomeMessage,
    ServiceAccountAdded,
    ServiceAccountEdited,
    ServiceAccountInfo,
    ServiceAccountListed,
    outcome_for,
)
from minio_admin.policy import load_policy_document
from minio_admin.validator import check_arity

logger = logging.getLogger(__name__)

EXPECTED_ARGS = 2


@dataclass(frozen=True)
class RequestContext:
    """Inputs of a single invocation."""

    alias: str
    account: str
    policy: bytes | None = None
    access_key: str = ""
    secret_key: str = field(default="", repr=False)


STATUS_OPERATIONS = {
    AccountStatus.ENABLED: Operation.ENABLE,
    AccountStatus.DISABLED: Operation.DISABLE,
}


def _status_message(account: str, status: AccountStatus) -> OutcomeMessage:
    return outcome_for(STATUS_OPERATIONS[status], access_key=account)


class Dispatcher:
    def __init__(self, connect: Callable[[str], AdminClient], help_text: str = ""):
        self.connect = connect
        self.help_text = help_text

    def _context(self, args: Sequence[str], command: str, policy_path: str = "", **inputs) -> RequestContext:
        alias, account = check_arity(args, EXPECTED_ARGS, command, help_text=self.help_text)
        return RequestContext(alias=alias, account=account, policy=load_policy_document(policy_path), **inputs)

    def _call(self, request: RequestContext, args: Sequence[str], message: str, call):
        client = self.connect(request.alias)
        try:
            return call(client)
        except AdminAPIError as e:
            raise RemoteOperationError(message, cause=e, trace=tuple(args)) from e

    def add_service_account(
        self,
        args: Sequence[str],
        access_key: str = "",
        secret_key: str = "",
        policy_path: str = "",
    ) -> ServiceAccountAdded:
        request = self._context(
            args,
            "user svcacct add",
            policy_path=policy_path,
            access_key=access_key,
            secret_key=secret_key,
        )
        opts = AddServiceAccountRequest(
            target_user=request.account,
            access_key=request.access_key,
            secret_key=request.secret_key,
            policy=request.policy,
        )
        creds = self._call(
            request, args, "Unable to add a new service account",
            lambda client: client.add_service_account(opts),
        )
        logger.debug("Created service account %s for %s", creds.access_key, request.account)
        return ServiceAccountAdded(access_key=creds.access_key, secret_key=creds.secret_key)

    def set_user_status(self, args: Sequence[str], status: AccountStatus) -> OutcomeMessage:
        action = "enable" if status == AccountStatus.ENABLED else "disable"
        request = self._context(args, f"user {action}")
        self._call(
            request, args, f"Unable to {action} user",
            lambda client: client.set_user_status(request.account, status),
        )
        return _status_message(request.account, status)

    def list_service_accounts(self, args: Sequence[str]) -> list[ServiceAccountListed]:
        request = self._context(args, "user svcacct ls")
        access_keys = self._call(
            request, args, "Unable to list service accounts",
            lambda client: client.list_service_accounts(request.account),
        )
        return [ServiceAccountListed(access_key=key, parent_user=request.account) for key in access_keys]

    def info_service_account(self, args: Sequence[str]) -> ServiceAccountInfo:
        request = self._context(args, "user svcacct info")
        details = self._call(
            request, args, "Unable to get information of the specified service account",
            lambda client: client.info_service_account(request.account),
        )
        return ServiceAccountInfo(
            access_key=request.account,
            parent_user=details.parent_user,
            account_status=details.account_status,
            implied_policy=details.implied_policy,
            policy=details.policy,
            member_of=details.member_of,
        )

    def remove_service_account(self, args: Sequence[str]) -> AccountRemoved:
        request = self._context(args, "user svcacct rm")
        self._call(
            request, args, "Unable to remove the service account",
            lambda client: client.delete_service_account(request.account),
        )
        return AccountRemoved(access_key=request.account)

    def set_service_account_status(self, args: Sequence[str], status: AccountStatus) -> OutcomeMessage:
        action = "enable" if status == AccountStatus.ENABLED else "disable"
        request = self._context(args, f"user svcacct {action}")
        self._call(
            request, args, f"Unable to {action} the service account",
            lambda client: client.update_service_account(
                request.account, UpdateServiceAccountRequest(status=status)
            ),
        )
        return _status_message(request.account, status)

    def edit_service_account(
        self,
        args: Sequence[str],
        secret_key: str = "",
        policy_path: str = "",
    ) -> ServiceAccountEdited:
        request = self._context(
            args,
            "user svcacct edit",
            policy_path=policy_path,
            secret_key=secret_key,
        )
        opts = UpdateServiceAccountRequest(secret_key=request.secret_key, policy=request.policy)
        self._call(
            request, args, "Unable to edit the service account",
            lambda client: client.update_service_account(request.account, opts),
        )
        return ServiceAccountEdited(access_key=request.account)
