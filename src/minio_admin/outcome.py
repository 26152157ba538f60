"""
Outcome messages for account lifecycle operations.

Every successful admin call produces exactly one message type per
operation. A message renders either as a fixed human-readable template
or as a sparse JSON document: only the fields that belong to the
operation are emitted, and empty fields are left out entirely.

JSON output example (add):
{
 "accessKey": "Q3AM3UQ867SPQQA43P2F",
 "secretKey": "zuf+tfteSlswRu7BJ86wekitnifILbZam1KYY3TG",
 "status": "success"
}
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from enum import Enum
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ACCESS_FIELD_MAX_LEN = 20


class Operation(str, Enum):
    ADD = "add"
    LIST = "list"
    INFO = "info"
    REMOVE = "remove"
    DISABLE = "disable"
    ENABLE = "enable"
    SET = "set"


class OutcomeMessage(BaseModel, ABC):
    """Result of one successful account lifecycle operation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    operation: ClassVar[Operation]
    style: ClassVar[str] = "user_message"

    access_key: str

    @abstractmethod
    def to_human(self) -> str:
        """Human-readable rendering, without color."""

    def to_json(self) -> str:
        fields = self.model_dump(by_alias=True)
        payload = {key: value for key, value in fields.items() if value not in (None, "", False, [])}
        payload["status"] = "success"
        return json.dumps(payload, indent=1, sort_keys=True)


class ServiceAccountAdded(OutcomeMessage):
    operation = Operation.ADD

    secret_key: str = Field(repr=False)

    def to_human(self) -> str:
        return f"Access Key: {self.access_key}\nSecret Key: {self.secret_key}"


class ServiceAccountListed(OutcomeMessage):
    operation = Operation.LIST
    style = "access_key"

    parent_user: str = ""

    def to_human(self) -> str:
        return self.access_key.ljust(ACCESS_FIELD_MAX_LEN)


class ServiceAccountInfo(OutcomeMessage):
    operation = Operation.INFO

    parent_user: str = ""
    account_status: str = ""
    implied_policy: bool = False
    policy: str = ""
    member_of: list[str] = Field(default_factory=list)

    def to_human(self) -> str:
        policy_field = "implied" if self.implied_policy else "embedded"
        return "\n".join([
            f"AccessKey: {self.access_key}",
            f"ParentUser: {self.parent_user}",
            f"Status: {self.account_status}",
            f"Policy: {policy_field}",
        ])


class AccountRemoved(OutcomeMessage):
    operation = Operation.REMOVE

    def to_human(self) -> str:
        return f"Removed service account `{self.access_key}` successfully."


class AccountDisabled(OutcomeMessage):
    operation = Operation.DISABLE

    def to_human(self) -> str:
        return f"Disabled service account `{self.access_key}` successfully."


class AccountEnabled(OutcomeMessage):
    operation = Operation.ENABLE

    def to_human(self) -> str:
        return f"Enabled service account `{self.access_key}` successfully."


class ServiceAccountEdited(OutcomeMessage):
    operation = Operation.SET

    def to_human(self) -> str:
        return f"Edited service account `{self.access_key}` successfully."


OUTCOMES: dict[Operation, type[OutcomeMessage]] = {
    cls.operation: cls
    for cls in (
        ServiceAccountAdded,
        ServiceAccountListed,
        ServiceAccountInfo,
        AccountRemoved,
        AccountDisabled,
        AccountEnabled,
        ServiceAccountEdited,
    )
}


def outcome_for(operation: Operation | str, **fields) -> OutcomeMessage:
    """Build the message for an operation tag.

    Raises ValueError for a tag outside Operation.
    """
    return OUTCOMES[Operation(operation)](**fields)
