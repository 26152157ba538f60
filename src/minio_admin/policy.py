"""
IAM Policy Document Loading

Reads a policy file and checks that it is a well-formed IAM policy
before it is sent to the server. The raw bytes are forwarded unchanged;
parsing only decides whether the document is acceptable.

Policy example:
{
  "Version": "2012-10-17",
  "Statement": [
    {
      "Effect": "Allow",
      "Action": ["s3:GetObject", "s3:PutObject"],
      "Resource": ["arn:aws:s3:::documents/*"]
    }
  ]
}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from minio_admin.errors import PolicyDocumentError

DEFAULT_VERSION = "2012-10-17"
ACTION_PREFIXES = ("s3:", "admin:", "kms:", "sts:")
RESOURCE_PREFIXES = ("arn:aws:s3:::", "arn:minio:kms:::")


def _as_list(value):
    if isinstance(value, str):
        return [value]
    return value


class PolicyStatement(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    sid: str = Field(default="", alias="Sid")
    effect: Literal["Allow", "Deny"] = Field(alias="Effect")
    actions: list[str] = Field(default_factory=list, alias="Action")
    not_actions: list[str] = Field(default_factory=list, alias="NotAction")
    resources: list[str] = Field(default_factory=list, alias="Resource")
    conditions: dict[str, Any] = Field(default_factory=dict, alias="Condition")

    @field_validator("actions", "not_actions", "resources", mode="before")
    @classmethod
    def _single_or_list(cls, value):
        return _as_list(value)

    @field_validator("actions", "not_actions")
    @classmethod
    def _known_actions(cls, value: list[str]) -> list[str]:
        for action in value:
            if action != "*" and not action.startswith(ACTION_PREFIXES):
                raise ValueError(f"unsupported action '{action}'")
        return value

    @field_validator("resources")
    @classmethod
    def _arn_resources(cls, value: list[str]) -> list[str]:
        for resource in value:
            if not resource.startswith(RESOURCE_PREFIXES):
                raise ValueError(f"invalid resource '{resource}'")
        return value

    @model_validator(mode="after")
    def _check_statement(self) -> "PolicyStatement":
        if not self.actions and not self.not_actions:
            raise ValueError("statement needs an Action or NotAction")
        needs_resource = any(a == "*" or a.startswith("s3:") for a in self.actions + self.not_actions)
        if needs_resource and not self.resources:
            raise ValueError("Resource must not be empty for s3 actions")
        return self


class PolicyDocument(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    version: str = Field(default="", alias="Version")
    id: str = Field(default="", alias="ID")
    statements: list[PolicyStatement] = Field(alias="Statement")

    @field_validator("version")
    @classmethod
    def _supported_version(cls, value: str) -> str:
        if value not in ("", DEFAULT_VERSION):
            raise ValueError(f"invalid version '{value}'")
        return value

    @field_validator("statements", mode="before")
    @classmethod
    def _single_or_list(cls, value):
        if isinstance(value, dict):
            return [value]
        return value

    @model_validator(mode="after")
    def _unique_sids(self) -> "PolicyDocument":
        seen = set()
        for statement in self.statements:
            if not statement.sid:
                continue
            if statement.sid in seen:
                raise ValueError(f"duplicate Sid '{statement.sid}'")
            seen.add(statement.sid)
        return self


def parse_policy(data: bytes) -> PolicyDocument:
    """Parse raw policy bytes, raising pydantic's ValidationError on failure."""
    return PolicyDocument.model_validate_json(data)


def load_policy_document(path: str | None) -> bytes | None:
    """Read and validate a policy file.

    Returns None when no path is given (no policy override), otherwise
    the file's raw bytes.
    """
    if not path:
        return None

    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise PolicyDocumentError("Unable to open the policy document.", cause=e, trace=(path,)) from e

    try:
        parse_policy(data)
    except ValidationError as e:
        raise PolicyDocumentError("Unable to parse the policy document.", cause=e, trace=(path,)) from e

    return data
