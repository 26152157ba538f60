"""Error types raised by commands and handled once in main()."""

from __future__ import annotations

USAGE_EXIT_CODE = 1
FATAL_EXIT_CODE = 1


class AdminCliError(Exception):
    """Base class for every error that terminates a command."""

    exit_code = FATAL_EXIT_CODE

    def __init__(self, message: str, cause: BaseException | None = None, trace: tuple = ()):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.trace = tuple(trace)

    def describe(self) -> str:
        text = self.message
        if self.cause is not None:
            text += f" ({self.cause})"
        return text

    def to_dict(self) -> dict:
        error = {"message": self.message}
        if self.cause is not None:
            error["cause"] = {"message": str(self.cause)}
        if self.trace:
            error["trace"] = list(self.trace)
        return {"status": "error", "error": error}


class ArgumentCountError(AdminCliError):
    """Wrong number of positional arguments for a command."""

    exit_code = USAGE_EXIT_CODE

    def __init__(self, message: str, help_text: str = "", trace: tuple = ()):
        super().__init__(message, trace=trace)
        self.help_text = help_text


class PolicyDocumentError(AdminCliError):
    """Policy file could not be read or does not parse."""


class AdminConnectionError(AdminCliError):
    """No admin session could be established for an alias."""


class RemoteOperationError(AdminCliError):
    """The server rejected or failed an admin call."""


class ConfigError(AdminCliError):
    """Local configuration is unreadable or incomplete."""


class CommandUsageError(AdminCliError):
    """Command line rejected by the parser (unknown option, bad value)."""

    exit_code = USAGE_EXIT_CODE
