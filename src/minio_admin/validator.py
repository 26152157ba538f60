"""Positional argument checks shared by all commands."""

from __future__ import annotations

from typing import Sequence

from minio_admin.errors import ArgumentCountError


def check_arity(args: Sequence[str], expected: int, command: str, help_text: str = "") -> tuple[str, ...]:
    """Require exactly `expected` positional arguments.

    Only the count is checked; argument content is left to the server.
    """
    if len(args) != expected:
        raise ArgumentCountError(
            f"Incorrect number of arguments for {command} command.",
            help_text=help_text,
            trace=tuple(args),
        )
    return tuple(args)
