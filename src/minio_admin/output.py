"""
Output rendering.

The output mode and color scheme are chosen once at start-up and passed
around as an OutputConfig. Printer only consumes outcome messages and
errors; it knows nothing about how a result was obtained.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from minio_admin.errors import AdminCliError, ArgumentCountError
from minio_admin.outcome import OutcomeMessage

PROG_NAME = "minio-admin"

DEFAULT_THEME = Theme({
    "user_message": "green",
    "access_key": "bold",
    "error": "bold red",
})


@dataclass(frozen=True)
class OutputConfig:
    json_output: bool = False
    color: bool = True
    debug: bool = False
    theme: Theme = DEFAULT_THEME


class Printer:
    """Writes messages to stdout and diagnostics to stderr."""

    def __init__(self, config: OutputConfig, console: Console | None = None, err_console: Console | None = None):
        self.config = config
        self.console = console or Console(theme=config.theme, no_color=not config.color, highlight=False)
        self.err_console = err_console or Console(
            theme=config.theme, no_color=not config.color, highlight=False, stderr=True
        )

    def print_message(self, message: OutcomeMessage) -> None:
        if self.config.json_output:
            if self.config.color:
                self.console.print_json(message.to_json(), indent=1)
            else:
                self.console.out(message.to_json(), highlight=False)
            return
        self.console.print(message.to_human(), style=message.style, markup=False, soft_wrap=True)

    def print_error(self, error: AdminCliError) -> None:
        if self.config.json_output:
            self.err_console.out(json.dumps(error.to_dict(), indent=1, sort_keys=True), highlight=False)
            return

        if isinstance(error, ArgumentCountError) and error.help_text:
            self.err_console.out(error.help_text, highlight=False)
        self.err_console.print(f"{PROG_NAME}: <ERROR> ", style="error", end="")
        self.err_console.print(error.describe(), markup=False, soft_wrap=True)


def setup_logging(config: OutputConfig) -> None:
    """Route log records to stderr through rich."""
    handler = RichHandler(
        console=Console(stderr=True, no_color=not config.color),
        show_path=False,
        rich_tracebacks=config.debug,
        log_time_format="[%X]",
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("minio_admin")
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if config.debug else logging.WARNING)
