"""Helpers shared by command modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import click

from minio_admin.config import Settings
from minio_admin.dispatcher import Dispatcher
from minio_admin.gateway import connect
from minio_admin.outcome import OutcomeMessage
from minio_admin.output import Printer

ARGS_METAVAR = "ALIAS ACCOUNT"


@dataclass
class AppContext:
    settings: Settings
    printer: Printer


def positional_args(func):
    """Collect ALIAS ACCOUNT without letting click enforce the count."""
    return click.argument("args", nargs=-1, metavar=ARGS_METAVAR)(func)


def make_dispatcher(ctx: click.Context) -> Dispatcher:
    app: AppContext = ctx.find_object(AppContext)
    return Dispatcher(
        connect=lambda alias: connect(alias, app.settings),
        help_text=ctx.get_help(),
    )


def emit(ctx: click.Context, messages: OutcomeMessage | Iterable[OutcomeMessage]) -> None:
    printer = ctx.find_object(AppContext).printer
    if isinstance(messages, OutcomeMessage):
        messages = [messages]
    for message in messages:
        printer.print_message(message)
