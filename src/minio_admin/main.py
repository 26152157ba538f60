#!/usr/bin/env python3
"""
MinIO Admin - account lifecycle administration

Command-line client for managing users and service accounts on a
MinIO server. Every command runs exactly one admin call against the
alias given as its first argument and prints the outcome, either as
colorized text or as JSON (--json).

Commands are discovered from the commands/ package at start-up. Each
command module exposes GROUP (the parent command group) and COMMANDS
(a list of click commands); modules starting with "_" are skipped.

Any failure ends the command with a single diagnostic on stderr and a
non-zero exit status.
"""

import logging
import sys
from importlib import import_module
from pathlib import Path

import click

from minio_admin import __version__
from minio_admin.commands._common import AppContext
from minio_admin.config import get_settings
from minio_admin.errors import FATAL_EXIT_CODE, USAGE_EXIT_CODE, AdminCliError, CommandUsageError
from minio_admin.output import PROG_NAME, OutputConfig, Printer, setup_logging

logger = logging.getLogger(__name__)


class AdminGroup(click.Group):
    """Root group; turns command errors into a diagnostic and exit status."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except AdminCliError as e:
            app = ctx.find_object(AppContext)
            printer = app.printer if app else Printer(OutputConfig())
            logger.debug("Command failed", exc_info=True)
            printer.print_error(e)
            ctx.exit(e.exit_code)


@click.group(cls=AdminGroup, context_settings={"help_option_names": ["-h", "--help"]})
@click.option("--json", "json_output", is_flag=True, help="enable JSON lines formatted output")
@click.option("--no-color", is_flag=True, help="disable color theme")
@click.option("--debug", is_flag=True, help="enable debug output")
@click.option("--config-dir", "-C", default=None, help="path to configuration folder")
@click.version_option(__version__, prog_name=PROG_NAME)
@click.pass_context
def cli(ctx, json_output, no_color, debug, config_dir):
    """Manage users and service accounts on a MinIO server."""
    settings = get_settings(config_dir)
    config = OutputConfig(
        json_output=json_output,
        color=not (no_color or settings.no_color),
        debug=debug or settings.debug,
    )
    setup_logging(config)
    ctx.obj = AppContext(settings=settings, printer=Printer(config))


@cli.group()
def user():
    """Manage users."""


@user.group()
def svcacct():
    """Manage service accounts."""


GROUPS = {
    "user": user,
    "svcacct": svcacct,
}


def discover_commands() -> list:
    """Discover available commands from the commands/ directory."""
    commands_dir = Path(__file__).parent / "commands"
    commands = []

    for command_file in sorted(commands_dir.glob("*.py")):
        if command_file.name.startswith("_"):
            continue

        module_name = f"minio_admin.commands.{command_file.stem}"
        try:
            module = import_module(module_name)
        except Exception as e:
            logger.warning("Failed to load command module %s: %s", command_file.name, e)
            continue

        group = GROUPS.get(getattr(module, "GROUP", None))
        if group is None:
            logger.warning("Command module %s has no known GROUP", command_file.name)
            continue
        for command in getattr(module, "COMMANDS", []):
            commands.append((group, command))

    return commands


def register_commands() -> None:
    for group, command in discover_commands():
        group.add_command(command)


def _json_requested(args: list) -> bool:
    """Whether --json appears among the options, before any "--" separator."""
    if "--" in args:
        args = args[: args.index("--")]
    return "--json" in args


def main(argv=None) -> int:
    """Main entry point."""
    try:
        rv = cli.main(args=argv, prog_name=PROG_NAME, standalone_mode=False)
    except click.ClickException as e:
        args = sys.argv[1:] if argv is None else list(argv)
        if _json_requested(args):
            error = CommandUsageError(e.format_message())
            Printer(OutputConfig(json_output=True, color=False)).print_error(error)
            return error.exit_code
        e.show()
        return USAGE_EXIT_CODE
    except click.Abort:
        click.echo("Aborted!", err=True)
        return FATAL_EXIT_CODE

    return rv if isinstance(rv, int) else 0


register_commands()


if __name__ == "__main__":
    sys.exit(main())
