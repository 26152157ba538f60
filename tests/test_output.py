from __future__ import annotations

import io
import json

from rich.console import Console

from minio_admin.errors import ArgumentCountError, RemoteOperationError
from minio_admin.outcome import AccountDisabled, ServiceAccountAdded
from minio_admin.output import DEFAULT_THEME, OutputConfig, Printer


def make_printer(**config):
    out, err = io.StringIO(), io.StringIO()
    printer = Printer(
        OutputConfig(**config),
        console=Console(file=out, theme=DEFAULT_THEME, width=200),
        err_console=Console(file=err, theme=DEFAULT_THEME, width=200),
    )
    return printer, out, err


def test_human_message_goes_to_stdout():
    printer, out, err = make_printer()

    printer.print_message(ServiceAccountAdded(access_key="AK", secret_key="SK"))

    assert out.getvalue() == "Access Key: AK\nSecret Key: SK\n"
    assert err.getvalue() == ""


def test_human_message_is_not_parsed_as_markup():
    printer, out, _ = make_printer()

    printer.print_message(AccountDisabled(access_key="[bold]x[/bold]"))

    assert out.getvalue() == "Disabled service account `[bold]x[/bold]` successfully.\n"


def test_json_message_without_color():
    printer, out, _ = make_printer(json_output=True, color=False)

    printer.print_message(AccountDisabled(access_key="foobar"))

    assert json.loads(out.getvalue()) == {"accessKey": "foobar", "status": "success"}


def test_usage_error_prints_help_then_diagnostic():
    printer, out, err = make_printer()

    printer.print_error(ArgumentCountError("Incorrect number of arguments for user disable command.", help_text="Usage: x"))

    assert out.getvalue() == ""
    assert err.getvalue().splitlines() == [
        "Usage: x",
        "minio-admin: <ERROR> Incorrect number of arguments for user disable command.",
    ]


def test_json_error_document():
    printer, _, err = make_printer(json_output=True)

    printer.print_error(RemoteOperationError("Unable to disable user", cause=ValueError("denied"), trace=("a", "b")))

    assert json.loads(err.getvalue()) == {
        "status": "error",
        "error": {"message": "Unable to disable user", "cause": {"message": "denied"}, "trace": ["a", "b"]},
    }
