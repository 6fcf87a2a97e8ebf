"""Shared helpers for CLI commands."""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import typer

from civ.core.errors import ErrorCode
from civ.output.console import Style
from civ.version.errors import VersionError, VersionErrorKind

if TYPE_CHECKING:
    from civ.cli.context import CLIContext


_EXIT_CODES: dict[VersionErrorKind, ErrorCode] = {
    "invalid_environment": ErrorCode.ENV_ERROR,
    "invalid_version": ErrorCode.VERSION_ERROR,
    "unresolved": ErrorCode.VERSION_ERROR,
    "manifest_read": ErrorCode.IO_ERROR,
    "manifest_invalid": ErrorCode.USER_ERROR,
    "manifest_write": ErrorCode.IO_ERROR,
    "output_write": ErrorCode.IO_ERROR,
}


def error_exit_code(error: VersionError) -> int:
    return int(_EXIT_CODES.get(error.kind, ErrorCode.VERSION_ERROR))


def escape_workflow_data(message: str) -> str:
    """Escape a message for a GitHub Actions workflow command."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def fail(error: VersionError, ctx: CLIContext) -> NoReturn:
    """Report `error` and exit with its code.

    Under GitHub Actions the message is also emitted as an `::error::`
    workflow command so the step is annotated as failed.
    """
    ctx.console.error(error.message)
    if error.hint:
        ctx.console.print(f"hint: {error.hint}", Style.DIM)
    if ctx.environ.get("GITHUB_ACTIONS") == "true":
        typer.echo(f"::error::{escape_workflow_data(error.message)}", err=True)
    raise typer.Exit(code=error_exit_code(error))
