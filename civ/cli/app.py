from __future__ import annotations

import os
from pathlib import Path

import typer

from civ import __version__
from civ.cli.commands.apply import apply
from civ.cli.commands.context_cmd import context
from civ.cli.commands.show import show
from civ.cli.context import CONFIG_ENV, ROOT_ENV
from civ.core.errors import ErrorCode


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(apply)
app.command()(show)
app.command()(context)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
    directory: Path | None = typer.Option(
        None,
        "--directory",
        "-C",
        help="Project directory holding the manifest (default: current directory).",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Config file (default: civ.toml in the project directory).",
    ),
) -> None:
    if directory is not None:
        try:
            root = directory.expanduser().resolve()
        except OSError as e:
            typer.echo(f"error: invalid --directory: {e}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        if not root.is_dir():
            typer.echo(f"error: --directory '{root}' is not a directory", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))

        os.environ[ROOT_ENV] = str(root)

    if config is not None:
        os.environ[CONFIG_ENV] = str(config.expanduser().resolve())


def main() -> None:
    app()
