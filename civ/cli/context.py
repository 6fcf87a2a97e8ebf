from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import typer

from civ.core.config import CONFIG_FILENAME, Config, load_config
from civ.core.errors import ErrorCode
from civ.core.result import Err
from civ.output.console import ConsoleProtocol, RichConsole

ROOT_ENV = "CIV_ROOT"
CONFIG_ENV = "CIV_CONFIG"


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    config: Config
    environ: Mapping[str, str | None]
    console: ConsoleProtocol


def build_context() -> CLIContext:
    root = Path(os.environ.get(ROOT_ENV) or Path.cwd()).resolve()

    explicit = os.environ.get(CONFIG_ENV)
    config_path = Path(explicit) if explicit else root / CONFIG_FILENAME

    config = Config()
    if explicit or config_path.exists():
        config_result = load_config(config_path)
        if isinstance(config_result, Err):
            typer.echo(f"error: {config_result.error.message}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        config = config_result.value

    return CLIContext(
        root=root,
        config=config,
        environ=dict(os.environ),
        console=RichConsole(),
    )
