from __future__ import annotations

import typer

from civ.cli.commands._helpers import fail
from civ.cli.context import build_context
from civ.core.result import Err
from civ.output.console import Style
from civ.services.version import VersionService


def show(
    dist_tag: bool = typer.Option(False, "--dist-tag", help="Also print the dist tag."),
) -> None:
    """Print the resolved version without writing anything."""
    ctx = build_context()
    service = VersionService(
        root=ctx.root,
        config=ctx.config,
        environ=ctx.environ,
        console=ctx.console,
    )

    result = service.compute()
    if isinstance(result, Err):
        fail(result.error, ctx)

    resolved = result.value
    ctx.console.print(resolved.version)
    if dist_tag:
        ctx.console.print(f"dist-tag: {resolved.dist_tag or '-'}", Style.DIM)
