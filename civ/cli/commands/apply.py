from __future__ import annotations

import typer

from civ.cli.commands._helpers import fail
from civ.cli.context import build_context
from civ.core.result import Err
from civ.services.version import VersionService


def apply(
    dry_run: bool = typer.Option(False, "--dry-run", help="Resolve without writing anything."),
) -> None:
    """Resolve the version and write it into the manifest."""
    ctx = build_context()
    service = VersionService(
        root=ctx.root,
        config=ctx.config,
        environ=ctx.environ,
        console=ctx.console,
    )

    result = service.apply(dry_run=dry_run)
    if isinstance(result, Err):
        fail(result.error, ctx)

    resolved = result.value
    if dry_run:
        return
    if resolved.changed:
        ctx.console.success(f"{resolved.manifest_path.name}: {resolved.version}")
    else:
        ctx.console.success(f"{resolved.manifest_path.name} already at {resolved.version}")
