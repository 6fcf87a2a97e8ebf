from __future__ import annotations

from civ.cli.commands._helpers import fail
from civ.cli.context import build_context
from civ.core.result import Err
from civ.output.console import Style
from civ.services.version import VersionService


def context() -> None:
    """Show the CI context read from the environment."""
    ctx = build_context()
    service = VersionService(
        root=ctx.root,
        config=ctx.config,
        environ=ctx.environ,
        console=ctx.console,
    )

    result = service.context()
    if isinstance(result, Err):
        fail(result.error, ctx)

    c = result.value
    ctx.console.header("CI context")
    ctx.console.print(f"ci: {'yes' if c.ci else 'no'}")
    ctx.console.print(f"branch: {c.branch or '-'}", Style.DIM if c.branch is None else Style.DEFAULT)
    ctx.console.print(f"tag: {c.tag or '-'}", Style.DIM if c.tag is None else Style.DEFAULT)
    build = "-" if c.build_number is None else str(c.build_number)
    ctx.console.print(f"build: {build}", Style.DIM if c.build_number is None else Style.DEFAULT)
