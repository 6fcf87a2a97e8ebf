"""Step outputs for later CI steps (GitHub Actions `GITHUB_OUTPUT` format)."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from civ.core.result import Err, Ok, Result
from civ.platform.files import append_text
from civ.version.errors import VersionError

__all__ = ["format_step_outputs", "write_step_outputs"]


def format_step_outputs(outputs: Mapping[str, str]) -> str:
    """Render `key=value` lines in insertion order."""
    for key, value in outputs.items():
        if "\n" in key or "\n" in value or "=" in key:
            raise ValueError(f"invalid step output: {key!r}")
    return "".join(f"{key}={value}\n" for key, value in outputs.items())


def write_step_outputs(path: Path, outputs: Mapping[str, str]) -> Result[None, VersionError]:
    try:
        append_text(path, format_step_outputs(outputs))
    except (OSError, ValueError) as e:
        return Err(
            VersionError(
                kind="output_write",
                message=f"failed to write step outputs: {e}",
                hint=str(path),
            )
        )
    return Ok(None)
