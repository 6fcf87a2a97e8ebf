"""Read and update the `version` field of a JSON manifest (package.json)."""

from __future__ import annotations

import json
from pathlib import Path

from civ.core.result import Err, Ok, Result
from civ.core.structured import StrDict, as_str_dict, get_str
from civ.platform.files import atomic_write_text
from civ.version.errors import VersionError

__all__ = ["read_manifest_version", "write_manifest_version"]


def read_manifest_version(path: Path) -> Result[str, VersionError]:
    data = _load(path)
    if isinstance(data, Err):
        return data

    value = get_str(data.value, "version")
    if value is None:
        return Err(
            VersionError(
                kind="manifest_invalid",
                message=f"missing version in {path.name}",
                hint=str(path),
            )
        )
    return Ok(value)


def write_manifest_version(path: Path, version: str) -> Result[bool, VersionError]:
    """Set the manifest version; Ok(False) when it already matches.

    Other keys keep their order. Output uses two-space indentation and a
    trailing newline.
    """
    data = _load(path)
    if isinstance(data, Err):
        return data

    if get_str(data.value, "version") == version:
        return Ok(False)

    data.value["version"] = version

    try:
        text = json.dumps(data.value, indent=2, ensure_ascii=False) + "\n"
        atomic_write_text(path, text, encoding="utf-8")
    except OSError as e:
        return Err(
            VersionError(
                kind="manifest_write",
                message=f"failed to write {path.name}: {e}",
                hint=str(path),
            )
        )
    return Ok(True)


def _load(path: Path) -> Result[StrDict, VersionError]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        return Err(
            VersionError(
                kind="manifest_read",
                message=f"failed to read {path.name}: {e}",
                hint=str(path),
            )
        )

    try:
        obj: object = json.loads(text)
    except json.JSONDecodeError as e:
        return Err(
            VersionError(
                kind="manifest_invalid",
                message=f"invalid JSON in {path.name}: {e}",
                hint=str(path),
            )
        )

    data = as_str_dict(obj)
    if data is None:
        return Err(
            VersionError(
                kind="manifest_invalid",
                message=f"invalid JSON root in {path.name}",
                hint=str(path),
            )
        )
    return Ok(data)
