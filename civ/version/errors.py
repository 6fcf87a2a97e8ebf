"""Error payload for the version service and CLI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

VersionErrorKind = Literal[
    "invalid_environment",
    "invalid_version",
    "unresolved",
    "manifest_read",
    "manifest_invalid",
    "manifest_write",
    "output_write",
]


@dataclass(frozen=True, slots=True)
class VersionError:
    kind: VersionErrorKind
    message: str
    hint: str | None = None
