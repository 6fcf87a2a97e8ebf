"""Semantic version primitives.

Thin adapter over the `semver` package so the resolver only deals with
strings and identifier lists.
"""

from __future__ import annotations

from collections.abc import Sequence

from semver import Version

__all__ = [
    "InvalidVersionError",
    "is_valid",
    "parse_version",
    "prerelease_identifiers",
    "with_prerelease",
]


class InvalidVersionError(ValueError):
    """Raised when a base version is not valid semver."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid version: {text!r}")
        self.text = text


def parse_version(text: str) -> Version:
    """Parse `text` as semver. A single leading `v` is accepted."""
    candidate = text.strip().removeprefix("v")
    try:
        return Version.parse(candidate)
    except (TypeError, ValueError) as e:
        raise InvalidVersionError(text) from e


def is_valid(text: str) -> bool:
    return Version.is_valid(text)


def with_prerelease(version: Version, identifiers: Sequence[str]) -> str:
    """Format `version` with its prerelease replaced and build metadata dropped."""
    return str(version.replace(prerelease=".".join(identifiers), build=None))


def prerelease_identifiers(text: str) -> list[str]:
    """Ordered prerelease identifiers of a valid semver string (may be empty)."""
    prerelease = Version.parse(text).prerelease
    if not prerelease:
        return []
    return prerelease.split(".")
