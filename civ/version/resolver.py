"""Version resolution.

`plan_for` classifies a Context into exactly one of four plans and `resolve`
turns the plan into a `VersionResult`:

- NotCI: local build, prerelease `local`
- TaggedRelease: the tag itself is the version
- BranchBuild: `<sanitized branch>.<build number>` prerelease
- Unresolvable: CI run without a usable ref or build number
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TypeAlias

from civ.version.context import Context
from civ.version.sanitize import sanitize_branch_name
from civ.version.semver import (
    is_valid,
    parse_version,
    prerelease_identifiers,
    with_prerelease,
)

__all__ = [
    "BranchBuild",
    "LOCAL_CHANNEL",
    "NotCI",
    "Plan",
    "TaggedRelease",
    "Unresolvable",
    "VersionResult",
    "plan_for",
    "resolve",
]

LOCAL_CHANNEL = "local"
UNRESOLVED_MESSAGE = "Could not determine a version. CI environment invalid?"

_TAG_PREFIX_RE = re.compile(r"^[^0-9]*")


@dataclass(frozen=True, slots=True)
class VersionResult:
    """Outcome of a resolution: either a version (and maybe a dist tag) or an error."""

    version: str | None = None
    dist_tag: str | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if (self.version is None) == (self.error is None):
            raise ValueError("exactly one of version and error must be set")
        if self.dist_tag is not None and self.version is None:
            raise ValueError("dist_tag requires a version")

    @classmethod
    def ok(cls, version: str, dist_tag: str | None = None) -> VersionResult:
        return cls(version=version, dist_tag=dist_tag)

    @classmethod
    def failed(cls, error: str) -> VersionResult:
        return cls(error=error)


@dataclass(frozen=True, slots=True)
class NotCI:
    pass


@dataclass(frozen=True, slots=True)
class TaggedRelease:
    tag: str


@dataclass(frozen=True, slots=True)
class BranchBuild:
    branch: str
    build_number: int


@dataclass(frozen=True, slots=True)
class Unresolvable:
    pass


Plan: TypeAlias = NotCI | TaggedRelease | BranchBuild | Unresolvable


def plan_for(context: Context) -> Plan:
    """Pick the resolution plan for a context; the first matching rule wins."""
    if not context.ci:
        return NotCI()
    if context.tag:
        return TaggedRelease(context.tag)
    if context.branch and context.build_number is not None:
        return BranchBuild(context.branch, context.build_number)
    return Unresolvable()


def resolve(base_version: str, context: Context) -> VersionResult:
    """Resolve the version to publish for `base_version` in `context`.

    Raises:
        InvalidVersionError: If `base_version` is not valid semver
    """
    base = parse_version(base_version)

    match plan_for(context):
        case NotCI():
            return VersionResult.ok(with_prerelease(base, [LOCAL_CHANNEL]), LOCAL_CHANNEL)
        case TaggedRelease(tag=tag):
            return _resolve_tag(tag)
        case BranchBuild(branch=branch, build_number=build_number):
            channel = sanitize_branch_name(branch)
            version = with_prerelease(base, [channel, str(build_number)])
            return VersionResult.ok(version, channel.replace(".", "-"))
        case Unresolvable():
            return VersionResult.failed(UNRESOLVED_MESSAGE)


def _resolve_tag(tag: str) -> VersionResult:
    # Drops "v" as well as application prefixes such as "my-app-".
    version = _TAG_PREFIX_RE.sub("", tag, count=1)
    if not is_valid(version):
        return VersionResult.failed(f"Invalid semver tag: {tag}")
    identifiers = prerelease_identifiers(version)
    return VersionResult.ok(version, identifiers[0] if identifiers else None)
