"""Version resolution: CI context extraction, branch sanitizing, resolving."""

from .context import BuildNumberError, Context, context_from_environment
from .errors import VersionError
from .resolver import (
    BranchBuild,
    NotCI,
    Plan,
    TaggedRelease,
    Unresolvable,
    VersionResult,
    plan_for,
    resolve,
)
from .sanitize import sanitize_branch_name
from .semver import InvalidVersionError

__all__ = [
    # context
    "BuildNumberError",
    "Context",
    "context_from_environment",
    # errors
    "InvalidVersionError",
    "VersionError",
    # resolver
    "BranchBuild",
    "NotCI",
    "Plan",
    "TaggedRelease",
    "Unresolvable",
    "VersionResult",
    "plan_for",
    "resolve",
    # sanitize
    "sanitize_branch_name",
]
