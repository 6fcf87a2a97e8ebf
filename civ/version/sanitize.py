from __future__ import annotations

import re

__all__ = ["DEV_CHANNEL", "PLACEHOLDER", "TRUNK_BRANCHES", "sanitize_branch_name"]

# Only one of these is expected to produce versioned builds in a given repo.
TRUNK_BRANCHES = frozenset({"main", "master", "develop"})
DEV_CHANNEL = "dev"
PLACEHOLDER = "branch"

_SEPARATORS_RE = re.compile(r"[\\/\-._]")
_NON_ALNUM_RE = re.compile(r"[^a-zA-Z0-9]")
_LEADING_ZEROS_RE = re.compile(r"^0+")


def sanitize_branch_name(branch: str) -> str:
    """Turn a branch name into dot-separated semver prerelease identifiers.

    Trunk branches map to `dev`. Other names are split on path-like
    separators; in each fragment the first non-alphanumeric character and any
    leading zeros are removed, and empty fragments are dropped. A name that
    sanitizes to nothing becomes `branch`.

    Only the first offending character per fragment is removed.
    """
    if branch in TRUNK_BRANCHES:
        return DEV_CHANNEL

    fragments = (_clean_fragment(f) for f in _SEPARATORS_RE.split(branch))
    return ".".join(f for f in fragments if f) or PLACEHOLDER


def _clean_fragment(fragment: str) -> str:
    fragment = _NON_ALNUM_RE.sub("", fragment, count=1)
    return _LEADING_ZEROS_RE.sub("", fragment)
