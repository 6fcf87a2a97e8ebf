"""CI context extraction.

The extractor reads an explicit snapshot of the environment (any mapping of
variable name to value) rather than `os.environ`, so it is a pure function of
its input.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

from civ.core.config import EnvNames

__all__ = ["BuildNumberError", "Context", "context_from_environment"]

TAGS_PREFIX = "refs/tags/"
HEADS_PREFIX = "refs/heads/"

_BUILD_NUMBER_RE = re.compile(r"^\s*([0-9]+)\s*$")


class BuildNumberError(ValueError):
    """Raised when the run-number variable is set but is not a base-10 integer."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Could not parse integer '{value}' from {name}")
        self.name = name
        self.value = value


@dataclass(frozen=True, slots=True)
class Context:
    """Build environment as seen by the resolver.

    At most one of `branch` and `tag` is set.
    """

    ci: bool
    branch: str | None = None
    tag: str | None = None
    build_number: int | None = None


def context_from_environment(
    env: Mapping[str, str | None],
    names: EnvNames | None = None,
) -> Context:
    """Build a Context from an environment snapshot.

    Args:
        env: Variable name to value, e.g. `dict(os.environ)`
        names: Variable names to read (GitHub Actions names by default)

    Raises:
        BuildNumberError: If the run number is present but not an integer
    """
    names = names or EnvNames()
    branch, tag = _classify_ref(env.get(names.ref), env.get(names.head_ref))
    return Context(
        ci=bool(env.get(names.ci)),
        branch=branch,
        tag=tag,
        build_number=_parse_build_number(names.run_number, env.get(names.run_number)),
    )


def _classify_ref(ref: str | None, head_ref: str | None) -> tuple[str | None, str | None]:
    """Return (branch, tag) for a ref."""
    if not ref:
        return None, None
    if ref.startswith(TAGS_PREFIX):
        return None, ref.removeprefix(TAGS_PREFIX)
    if ref.startswith(HEADS_PREFIX):
        return ref.removeprefix(HEADS_PREFIX), None
    # Pull request: the ref is refs/pull/<n>/merge and head_ref names the source branch.
    if head_ref:
        return head_ref, None
    return None, None


def _parse_build_number(name: str, value: str | None) -> int | None:
    if value is None:
        return None
    m = _BUILD_NUMBER_RE.match(value)
    if m is None:
        raise BuildNumberError(name, value)
    return int(m.group(1), 10)
