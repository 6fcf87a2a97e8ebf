"""Result type for explicit error handling.

Fallible I/O at the edges (manifest, config, step outputs) returns
`Result[T, E]` instead of raising, so callers handle both cases:

    result = read_manifest_version(path)
    if isinstance(result, Err):
        return result
    base = result.value
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying `value`."""

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result carrying `error`."""

    error: E


Result: TypeAlias = Ok[T] | Err[E]
