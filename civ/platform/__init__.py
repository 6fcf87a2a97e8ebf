"""Platform helpers (filesystem)."""

from .files import append_text, atomic_write_text

__all__ = ["append_text", "atomic_write_text"]
