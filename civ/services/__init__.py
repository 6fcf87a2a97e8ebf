"""Services that wire the version core to files and the environment."""

from .version import ResolvedVersion, VersionService

__all__ = ["ResolvedVersion", "VersionService"]
