"""Error codes for CLI exit status.

These values are used as process exit codes by every `civ` command:
- 0: Success
- 1: User error (bad arguments, unreadable config)
- 2: Environment error (malformed CI variables)
- 3: Version error (no version could be resolved, invalid base version)
- 5: I/O error (manifest or output file could not be read/written)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands. Values must remain stable."""

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    VERSION_ERROR = 3
    IO_ERROR = 5
