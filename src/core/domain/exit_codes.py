"""Process exit codes for oddjobs commands.

Commands and services return members of `ExitCode`; the integer value only
matters at the process boundary, where the CLI hands it to `typer.Exit`.
1 and 2 are left to Click (uncaught exception, usage error).
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Closed set of command results."""

    SUCCESS = 0
    TOOL_NOT_FOUND = 3
    NO_FILES = 4
    ALL_INACCESSIBLE = 5
    INVALID_BASE = 6
    ENDPOINT_UNREACHABLE = 7
    INVALID_RESPONSE = 8

    @property
    def ok(self) -> bool:
        return self is ExitCode.SUCCESS
