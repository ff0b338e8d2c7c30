"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 143) are informational only; ``lib_cli_exit_tools``
translates signals itself.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes raised through ``SystemExit`` by CLI commands.

    Values follow errno and sysexits.h:

    * 0-1: generic success / failure
    * 22: EINVAL (bad export name or argument count)
    * 65: EX_DATAERR (payload could not be marshalled, failed bridge requests)
    * 78: EX_CONFIG (invalid ``[bridge]`` section)

    Example:
        >>> int(ExitCode.DATA_ERROR)
        65
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    DATA_ERROR = 65
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
