"""Values shared by the root group, ``main`` and every command."""

from __future__ import annotations

from typing import Final

CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}
"""Click settings applied to every command, so ``-h`` works everywhere."""

TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
"""Characters printed for an error when ``--traceback`` is off."""

TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000
"""Characters printed for a full traceback."""

CALL_RESULT_TERMINATOR: Final[bytes] = b"\n"
"""Written after the encoded result of ``greetbridge call``."""

__all__ = [
    "CALL_RESULT_TERMINATOR",
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
