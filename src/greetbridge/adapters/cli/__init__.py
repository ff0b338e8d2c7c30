"""Command-line adapter for greetbridge.

``main`` is what the console script and ``python -m greetbridge`` run.
``cli`` is the click group itself, handy for ``CliRunner`` in tests. The
traceback helpers let callers save and restore lib_cli_exit_tools flags
around a run.
"""

from __future__ import annotations

from .commands import (
    cli_call,
    cli_config,
    cli_exports,
    cli_fail,
    cli_greet,
    cli_info,
    cli_logdemo,
    cli_serve,
)
from .constants import CLICK_CONTEXT_SETTINGS, TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "CLIContext",
    "ExitCode",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_call",
    "cli_config",
    "cli_exports",
    "cli_fail",
    "cli_greet",
    "cli_info",
    "cli_logdemo",
    "cli_serve",
    "get_cli_context",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
