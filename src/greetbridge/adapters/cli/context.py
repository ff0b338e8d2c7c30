"""Per-invocation CLI state and the lib_cli_exit_tools traceback switches."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from greetbridge.composition import AppServices

TracebackState = tuple[bool, bool]
"""``(traceback, traceback_force_color)`` as read from lib_cli_exit_tools."""


@dataclass(slots=True)
class CLIContext:
    """What the root group resolved before handing over to a subcommand.

    ``profile`` and ``set_overrides`` are the raw root options. ``config``
    already has the overrides merged in.
    """

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` (the services factory) with a :class:`CLIContext`."""
    ctx.obj = CLIContext(traceback, config, services, profile, set_overrides)


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Fetch the :class:`CLIContext` left by the root group.

    Raises:
        RuntimeError: When a command runs without the root group in front.
    """
    state = ctx.obj
    if isinstance(state, CLIContext):
        return state
    raise RuntimeError("CLI context not initialized. Call store_cli_context first.")


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full tracebacks (and forced colour) on or off.

    >>> apply_traceback_preferences(False)
    >>> snapshot_traceback_state()
    (False, False)
    """
    flag = bool(enabled)
    lib_cli_exit_tools.config.traceback = flag
    lib_cli_exit_tools.config.traceback_force_color = flag


def snapshot_traceback_state() -> TracebackState:
    settings = lib_cli_exit_tools.config
    return bool(getattr(settings, "traceback", False)), bool(getattr(settings, "traceback_force_color", False))


def restore_traceback_state(state: TracebackState) -> None:
    enabled, force_color = state
    lib_cli_exit_tools.config.traceback = enabled
    lib_cli_exit_tools.config.traceback_force_color = force_color


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
