"""Run the ``greetbridge`` group and turn every outcome into an exit status.

lib_cli_exit_tools.run_cli has no way to hand ``obj`` to the group, and the
root group needs the services factory there, so the same exception policy
is spelled out in :func:`_dispatch`.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from greetbridge import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences, restore_traceback_state, snapshot_traceback_state

if TYPE_CHECKING:
    from greetbridge.composition import AppServices

ServicesFactory = Callable[[], "AppServices"]


def _report_failure(exc: BaseException) -> int:
    verbose = snapshot_traceback_state()[0]
    apply_traceback_preferences(verbose)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _dispatch(args: list[str], services_factory: ServicesFactory) -> int:
    from .root import cli

    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:  # SystemExit and KeyboardInterrupt map to exit codes too
        return _report_failure(exc)
    return 0


def _shutdown_logging() -> None:
    # Only the main thread owns the runtime; other threads may still be logging.
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: ServicesFactory | None = None,
) -> int:
    """Execute one CLI invocation.

    Args:
        argv: Arguments after the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Put the traceback flags back the way they were
            once the command finishes.
        services_factory: Zero-argument callable returning
            :class:`~greetbridge.composition.AppServices`. Entry points pass
            ``build_production``.

    Returns:
        The process exit status.

    Raises:
        ValueError: ``services_factory`` was omitted.

    Example:
        >>> from greetbridge.composition import build_production
        >>> main(["greet", "World"], services_factory=build_production)  # doctest: +SKIP
        Hello, World! This is Python speaking!
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    args = sys.argv[1:] if argv is None else list(argv)
    saved = snapshot_traceback_state()
    try:
        return _dispatch(args, services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(saved)
        _shutdown_logging()


__all__ = ["main"]
