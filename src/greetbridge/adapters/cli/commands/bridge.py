"""CLI commands exposing the export registry to host processes.

Contents:
    * :func:`cli_call` - One byte-level call through the registry.
    * :func:`cli_exports` - List export names.
    * :func:`cli_serve` - Run the stdio bridge until stdin closes.
"""

from __future__ import annotations

import logging
import os

import lib_log_rich.runtime
import rich_click as click

from greetbridge.adapters.bridge.stdio import serve_stream
from greetbridge.domain.enums import WireFormat
from greetbridge.domain.errors import BoundaryError, ConfigurationError

from ..constants import CALL_RESULT_TERMINATOR, CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode
from ._shared import exit_for_boundary_error, load_bridge_settings

logger = logging.getLogger(__name__)


@click.command("call", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("export_name", metavar="EXPORT")
@click.argument("args", nargs=-1)
@click.pass_context
def cli_call(ctx: click.Context, export_name: str, args: tuple[str, ...]) -> None:
    r"""Call EXPORT with ARGS through the marshalling boundary.

    Arguments are handed over as the raw bytes the operating system
    passed in and decoded with ``bridge.encoding``; the result is written
    to stdout encoded the same way.

    \b
    Example:
        $ greetbridge call greet World
        Hello, World! This is Python speaking!
    """
    cli_ctx = get_cli_context(ctx)
    settings = load_bridge_settings(cli_ctx)
    registry = cli_ctx.services.build_exports(settings)

    extra = {"command": "call", "export": export_name, "encoding": settings.encoding}
    with lib_log_rich.runtime.bind(job_id="cli-call", extra=extra):
        logger.info("Calling export", extra={"export": export_name, "arg_count": len(args)})
        try:
            result = registry.call(export_name, *(os.fsencode(arg) for arg in args), encoding=settings.encoding)
        except BoundaryError as exc:
            exit_for_boundary_error(exc)
        stdout = click.get_binary_stream("stdout")
        stdout.write(result + CALL_RESULT_TERMINATOR)
        stdout.flush()


@click.command("exports", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_exports(ctx: click.Context) -> None:
    """List the names of all exported functions."""
    cli_ctx = get_cli_context(ctx)
    registry = cli_ctx.services.build_exports(load_bridge_settings(cli_ctx))
    with lib_log_rich.runtime.bind(job_id="cli-exports", extra={"command": "exports"}):
        logger.info("Listing exports", extra={"count": len(registry)})
        for name in registry.names():
            click.echo(name)


@click.command("serve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "wire_format",
    type=click.Choice([f.value for f in WireFormat], case_sensitive=False),
    default=None,
    help="Line format spoken on stdin/stdout (default: bridge.wire_format)",
)
@click.pass_context
def cli_serve(ctx: click.Context, wire_format: str | None) -> None:
    r"""Answer requests from stdin on stdout until stdin is closed.

    \b
    text: one name per line in, one greeting per line out
    json: {"id": 1, "call": "greet", "args": ["World"]} per line in,
          {"id": 1, "result": "..."} or {"id": 1, "error": {...}} out

    Exits with 65 when at least one request was rejected.
    """
    cli_ctx = get_cli_context(ctx)
    settings = load_bridge_settings(cli_ctx)
    fmt = WireFormat(wire_format.lower()) if wire_format else settings.wire_format
    registry = cli_ctx.services.build_exports(settings)

    extra = {"command": "serve", "wire_format": fmt.value, "encoding": settings.encoding}
    with lib_log_rich.runtime.bind(job_id="cli-serve", extra=extra):
        try:
            stats = serve_stream(
                registry,
                click.get_binary_stream("stdin"),
                click.get_binary_stream("stdout"),
                encoding=settings.encoding,
                wire_format=fmt,
            )
        except ConfigurationError as exc:
            logger.error("Cannot start bridge", extra={"error": str(exc)})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc
        if stats.failed:
            raise SystemExit(ExitCode.DATA_ERROR)


__all__ = ["cli_call", "cli_exports", "cli_serve"]
