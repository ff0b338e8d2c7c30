"""Shared helpers for CLI command modules.

Contents:
    * :func:`load_bridge_settings` - Resolve ``[bridge]`` or exit with CONFIG_ERROR.
    * :func:`exit_for_boundary_error` - Report a BoundaryError and exit.
"""

from __future__ import annotations

import logging
from typing import NoReturn

import rich_click as click

from greetbridge.adapters.bridge.config import BridgeConfig
from greetbridge.domain.errors import BoundaryError, ConfigurationError, MarshallingError

from ..context import CLIContext
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def load_bridge_settings(cli_ctx: CLIContext) -> BridgeConfig:
    """Validate the ``[bridge]`` section of the active configuration.

    Raises:
        SystemExit: With CONFIG_ERROR (78) if the section is invalid.
    """
    section = cli_ctx.config.get("bridge", default={}) or {}
    try:
        return cli_ctx.services.load_bridge_config_from_dict(section)
    except ConfigurationError as exc:
        logger.error("Invalid bridge configuration", extra={"error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def exit_for_boundary_error(exc: BoundaryError) -> NoReturn:
    """Print ``exc`` to stderr and exit with the matching code.

    Marshalling failures exit with DATA_ERROR (65); unknown exports and bad
    argument counts exit with INVALID_ARGUMENT (22).
    """
    code = ExitCode.DATA_ERROR if isinstance(exc, MarshallingError) else ExitCode.INVALID_ARGUMENT
    logger.error("Export call rejected", extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"Error: {exc}", err=True)
    raise SystemExit(code) from exc


__all__ = ["exit_for_boundary_error", "load_bridge_settings"]
