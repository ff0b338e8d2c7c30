"""``info``, ``greet`` and ``fail``: commands that need no export registry."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from greetbridge import __init__conf__
from greetbridge.domain.behaviors import greet

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import load_bridge_settings

logger = logging.getLogger(__name__)


@click.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Show name, version, homepage and author of the installed package."""
    with lib_log_rich.runtime.bind(job_id="cli-info", extra={"command": "info"}):
        logger.info("Printing package metadata")
        __init__conf__.print_info()


def _non_blank_speaker(_ctx: click.Context, _param: click.Parameter, value: str | None) -> str | None:
    # Same rule as bridge.speaker in configuration.
    if value is not None and not value.strip():
        raise click.BadParameter("speaker label must not be empty")
    return value


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.option(
    "--speaker",
    default=None,
    callback=_non_blank_speaker,
    help="Speaker label for this call; defaults to bridge.speaker",
)
@click.pass_context
def cli_greet(ctx: click.Context, name: str, speaker: str | None) -> None:
    r"""Greet NAME directly, without going through the export registry.

    \b
        $ greetbridge greet World
        Hello, World! This is Python speaking!
    """
    if speaker is None:
        speaker = load_bridge_settings(get_cli_context(ctx)).speaker
    with lib_log_rich.runtime.bind(job_id="cli-greet", extra={"command": "greet", "speaker": speaker}):
        logger.info("Greeting", extra={"name_length": len(name)})
        click.echo(greet(name, speaker=speaker))


@click.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Raise ``RuntimeError`` to exercise exit codes and traceback output."""
    with lib_log_rich.runtime.bind(job_id="cli-fail", extra={"command": "fail"}):
        logger.warning("Failing on purpose")
        raise RuntimeError("I should fail")


__all__ = ["cli_fail", "cli_greet", "cli_info"]
