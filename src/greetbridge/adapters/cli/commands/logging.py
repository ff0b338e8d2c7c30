"""``greetbridge logdemo``: preview lib_log_rich console themes."""

from __future__ import annotations

import lib_log_rich
import lib_log_rich.runtime
import rich_click as click

from ..constants import CLICK_CONTEXT_SETTINGS


@click.command("logdemo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--theme", default="classic", show_default=True, help="Theme name passed to lib_log_rich")
def cli_logdemo(theme: str) -> None:
    """Print one sample record per level in the chosen theme."""
    # The demo owns its runtime; the one the root group started has to go first.
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()

    outcome = lib_log_rich.logdemo(theme=theme)
    click.echo(f"\nLog demo completed (theme: {outcome.theme})")


__all__ = ["cli_logdemo"]
