"""``greetbridge config``: print the merged configuration."""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from greetbridge.adapters.config.overrides import apply_overrides
from greetbridge.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_FORMAT_CHOICES = [member.value for member in OutputFormat]


def _config_for_profile(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    # A subcommand profile means a fresh read; root --set values go back on top.
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    try:
        reloaded = cli_ctx.services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc
    return apply_overrides(reloaded, cli_ctx.set_overrides), profile


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(_FORMAT_CHOICES, case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    show_default=True,
    help="Render as annotated TOML-like text or as JSON",
)
@click.option("--section", default=None, metavar="NAME", help="Limit output to one section, e.g. 'bridge'")
@click.option(
    "--profile",
    default=None,
    metavar="NAME",
    help="Reload configuration for this profile instead of the one given to the root command",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show configuration after every layer and ``--set`` override is merged.

    Layers, lowest first: bundled defaults, app, host, user, ``.env``,
    environment variables, ``--set``.
    """
    cli_ctx = get_cli_context(ctx)
    config, active_profile = _config_for_profile(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    with lib_log_rich.runtime.bind(
        job_id="cli-config",
        extra={"command": "config", "format": fmt.value, "profile": active_profile},
    ):
        logger.info("Rendering configuration", extra={"section": section})
        click.echo()
        try:
            cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=active_profile)
        except ValueError as exc:
            click.echo(f"\nError: {exc}", err=True)
            raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


__all__ = ["cli_config"]
