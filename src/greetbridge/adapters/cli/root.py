"""The ``greetbridge`` command group.

Every invocation passes through :func:`cli` first. It resolves the layered
configuration for the requested profile, folds in ``--set`` values, brings
up logging and then leaves a :class:`~.context.CLIContext` behind for
whichever subcommand follows.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from greetbridge import __init__conf__
from greetbridge.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from greetbridge.composition import AppServices

_VERSION_MESSAGE = f"{__init__conf__.shell_command} version {__init__conf__.version}"


def _resolve_services(ctx: click.Context) -> AppServices:
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    return factory()


def _load_session_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Read configuration for ``profile`` and merge ``--set`` on top.

    Bad profile names and malformed overrides surface as click usage
    errors so they exit with status 2 like any other bad option.
    """
    try:
        loaded = services.get_config(profile=profile)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--profile") from exc
    try:
        return apply_overrides(loaded, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=_VERSION_MESSAGE,
)
@click.option(
    "--traceback/--no-traceback",
    default=False,
    help="Print the full traceback when a command fails",
)
@click.option(
    "--profile",
    default=None,
    metavar="NAME",
    help="Read the configuration layers of a named profile such as 'staging'",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    metavar="SECTION.KEY=VALUE",
    help="Override one configuration value, e.g. bridge.speaker=Rust. May be repeated.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Prepare configuration and logging, then run the chosen subcommand."""
    services = _resolve_services(ctx)
    config = _load_session_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _register_commands() -> None:
    # Imported here because the command modules import this package.
    from . import commands

    for name in commands.__all__:
        cli.add_command(getattr(commands, name))


_register_commands()


__all__ = ["cli"]
