"""Fixtures shared by the CLI, bridge and module-entry tests.

CLI fixtures return services *factories*, because the root group expects a
callable in ``obj``. Most of them swap only the configuration loader, so the
rest of a run (logging included) goes through production adapters.
"""

from __future__ import annotations

import contextlib
import dataclasses
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from dotenv import load_dotenv
from lib_layered_config import Config

if TYPE_CHECKING:
    from greetbridge.adapters.memory.bridge import ExportSpy
    from greetbridge.composition import AppServices

ServicesFactory = Callable[[], "AppServices"]

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ANSI = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")

if (_PROJECT_ROOT / ".env").is_file():
    load_dotenv(_PROJECT_ROOT / ".env")


def pytest_configure(config: pytest.Config) -> None:
    """Point coverage at a fresh database under the system temp directory.

    Network-mounted checkouts cannot give SQLite the locks it needs.
    """
    if "COVERAGE_FILE" in os.environ:
        return
    database = Path(tempfile.gettempdir()) / ".coverage.greetbridge"
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            database.with_name(database.name + suffix).unlink()
    os.environ["COVERAGE_FILE"] = str(database)


def _fixed_config_services(config: Config, **ports: Any) -> ServicesFactory:
    """Production services whose loader always answers ``config``."""
    from greetbridge.composition import build_production

    def fixed_get_config(**_ignored: Any) -> Config:
        return config

    services = dataclasses.replace(build_production(), get_config=fixed_get_config, **ports)
    return lambda: services


@pytest.fixture
def cli_runner() -> CliRunner:
    """A CliRunner with separate streams; assert on ``result.stdout``, logs go to stderr."""
    return CliRunner()


@pytest.fixture
def production_factory() -> ServicesFactory:
    from greetbridge.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    return lambda text: _ANSI.sub("", text)


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Start from lib_cli_exit_tools defaults with tracebacks off; undo all changes after."""
    lib_cli_exit_tools.reset_config()
    settings = lib_cli_exit_tools.config
    settings.traceback = False
    settings.traceback_force_color = False
    saved = {field.name: getattr(settings, field.name) for field in dataclasses.fields(settings)}
    yield
    for name, value in saved.items():
        setattr(settings, name, value)


@pytest.fixture
def clear_config_cache() -> None:
    from greetbridge.adapters.config.loader import get_config

    get_config.cache_clear()


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Build a Config straight from a dict, with empty provenance."""
    return lambda data: Config(data, {})


@pytest.fixture
def config_cli_context(clear_config_cache: None) -> Callable[[dict[str, Any]], ServicesFactory]:
    """Turn a whole configuration dict into a services factory.

    ``factory = config_cli_context({"bridge": {"speaker": "Rust"}})`` then
    ``cli_runner.invoke(cli, ["greet", "World"], obj=factory)``.
    """
    return lambda data: _fixed_config_services(Config(data, {}))


@pytest.fixture
def inject_config_with_profile_capture(
    clear_config_cache: None,
) -> Callable[[Config, list[str | None]], ServicesFactory]:
    """Like :func:`config_cli_context`, but every requested profile is appended to a list."""
    from greetbridge.composition import build_production

    def inject(config: Config, seen_profiles: list[str | None]) -> ServicesFactory:
        def recording_get_config(*, profile: str | None = None, **_ignored: Any) -> Config:
            seen_profiles.append(profile)
            return config

        services = dataclasses.replace(build_production(), get_config=recording_get_config)
        return lambda: services

    return inject


@dataclasses.dataclass
class BridgeCliContext:
    factory: ServicesFactory
    spy: ExportSpy


@pytest.fixture
def bridge_cli_context(clear_config_cache: None) -> Callable[[dict[str, Any]], BridgeCliContext]:
    """Build a services factory from a ``[bridge]`` section, with exports spied on.

    ``ctx = bridge_cli_context({"speaker": "Rust"})``, invoke with
    ``obj=ctx.factory``, then inspect ``ctx.spy.calls``.
    """
    from greetbridge.adapters.memory import ExportSpy

    def create(bridge_section: dict[str, Any]) -> BridgeCliContext:
        spy = ExportSpy()
        factory = _fixed_config_services(Config({"bridge": bridge_section}, {}), build_exports=spy.build_exports)
        return BridgeCliContext(factory=factory, spy=spy)

    return create
