"""Port contract tests for the in-memory adapters and the composition root.

Production adapters are exercised through the CLI tests; static
conformance to the Protocols is checked by pyright.
"""

from __future__ import annotations

from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
from lib_layered_config import Config
from pydantic import ValidationError

from greetbridge.adapters.bridge.config import BridgeConfig
from greetbridge.adapters.bridge.exports import ExportRegistry
from greetbridge.adapters.memory import (
    ExportSpy,
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
    init_logging_in_memory,
    load_bridge_config_from_dict_in_memory,
)
from greetbridge.composition import AppServices, build_production, build_testing

if TYPE_CHECKING:
    from greetbridge.application.ports import GetConfig, GetDefaultConfigPath


@pytest.fixture
def get_config_impl() -> GetConfig:
    return get_config_in_memory


@pytest.fixture
def get_default_config_path_impl() -> GetDefaultConfigPath:
    return get_default_config_path_in_memory


# ======================== in-memory adapters ========================


@pytest.mark.os_agnostic
def test_get_config_returns_empty_config(get_config_impl: GetConfig) -> None:
    config = get_config_impl(profile="anything")

    assert isinstance(config, Config)
    assert config.as_dict() == {}


@pytest.mark.os_agnostic
def test_get_default_config_path_points_at_toml(get_default_config_path_impl: GetDefaultConfigPath) -> None:
    path = get_default_config_path_impl()

    assert isinstance(path, Path)
    assert path.name == "defaultconfig.toml"


@pytest.mark.os_agnostic
def test_display_and_logging_doubles_are_silent(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"bridge": {"speaker": "Rust"}}, {})

    display_config_in_memory(config, section="bridge")
    init_logging_in_memory(config)

    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_in_memory_bridge_loader_surfaces_validation_errors() -> None:
    assert load_bridge_config_from_dict_in_memory({"speaker": "Rust"}) == BridgeConfig(speaker="Rust")

    with pytest.raises(ValidationError):
        load_bridge_config_from_dict_in_memory({"encoding": "klingon-8"})


# ======================== ExportSpy ========================


@pytest.mark.os_agnostic
def test_export_spy_records_builds_and_calls() -> None:
    spy = ExportSpy()

    registry = spy.build_exports(BridgeConfig(speaker="Rust"))

    assert isinstance(registry, ExportRegistry)
    assert registry.call("greet", b"World") == b"Hello, World! This is Rust speaking!"
    assert spy.calls == [("greet", ("World",))]
    assert spy.built_with == [BridgeConfig(speaker="Rust")]


@pytest.mark.os_agnostic
def test_export_spy_defaults_to_bundled_settings() -> None:
    spy = ExportSpy()

    spy.build_exports().invoke("greet", "World")

    assert spy.built_with == [BridgeConfig()]


@pytest.mark.os_agnostic
def test_export_spy_does_not_record_rejected_calls() -> None:
    spy = ExportSpy()
    registry = spy.build_exports()

    with pytest.raises(TypeError):
        registry.invoke("greet")

    assert spy.calls == []


@pytest.mark.os_agnostic
def test_export_spy_clear_resets_state() -> None:
    spy = ExportSpy()
    spy.build_exports().invoke("greet", "World")

    spy.clear()

    assert spy.calls == []
    assert spy.built_with == []


# ======================== composition ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize("factory", [build_production, build_testing], ids=["production", "testing"])
def test_every_service_is_callable(factory: object) -> None:
    services = factory()  # type: ignore[operator]

    assert isinstance(services, AppServices)
    for field in fields(AppServices):
        assert callable(getattr(services, field.name)), field.name


@pytest.mark.os_agnostic
def test_build_testing_wires_the_given_spy() -> None:
    spy = ExportSpy()
    services = build_testing(spy=spy)

    services.build_exports().invoke("greet", "World")

    assert spy.calls == [("greet", ("World",))]


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    services = build_testing()

    with pytest.raises(AttributeError):
        services.build_exports = ExportSpy().build_exports  # type: ignore[misc]
