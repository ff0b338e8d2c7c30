"""Export registry stories: registration, text calls, and byte calls."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from greetbridge.adapters.bridge.config import BridgeConfig
from greetbridge.adapters.bridge.exports import ExportRegistry, build_exports
from greetbridge.domain.behaviors import greet
from greetbridge.domain.errors import ExportArgumentError, MarshallingError, UnknownExportError


@pytest.fixture
def registry() -> ExportRegistry:
    return build_exports()


@pytest.mark.os_agnostic
def test_build_exports_exposes_only_greet(registry: ExportRegistry) -> None:
    assert registry.names() == ["greet"]
    assert "greet" in registry
    assert len(registry) == 1


@pytest.mark.os_agnostic
def test_invoke_delegates_to_the_pure_core(registry: ExportRegistry) -> None:
    assert registry.invoke("greet", "World") == greet("World")


@pytest.mark.os_agnostic
def test_call_marshals_bytes_both_ways(registry: ExportRegistry) -> None:
    assert registry.call("greet", "Zoë".encode()) == "Hello, Zoë! This is Python speaking!".encode()


@pytest.mark.os_agnostic
def test_call_uses_requested_encoding(registry: ExportRegistry) -> None:
    result = registry.call("greet", b"Zo\xeb", encoding="latin-1")

    assert result == "Hello, Zoë! This is Python speaking!".encode("latin-1")


@pytest.mark.os_agnostic
def test_call_rejects_undecodable_payload(registry: ExportRegistry) -> None:
    with pytest.raises(MarshallingError):
        registry.call("greet", b"\xff\xfe")


@pytest.mark.os_agnostic
def test_call_rejects_result_outside_target_codec(registry: ExportRegistry) -> None:
    """ASCII input is fine, but a non-ASCII speaker label cannot be encoded."""
    accented = build_exports(BridgeConfig(speaker="Pythön"))

    with pytest.raises(MarshallingError):
        accented.call("greet", b"World", encoding="ascii")


@pytest.mark.os_agnostic
@pytest.mark.parametrize("encoding", ["hex", "base64", "rot13"])
def test_call_with_a_non_text_codec_stays_a_boundary_error(registry: ExportRegistry, encoding: str) -> None:
    with pytest.raises(MarshallingError, match="not a usable text encoding"):
        registry.call("greet", b"World", encoding=encoding)


@pytest.mark.os_agnostic
@given(name=st.text())
@settings(max_examples=300)
def test_byte_call_matches_encoded_pure_greeting(name: str) -> None:
    payload = name.encode()

    assert build_exports().call("greet", payload) == greet(payload.decode()).encode()


@pytest.mark.os_agnostic
def test_unknown_export_raises_lookup_error(registry: ExportRegistry) -> None:
    with pytest.raises(UnknownExportError, match="'wave'"):
        registry.invoke("wave", "World")

    with pytest.raises(LookupError):
        registry.call("wave")


@pytest.mark.os_agnostic
@pytest.mark.parametrize("args", [(), ("a", "b")], ids=["missing", "extra"])
def test_wrong_argument_count_raises_export_argument_error(registry: ExportRegistry, args: tuple[str, ...]) -> None:
    with pytest.raises(ExportArgumentError, match=r"^greet\(\): "):
        registry.invoke("greet", *args)


@pytest.mark.os_agnostic
def test_configured_speaker_reaches_the_greeting() -> None:
    registry = build_exports(BridgeConfig(speaker="Rust"))

    assert registry.invoke("greet", "World") == "Hello, World! This is Rust speaking!"


@pytest.mark.os_agnostic
def test_export_decorator_returns_function_unchanged() -> None:
    registry = ExportRegistry()

    def echo(text: str) -> str:
        return text

    decorated = registry.export()(echo)

    assert decorated is echo
    assert registry.invoke("echo", "x") == "x"


@pytest.mark.os_agnostic
def test_export_decorator_accepts_explicit_name() -> None:
    registry = ExportRegistry()

    @registry.export("shout")
    def _loud(text: str) -> str:
        return text.upper()

    assert registry.names() == ["shout"]
    assert registry.call("shout", b"hi") == b"HI"


@pytest.mark.os_agnostic
def test_registering_a_name_twice_is_refused() -> None:
    registry = ExportRegistry()
    registry.register(lambda text: text.upper(), name="upper")

    with pytest.raises(ValueError, match="already registered"):
        registry.register(lambda text: text.lower(), name="upper")


@pytest.mark.os_agnostic
def test_iteration_yields_exports_in_name_order() -> None:
    registry = ExportRegistry()
    registry.register(lambda text: text, name="zeta")
    registry.register(lambda text: text, name="alpha")

    assert [exported.name for exported in registry] == ["alpha", "zeta"]
