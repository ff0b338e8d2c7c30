"""Config display wrapper: delegation to lib_layered_config and section errors."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from greetbridge.adapters.config.display import display_config
from greetbridge.domain.enums import OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_unknown_section_raises_value_error(
    config_factory: Callable[[dict[str, Any]], Config],
    output_format: OutputFormat,
) -> None:
    config = config_factory({"bridge": {"speaker": "Rust"}})

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=output_format, section="email")


@pytest.mark.os_agnostic
def test_human_format_renders_toml_tables(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"bridge": {"speaker": "Rust", "encoding": "utf-8"}}, {})

    display_config(config, output_format=OutputFormat.HUMAN)

    output = capsys.readouterr().out
    assert "[bridge]" in output
    assert 'speaker = "Rust"' in output


@pytest.mark.os_agnostic
def test_json_format_renders_keys_and_values(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"bridge": {"wire_format": "json"}}, {})

    display_config(config, output_format=OutputFormat.JSON)

    output = capsys.readouterr().out
    assert '"bridge"' in output
    assert '"wire_format": "json"' in output


@pytest.mark.os_agnostic
def test_section_with_falsey_values_is_still_shown(capsys: pytest.CaptureFixture[str]) -> None:
    config = Config({"lib_log_rich": {"queue_enabled": False, "ring_buffer_size": 0}}, {})

    display_config(config, output_format=OutputFormat.JSON, section="lib_log_rich")

    output = capsys.readouterr().out
    assert '"queue_enabled": false' in output
    assert '"ring_buffer_size": 0' in output
