"""Configuration doubles: an empty Config, a fake defaults path, a silent display."""

from __future__ import annotations

import tempfile
from pathlib import Path

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Return an empty Config, so every ``[bridge]`` value takes its default.

    Example:
        >>> get_config_in_memory(profile="staging").as_dict()
        {}
    """
    return Config({}, {})


def get_default_config_path_in_memory() -> Path:
    # Never read; only the name matters to callers.
    return Path(tempfile.gettempdir()) / "greetbridge" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Accept the display call and print nothing."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
