"""What the CLI needs from the outside world, as callable Protocols.

Every port is satisfied by a plain function (or bound method) with the same
signature, so adapters never subclass anything. ``Config``, ``BridgeConfig``
and ``ExportRegistry`` belong to adapters and are imported for type checking
only.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.bridge.config import BridgeConfig
    from ..adapters.bridge.exports import ExportRegistry


class GetConfig(Protocol):
    """Merged configuration for an optional profile."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class GetDefaultConfigPath(Protocol):
    """Location of the bundled ``defaultconfig.toml``."""

    def __call__(self) -> Path: ...


class DisplayConfig(Protocol):
    """Render a configuration, or one section of it, to the terminal."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class InitLogging(Protocol):
    """Start logging from the ``[lib_log_rich]`` section; repeat calls do nothing."""

    def __call__(self, config: Config) -> None: ...


class LoadBridgeConfigFromDict(Protocol):
    """Validate the ``[bridge]`` section into a BridgeConfig."""

    def __call__(self, config_dict: Mapping[str, Any]) -> BridgeConfig: ...


class BuildExports(Protocol):
    """Build the registry of functions reachable from a host."""

    def __call__(self, config: BridgeConfig | None = ...) -> ExportRegistry: ...


__all__ = [
    "BuildExports",
    "DisplayConfig",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadBridgeConfigFromDict",
]
