"""In-memory bridge adapters for testing.

Contents:
    * :class:`ExportSpy` - Builds registries whose exports record every call.
    * :func:`load_bridge_config_from_dict_in_memory` - Config loader without
      error wrapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ...domain.behaviors import greet
from ..bridge.config import BridgeConfig
from ..bridge.exports import ExportRegistry


@dataclass
class ExportSpy:
    """Records registry construction and export calls.

    ``build_exports`` matches the BuildExports port, so the spy can replace
    the production registry factory inside AppServices.

    Attributes:
        built_with: BridgeConfig passed to every ``build_exports`` call.
        calls: ``(export_name, args)`` for every export invocation.

    Example:
        >>> spy = ExportSpy()
        >>> spy.build_exports().invoke("greet", "World")
        'Hello, World! This is Python speaking!'
        >>> spy.calls
        [('greet', ('World',))]
    """

    built_with: list[BridgeConfig] = field(default_factory=list)
    calls: list[tuple[str, tuple[str, ...]]] = field(default_factory=list)

    def clear(self) -> None:
        """Reset captured data for the next test."""
        self.built_with.clear()
        self.calls.clear()

    def build_exports(self, config: BridgeConfig | None = None) -> ExportRegistry:
        settings = config if config is not None else BridgeConfig()
        self.built_with.append(settings)
        registry = ExportRegistry()

        def _greet(name: str) -> str:
            self.calls.append(("greet", (name,)))
            return greet(name, speaker=settings.speaker)

        registry.register(_greet, name="greet")
        return registry


def load_bridge_config_from_dict_in_memory(config_dict: Mapping[str, Any]) -> BridgeConfig:
    """Validate directly through pydantic, letting ValidationError surface."""
    return BridgeConfig.model_validate(dict(config_dict))


__all__ = [
    "ExportSpy",
    "load_bridge_config_from_dict_in_memory",
]
