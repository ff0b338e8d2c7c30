"""Public package surface exposing the greeting, its export boundary, and configuration.

Imports are routed through the architectural layers:
- Domain exports: the pure greeting function and its constants
- Adapter exports: the export registry hosts call through
- Composition exports: wired configuration loader
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports (boundary)
from .adapters.bridge import BridgeConfig, ExportRegistry, build_exports

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    DEFAULT_SPEAKER,
    GREETING_PREFIX,
    greet,
    greeting_suffix,
)

__all__ = [
    "BridgeConfig",
    "DEFAULT_SPEAKER",
    "ExportRegistry",
    "GREETING_PREFIX",
    "build_exports",
    "get_config",
    "greet",
    "greeting_suffix",
    "print_info",
]
