"""Boundary adapter - exports, marshalling, and the stdio bridge.

Contents:
    * :mod:`.config` - BridgeConfig model and loader
    * :mod:`.marshal` - Strict bytes/text conversion
    * :mod:`.exports` - Registry of externally callable functions
    * :mod:`.stdio` - Line protocol for host processes
"""

from __future__ import annotations

from .config import BridgeConfig, load_bridge_config_from_dict
from .exports import ExportedFunction, ExportRegistry, build_exports
from .marshal import decode_text, encode_text
from .stdio import BridgeRequest, BridgeResponse, ServeStats, handle_request, serve_stream

__all__ = [
    "BridgeConfig",
    "BridgeRequest",
    "BridgeResponse",
    "ExportRegistry",
    "ExportedFunction",
    "ServeStats",
    "build_exports",
    "decode_text",
    "encode_text",
    "handle_request",
    "load_bridge_config_from_dict",
    "serve_stream",
]
