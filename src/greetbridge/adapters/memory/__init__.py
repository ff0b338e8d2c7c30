"""Port implementations that never touch disk or the logging runtime.

``build_testing`` assembles these. :class:`ExportSpy` records every
registry it builds and every export invoked through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .bridge import ExportSpy, load_bridge_config_from_dict_in_memory
from .config import display_config_in_memory, get_config_in_memory, get_default_config_path_in_memory
from .logging import init_logging_in_memory

if TYPE_CHECKING:
    from greetbridge.application import ports

    _config_port: ports.GetConfig = get_config_in_memory
    _path_port: ports.GetDefaultConfigPath = get_default_config_path_in_memory
    _display_port: ports.DisplayConfig = display_config_in_memory
    _logging_port: ports.InitLogging = init_logging_in_memory
    _bridge_config_port: ports.LoadBridgeConfigFromDict = load_bridge_config_from_dict_in_memory
    _exports_port: ports.BuildExports = ExportSpy().build_exports

__all__ = [
    "ExportSpy",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
    "load_bridge_config_from_dict_in_memory",
]
