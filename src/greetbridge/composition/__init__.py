"""Where greetbridge's ports meet concrete adapters.

Entry points call :func:`build_production`; tests call :func:`build_testing`
and usually keep the :class:`~greetbridge.adapters.memory.ExportSpy` around
to inspect what the bridge exported and called.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.bridge.config import load_bridge_config_from_dict
from ..adapters.bridge.exports import build_exports
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config, get_default_config_path
from ..adapters.logging.setup import init_logging

if TYPE_CHECKING:
    from ..adapters.memory.bridge import ExportSpy
    from ..application.ports import (
        BuildExports,
        DisplayConfig,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
        LoadBridgeConfigFromDict,
    )

    # pyright verifies each production adapter against its port here.
    _get_config: GetConfig = get_config
    _get_default_config_path: GetDefaultConfigPath = get_default_config_path
    _display_config: DisplayConfig = display_config
    _init_logging: InitLogging = init_logging
    _load_bridge_config: LoadBridgeConfigFromDict = load_bridge_config_from_dict
    _build_exports: BuildExports = build_exports


@dataclass(frozen=True, slots=True)
class AppServices:
    """One implementation per port, fixed for the lifetime of a CLI run."""

    get_config: GetConfig
    get_default_config_path: GetDefaultConfigPath
    display_config: DisplayConfig
    init_logging: InitLogging
    load_bridge_config_from_dict: LoadBridgeConfigFromDict
    build_exports: BuildExports


def build_production() -> AppServices:
    return AppServices(
        get_config=get_config,
        get_default_config_path=get_default_config_path,
        display_config=display_config,
        init_logging=init_logging,
        load_bridge_config_from_dict=load_bridge_config_from_dict,
        build_exports=build_exports,
    )


def build_testing(*, spy: ExportSpy | None = None) -> AppServices:
    """Services backed by in-memory adapters.

    Args:
        spy: Recorder whose ``build_exports`` becomes the export port. A new
            one is made when omitted.
    """
    from ..adapters import memory

    recorder = memory.ExportSpy() if spy is None else spy
    return AppServices(
        get_config=memory.get_config_in_memory,
        get_default_config_path=memory.get_default_config_path_in_memory,
        display_config=memory.display_config_in_memory,
        init_logging=memory.init_logging_in_memory,
        load_bridge_config_from_dict=memory.load_bridge_config_from_dict_in_memory,
        build_exports=recorder.build_exports,
    )


__all__ = ["AppServices", "build_production", "build_testing"]
