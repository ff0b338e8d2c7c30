"""lib_log_rich runtime setup and the ``[lib_log_rich]`` config model."""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
