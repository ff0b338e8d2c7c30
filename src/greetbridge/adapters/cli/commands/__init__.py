"""Subcommands attached to the root group.

``greet``, ``info`` and ``fail`` live in :mod:`.info`. ``call``, ``exports``
and ``serve`` drive the export registry from :mod:`.bridge`. Configuration
display is :mod:`.config` and the log showcase is :mod:`.logging`.
"""

from __future__ import annotations

from .bridge import cli_call, cli_exports, cli_serve
from .config import cli_config
from .info import cli_fail, cli_greet, cli_info
from .logging import cli_logdemo

__all__ = [
    "cli_call",
    "cli_config",
    "cli_exports",
    "cli_fail",
    "cli_greet",
    "cli_info",
    "cli_logdemo",
    "cli_serve",
]
