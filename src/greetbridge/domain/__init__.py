"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - The greeting function and its constants
    * :mod:`.enums` - Domain enumerations (OutputFormat, WireFormat)
    * :mod:`.errors` - Boundary and configuration exception types
"""

from __future__ import annotations

from .behaviors import DEFAULT_SPEAKER, GREETING_PREFIX, greet, greeting_suffix
from .enums import OutputFormat, WireFormat
from .errors import (
    BoundaryError,
    ConfigurationError,
    ExportArgumentError,
    MarshallingError,
    UnknownExportError,
)

__all__ = [
    # Behaviors
    "DEFAULT_SPEAKER",
    "GREETING_PREFIX",
    "greet",
    "greeting_suffix",
    # Enums
    "OutputFormat",
    "WireFormat",
    # Errors
    "BoundaryError",
    "ConfigurationError",
    "ExportArgumentError",
    "MarshallingError",
    "UnknownExportError",
]
