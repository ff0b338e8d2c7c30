"""Domain-specific exceptions for typed error handling at boundaries.

The greeting itself never fails. Everything here is raised by the layer that
moves values in and out of the process.
"""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[bridge]`` section holds values that cannot be used,
    such as an unknown codec name. Caught at CLI boundaries and reported
    with a configuration exit code.

    Example:
        >>> err = ConfigurationError("unknown encoding: klingon-8")
        >>> str(err)
        'unknown encoding: klingon-8'
    """


class BoundaryError(Exception):
    """Base class for failures raised while crossing the export boundary.

    Example:
        >>> issubclass(MarshallingError, BoundaryError)
        True
    """


class MarshallingError(BoundaryError, ValueError):
    """A value could not be converted between bytes and text.

    Inherits from ValueError so callers treating bad input generically
    keep working.

    Example:
        >>> err = MarshallingError("payload is not valid utf-8")
        >>> isinstance(err, ValueError)
        True
    """


class UnknownExportError(BoundaryError, LookupError):
    """No function is exported under the requested name.

    Example:
        >>> err = UnknownExportError("no export named 'wave'")
        >>> isinstance(err, LookupError)
        True
    """


class ExportArgumentError(BoundaryError, TypeError):
    """The arguments do not match the exported function's signature.

    Example:
        >>> err = ExportArgumentError("greet() takes 1 argument, got 2")
        >>> isinstance(err, TypeError)
        True
    """


__all__ = [
    "BoundaryError",
    "ConfigurationError",
    "ExportArgumentError",
    "MarshallingError",
    "UnknownExportError",
]
