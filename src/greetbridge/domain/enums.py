"""String enums shared by the CLI options and the bridge."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """How ``greetbridge config`` renders: annotated text or JSON.

    Members compare equal to their plain string values.

    >>> OutputFormat.HUMAN.value
    'human'
    >>> OutputFormat.JSON == "json"
    True
    """

    HUMAN = "human"
    JSON = "json"


class WireFormat(str, Enum):
    """Line format spoken by the stdio bridge.

    Attributes:
        TEXT: One name per line in, one greeting per line out.
        JSON: One JSON request object per line in, one JSON response out.

    >>> WireFormat("json") is WireFormat.JSON
    True
    """

    TEXT = "text"
    JSON = "json"


__all__ = [
    "OutputFormat",
    "WireFormat",
]
