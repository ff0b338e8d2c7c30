"""Bridge configuration model and loader.

Provides the BridgeConfig Pydantic model for validated, immutable boundary
settings and the loader function to create it from the ``[bridge]``
configuration section.
"""

from __future__ import annotations

import codecs
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from greetbridge.domain.behaviors import DEFAULT_SPEAKER
from greetbridge.domain.enums import WireFormat
from greetbridge.domain.errors import ConfigurationError


class BridgeConfig(BaseModel):
    """Validated, immutable boundary configuration.

    Example:
        >>> config = BridgeConfig(encoding="UTF8")
        >>> config.encoding
        'utf-8'
        >>> config.speaker
        'Python'
        >>> config.wire_format
        <WireFormat.TEXT: 'text'>
    """

    model_config = ConfigDict(frozen=True)

    speaker: str = DEFAULT_SPEAKER
    encoding: str = "utf-8"
    wire_format: WireFormat = WireFormat.TEXT

    @field_validator("speaker")
    @classmethod
    def _require_speaker(cls, v: str) -> str:
        """Reject empty or whitespace-only labels."""
        if not v.strip():
            raise ValueError("speaker label must not be empty")
        return v

    @field_validator("encoding")
    @classmethod
    def _normalize_encoding(cls, v: str) -> str:
        """Resolve codec aliases to their canonical name.

        Only codecs that convert between ``str`` and ``bytes`` are accepted.

        Examples:
            >>> BridgeConfig._normalize_encoding("latin1")
            'iso8859-1'
            >>> BridgeConfig._normalize_encoding("UTF_8")
            'utf-8'
            >>> BridgeConfig._normalize_encoding("hex")  # doctest: +IGNORE_EXCEPTION_DETAIL
            Traceback (most recent call last):
            ...
            ValueError: not a text encoding: hex
        """
        try:
            name = codecs.lookup(v).name
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {v}") from exc
        # hex, base64, rot13 and friends resolve but refuse str <-> bytes.
        try:
            "".encode(name)
            b"".decode(name)
        except LookupError as exc:
            raise ValueError(f"not a text encoding: {v}") from exc
        return name

    @field_validator("wire_format", mode="before")
    @classmethod
    def _lowercase_wire_format(cls, v: Any) -> Any:
        """Accept ``JSON`` or ``Text`` from environment variables."""
        if isinstance(v, str):
            return v.strip().lower()
        return v


def load_bridge_config_from_dict(config_dict: Mapping[str, Any]) -> BridgeConfig:
    """Load BridgeConfig from the ``[bridge]`` configuration section.

    Args:
        config_dict: Mapping of bridge settings, usually
            ``config.get("bridge", default={})``.

    Returns:
        Validated BridgeConfig.

    Raises:
        ConfigurationError: If any value fails validation.

    Example:
        >>> load_bridge_config_from_dict({"speaker": "Rust"}).speaker
        'Rust'
        >>> load_bridge_config_from_dict({"encoding": "no-such-codec"})  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        greetbridge.domain.errors.ConfigurationError: invalid [bridge] configuration
    """
    try:
        return BridgeConfig.model_validate(dict(config_dict))
    except ValidationError as exc:
        details = "; ".join(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors())
        raise ConfigurationError(f"invalid [bridge] configuration: {details}") from exc


__all__ = [
    "BridgeConfig",
    "load_bridge_config_from_dict",
]
