"""Turn ``--set SECTION.KEY=VALUE`` arguments into a config overlay."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Anything a JSON literal (or a bare string) can become."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def _malformed(raw: str, problem: str) -> ValueError:
    return ValueError(f"--set {raw!r} {problem}")


def parse_override(raw: str) -> ConfigOverride:
    """Split one ``--set`` argument into section, key path and value.

    Everything after the first ``=`` is the value, so values may contain
    ``=`` themselves. The dotted path needs a section and at least one key.

    Raises:
        ValueError: On a missing ``=``, a path without a dot, or an empty
            path component.

    Examples:
        >>> parse_override("bridge.speaker=Rust")
        ConfigOverride(section='bridge', key_path=('speaker',), value='Rust')
        >>> parse_override("lib_log_rich.payload_limits.message_max_chars=8192").key_path
        ('payload_limits', 'message_max_chars')
    """
    dotted, has_value, text = raw.partition("=")
    if not has_value:
        raise _malformed(raw, "must contain '=' between key and value")
    section, dot, rest = dotted.partition(".")
    if not dot:
        raise _malformed(raw, "must contain at least one dot, as in SECTION.KEY")
    if not section:
        raise _malformed(raw, "is invalid: section name is empty")
    keys = tuple(rest.split("."))
    if "" in keys:
        raise _malformed(raw, "is invalid: key path has an empty component")
    return ConfigOverride(section, keys, coerce_value(text))


def coerce_value(raw: str) -> CoercedValue:
    """Read ``raw`` as a JSON literal, falling back to the plain string.

    >>> coerce_value("false"), coerce_value("3"), coerce_value("utf-8")
    (False, 3, 'utf-8')
    >>> coerce_value("")
    ''
    """
    if not raw:
        return raw
    try:
        return orjson.loads(raw)
    except ValueError:  # orjson.JSONDecodeError included
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Place ``override.value`` at its key path inside ``target``.

    Raises:
        TypeError: A key on the way down already holds a scalar.
    """
    table: dict[str, object] = target.setdefault(override.section, {})
    *intermediate, last = override.key_path
    for key in intermediate:
        nested = table.setdefault(key, {})
        if not isinstance(nested, dict):
            raise TypeError(f"cannot set below {key!r}: it holds a {type(nested).__name__}, not a table")
        table = cast("dict[str, object]", nested)
    table[last] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Deep-merge every ``--set`` argument over ``config``.

    Later arguments win over earlier ones for the same key. With no
    arguments the same object comes back.

    Raises:
        ValueError: One of the arguments is malformed.

    >>> cfg = Config({"bridge": {"speaker": "Python"}}, {})
    >>> apply_overrides(cfg, ("bridge.speaker=Rust",))["bridge"]["speaker"]
    'Rust'
    >>> apply_overrides(cfg, ()) is cfg
    True
    """
    if not raw_overrides:
        return config
    overlay: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overlay, parse_override(raw))
    return config.with_overrides(overlay)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
