"""Registry of functions callable from outside the process.

Pure core functions never carry boundary annotations. Instead a registry
wraps them: :meth:`ExportRegistry.export` marks a text-to-text callable as
externally reachable, and :meth:`ExportRegistry.call` performs the byte
marshalling on the way in and out.

Contents:
    * :class:`ExportedFunction` - One registered callable plus its signature.
    * :class:`ExportRegistry` - Name-to-export mapping with text and byte calls.
    * :func:`build_exports` - Registry exposing ``greet`` for a BridgeConfig.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from greetbridge.domain.behaviors import greet
from greetbridge.domain.errors import ExportArgumentError, UnknownExportError

from .config import BridgeConfig
from .marshal import decode_text, encode_text

logger = logging.getLogger(__name__)

TextFunction = Callable[..., str]
"""Callable taking text positional arguments and returning text."""


@dataclass(frozen=True, slots=True)
class ExportedFunction:
    """A registered export.

    Attributes:
        name: Name the host uses to reach the function.
        func: The wrapped text-to-text callable.
        signature: Signature used to check argument counts before calling.
    """

    name: str
    func: TextFunction
    signature: inspect.Signature

    def invoke(self, *args: str) -> str:
        """Call the wrapped function with already-decoded text arguments.

        Raises:
            ExportArgumentError: If the argument count does not fit the signature.
        """
        try:
            self.signature.bind(*args)
        except TypeError as exc:
            raise ExportArgumentError(f"{self.name}(): {exc}") from exc
        return self.func(*args)


class ExportRegistry:
    """Mapping of export names to wrapped functions.

    Example:
        >>> registry = ExportRegistry()
        >>> @registry.export()
        ... def shout(text: str) -> str:
        ...     return text.upper()
        >>> registry.invoke("shout", "hi")
        'HI'
        >>> registry.call("shout", b"hi")
        b'HI'
        >>> registry.names()
        ['shout']
    """

    def __init__(self) -> None:
        self._exports: dict[str, ExportedFunction] = {}

    def export(self, name: str | None = None) -> Callable[[TextFunction], TextFunction]:
        """Return a decorator registering a function under ``name``.

        The decorated function is returned unchanged so it stays usable
        in-process.

        Args:
            name: Export name. Defaults to the function's ``__name__``.

        Raises:
            ValueError: If the name is already taken.
        """

        def _register(func: TextFunction) -> TextFunction:
            self.register(func, name=name)
            return func

        return _register

    def register(self, func: TextFunction, *, name: str | None = None) -> ExportedFunction:
        """Register ``func`` without decorator syntax."""
        export_name = name or getattr(func, "__name__", None)
        if not export_name:
            raise ValueError("export name is required for callables without __name__")
        if export_name in self._exports:
            raise ValueError(f"export {export_name!r} is already registered")
        exported = ExportedFunction(name=export_name, func=func, signature=inspect.signature(func))
        self._exports[export_name] = exported
        logger.debug("Registered export", extra={"export": export_name})
        return exported

    def get(self, name: str) -> ExportedFunction:
        """Return the export registered as ``name``.

        Raises:
            UnknownExportError: If nothing is registered under that name.
        """
        try:
            return self._exports[name]
        except KeyError:
            raise UnknownExportError(f"no export named {name!r}") from None

    def invoke(self, name: str, *args: str) -> str:
        """Call an export with text arguments."""
        return self.get(name).invoke(*args)

    def call(self, name: str, *payloads: bytes, encoding: str = "utf-8") -> bytes:
        """Call an export with byte payloads and return the encoded result.

        Raises:
            UnknownExportError: If ``name`` is not exported.
            MarshallingError: If a payload or the result does not fit ``encoding``.
            ExportArgumentError: If the payload count does not fit the signature.
        """
        exported = self.get(name)
        args = [decode_text(payload, encoding=encoding) for payload in payloads]
        return encode_text(exported.invoke(*args), encoding=encoding)

    def names(self) -> list[str]:
        """Return registered export names in sorted order."""
        return sorted(self._exports)

    def __contains__(self, name: object) -> bool:
        return name in self._exports

    def __iter__(self) -> Iterator[ExportedFunction]:
        return iter(self._exports[name] for name in self.names())

    def __len__(self) -> int:
        return len(self._exports)


def build_exports(config: BridgeConfig | None = None) -> ExportRegistry:
    """Build the registry of functions this package exposes to hosts.

    Args:
        config: Boundary settings. ``None`` uses BridgeConfig defaults.

    Returns:
        Registry exporting ``greet`` with the configured speaker label.

    Example:
        >>> registry = build_exports(BridgeConfig(speaker="Rust"))
        >>> registry.invoke("greet", "World")
        'Hello, World! This is Rust speaking!'
    """
    settings = config if config is not None else BridgeConfig()
    registry = ExportRegistry()

    @registry.export("greet")
    def _greet(name: str) -> str:
        return greet(name, speaker=settings.speaker)

    return registry


__all__ = [
    "ExportRegistry",
    "ExportedFunction",
    "TextFunction",
    "build_exports",
]
