"""Line-oriented bridge letting a host process call exports over pipes.

A host spawns ``greetbridge serve`` and writes one request per line to its
stdin; every request produces exactly one reply line on stdout, in order.
Two wire formats are spoken:

* ``text`` - the line is the name to greet, the reply is the greeting.
  Lines are decoded with the configured encoding, which must frame ``\\n``
  as a single byte.
* ``json`` - the line is a :class:`BridgeRequest` object, the reply a
  :class:`BridgeResponse`. JSON lines are always UTF-8.

A bad request never ends the session. It is logged, counted in
:class:`ServeStats`, and answered (with an empty line in ``text`` mode,
with an ``error`` object in ``json`` mode).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol

import orjson
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from greetbridge.domain.enums import WireFormat
from greetbridge.domain.errors import BoundaryError, ConfigurationError, MarshallingError

from .exports import ExportRegistry
from .marshal import encode_text

logger = logging.getLogger(__name__)

RequestId = StrictInt | StrictStr | None
"""Echoed back verbatim; ``true`` or ``1.0`` are rejected rather than coerced to ``1``."""


class LineSink(Protocol):
    """Binary stream the bridge writes replies to."""

    def write(self, data: bytes, /) -> Any: ...
    def flush(self) -> None: ...


class BridgeRequest(BaseModel):
    """One JSON-lines call.

    Example:
        >>> BridgeRequest.model_validate({"id": 7, "call": "greet", "args": ["World"]}).args
        ['World']
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    id: RequestId = None
    call: str
    args: list[str] = Field(default_factory=list)


class BridgeFault(BaseModel):
    """Error description carried by a failed response."""

    model_config = ConfigDict(frozen=True)

    type: str
    message: str


class BridgeResponse(BaseModel):
    """One JSON-lines reply: either ``result`` or ``error`` is set."""

    model_config = ConfigDict(frozen=True)

    id: RequestId = None
    result: str | None = None
    error: BridgeFault | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_line(self) -> bytes:
        """Serialize to a newline-terminated JSON line.

        Example:
            >>> BridgeResponse(id=1, result="hi").to_line()
            b'{"id":1,"result":"hi"}\\n'
        """
        return orjson.dumps(self.model_dump(exclude_none=True), option=orjson.OPT_APPEND_NEWLINE)


@dataclass(slots=True)
class ServeStats:
    """Counters for one bridge session."""

    handled: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.handled + self.failed


def _fault(request_id: RequestId, exc: BoundaryError) -> BridgeResponse:
    return BridgeResponse(id=request_id, error=BridgeFault(type=type(exc).__name__, message=str(exc)))


def _peek_request_id(payload: object) -> RequestId:
    """Recover the id from a payload that failed validation, if it has a usable one."""
    if isinstance(payload, dict):
        candidate = payload.get("id")
        if isinstance(candidate, int | str) and not isinstance(candidate, bool):
            return candidate
    return None


def handle_request(registry: ExportRegistry, raw: bytes) -> BridgeResponse:
    """Process one JSON request line.

    Args:
        registry: Exports reachable by the host.
        raw: One request line, with or without its trailing newline.

    Returns:
        Response carrying the result, or an error describing why the
        request was rejected.

    Example:
        >>> from greetbridge.adapters.bridge.exports import build_exports
        >>> handle_request(build_exports(), b'{"id": 1, "call": "greet", "args": ["World"]}').result
        'Hello, World! This is Python speaking!'
        >>> handle_request(build_exports(), b'{"call": "wave"}').error.type
        'UnknownExportError'
    """
    try:
        payload = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        return _fault(None, MarshallingError(f"request is not valid JSON: {exc}"))

    try:
        request = BridgeRequest.model_validate(payload)
    except ValidationError as exc:
        reasons = "; ".join(err["msg"] for err in exc.errors())
        return _fault(_peek_request_id(payload), MarshallingError(f"malformed request: {reasons}"))

    try:
        result = registry.invoke(request.call, *request.args)
    except BoundaryError as exc:
        return _fault(request.id, exc)
    return BridgeResponse(id=request.id, result=result)


def _strip_line_ending(raw: bytes) -> bytes:
    if raw.endswith(b"\r\n"):
        return raw[:-2]
    if raw.endswith(b"\n"):
        return raw[:-1]
    return raw


def _require_line_framing(encoding: str) -> None:
    try:
        newline = encode_text("\n", encoding=encoding)
    except MarshallingError as exc:
        raise ConfigurationError(f"encoding {encoding!r} cannot be used for the bridge: {exc}") from exc
    if newline != b"\n":
        raise ConfigurationError(f"encoding {encoding!r} cannot frame text lines; use an ASCII-compatible codec")


def _serve_text(
    registry: ExportRegistry,
    source: Iterable[bytes],
    sink: LineSink,
    encoding: str,
    stats: ServeStats,
) -> None:
    _require_line_framing(encoding)
    for line_no, raw in enumerate(source, start=1):
        try:
            reply = registry.call("greet", _strip_line_ending(raw), encoding=encoding)
        except BoundaryError as exc:
            stats.failed += 1
            logger.warning("Rejected request line", extra={"line": line_no, "error": str(exc)})
            reply = b""
        else:
            stats.handled += 1
        sink.write(reply + b"\n")
        sink.flush()


def _serve_json(
    registry: ExportRegistry,
    source: Iterable[bytes],
    sink: LineSink,
    stats: ServeStats,
) -> None:
    for line_no, raw in enumerate(source, start=1):
        if not raw.strip():
            continue
        response = handle_request(registry, raw)
        if response.ok:
            stats.handled += 1
        else:
            stats.failed += 1
            logger.warning(
                "Rejected request line",
                extra={"line": line_no, "error": response.error.message if response.error else ""},
            )
        sink.write(response.to_line())
        sink.flush()


def serve_stream(
    registry: ExportRegistry,
    source: Iterable[bytes],
    sink: LineSink,
    *,
    encoding: str = "utf-8",
    wire_format: WireFormat = WireFormat.TEXT,
) -> ServeStats:
    """Answer request lines from ``source`` until it is exhausted.

    Args:
        registry: Exports reachable by the host.
        source: Binary line iterator, typically ``sys.stdin.buffer``.
        sink: Binary stream for replies, typically ``sys.stdout.buffer``.
        encoding: Codec for ``text`` format lines.
        wire_format: Line format spoken with the host.

    Returns:
        Counters for handled and failed requests.

    Raises:
        ConfigurationError: If ``encoding`` cannot frame lines in ``text`` format.

    Example:
        >>> import io
        >>> from greetbridge.adapters.bridge.exports import build_exports
        >>> out = io.BytesIO()
        >>> serve_stream(build_exports(), io.BytesIO(b"World\\n"), out)
        ServeStats(handled=1, failed=0)
        >>> out.getvalue()
        b'Hello, World! This is Python speaking!\\n'
    """
    stats = ServeStats()
    logger.info("Bridge session started", extra={"wire_format": wire_format.value, "encoding": encoding})
    if wire_format is WireFormat.JSON:
        _serve_json(registry, source, sink, stats)
    else:
        _serve_text(registry, source, sink, encoding, stats)
    logger.info("Bridge session finished", extra={"handled": stats.handled, "failed": stats.failed})
    return stats


__all__ = [
    "BridgeFault",
    "BridgeRequest",
    "BridgeResponse",
    "LineSink",
    "ServeStats",
    "handle_request",
    "serve_stream",
]
