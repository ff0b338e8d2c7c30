"""Strict conversion between foreign byte payloads and core text values."""

from __future__ import annotations

from greetbridge.domain.errors import MarshallingError


def decode_text(payload: bytes, *, encoding: str = "utf-8") -> str:
    """Decode an incoming payload into text.

    Decoding is strict: malformed input is rejected, never replaced.

    Raises:
        MarshallingError: If ``payload`` is not valid in ``encoding``, or
            ``encoding`` is unknown or not a text codec.

    Example:
        >>> decode_text(b"W\\xc3\\xb6rld")
        'Wörld'
        >>> decode_text(b"\\xff")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        greetbridge.domain.errors.MarshallingError: payload is not valid utf-8
    """
    try:
        return payload.decode(encoding)
    except UnicodeDecodeError as exc:
        raise MarshallingError(f"payload is not valid {encoding} at byte {exc.start}: {exc.reason}") from exc
    except LookupError as exc:
        raise MarshallingError(f"{encoding!r} is not a usable text encoding") from exc


def encode_text(text: str, *, encoding: str = "utf-8") -> bytes:
    """Encode an outgoing text value for the caller.

    Raises:
        MarshallingError: If ``text`` cannot be represented in ``encoding``,
            or ``encoding`` is unknown or not a text codec.

    Example:
        >>> encode_text("Wörld")
        b'W\\xc3\\xb6rld'
    """
    try:
        return text.encode(encoding)
    except UnicodeEncodeError as exc:
        raise MarshallingError(f"result is not representable in {encoding} at index {exc.start}: {exc.reason}") from exc
    except LookupError as exc:
        raise MarshallingError(f"{encoding!r} is not a usable text encoding") from exc


__all__ = ["decode_text", "encode_text"]
