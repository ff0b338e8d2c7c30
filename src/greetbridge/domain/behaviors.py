"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

#: Literal text placed before the name.
GREETING_PREFIX: Final[str] = "Hello, "

#: Label identifying which implementation produced the greeting.
DEFAULT_SPEAKER: Final[str] = "Python"


def greeting_suffix(speaker: str = DEFAULT_SPEAKER) -> str:
    """Return the literal text placed after the name.

    Example:
        >>> greeting_suffix()
        '! This is Python speaking!'
        >>> greeting_suffix("Rust")
        '! This is Rust speaking!'
    """
    return f"! This is {speaker} speaking!"


def greet(name: str, speaker: str = DEFAULT_SPEAKER) -> str:
    r"""Return the greeting for ``name``.

    The name is embedded unmodified between :data:`GREETING_PREFIX` and
    :func:`greeting_suffix`. Any text is accepted, including the empty
    string; decoding from a foreign representation is the caller's job.

    Args:
        name: Text to greet.
        speaker: Label identifying the responding implementation.

    Returns:
        The formatted greeting.

    Example:
        >>> greet("World")
        'Hello, World! This is Python speaking!'
        >>> greet("")
        'Hello, ! This is Python speaking!'
        >>> greet("Ferris", speaker="Rust")
        'Hello, Ferris! This is Rust speaking!'
    """
    return f"{GREETING_PREFIX}{name}{greeting_suffix(speaker)}"


__all__ = [
    "DEFAULT_SPEAKER",
    "GREETING_PREFIX",
    "greet",
    "greeting_suffix",
]
