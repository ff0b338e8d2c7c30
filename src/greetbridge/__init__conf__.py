"""Static package metadata surfaced to CLI commands and documentation.

The values here are kept in sync with ``pyproject.toml`` so that ``info``,
``--version`` and the configuration loader agree on names and paths without
querying installed distribution metadata at runtime.

Contents:
    * Package identity (``name``, ``title``, ``version``, ``shell_command``).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config for
      platform-specific configuration paths.
    * :func:`print_info` - render the metadata block.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "greetbridge"
title: Final[str] = "Pure greeting function exported across a text marshalling boundary"
version = "1.0.0"
homepage: Final[str] = "https://github.com/greetbridge/greetbridge"
author: Final[str] = "greetbridge contributors"
author_email: Final[str] = "maintainers@greetbridge.dev"
shell_command: Final[str] = "greetbridge"

#: Vendor segment for macOS/Windows configuration directories.
LAYEREDCONF_VENDOR: Final[str] = "greetbridge"
#: Application segment for macOS/Windows configuration directories.
LAYEREDCONF_APP: Final[str] = "greetbridge"
#: Slug for Linux XDG paths and the environment variable prefix.
LAYEREDCONF_SLUG: Final[str] = "greetbridge"


def print_info() -> None:
    """Print the package metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for greetbridge:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    )
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
