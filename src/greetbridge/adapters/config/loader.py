"""Read greetbridge's layered configuration once per profile.

lib_layered_config stacks, from lowest to highest precedence, the bundled
``defaultconfig.toml``, the app, host and user files, a discovered ``.env``
and finally ``GREETBRIDGE___SECTION__KEY`` environment variables, for
example ``GREETBRIDGE___BRIDGE__SPEAKER=Rust``.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol

from lib_layered_config import DEFAULT_MAX_PROFILE_LENGTH, Config, read_config, validate_profile_name

from greetbridge import __init__conf__

_DEFAULT_CONFIG_FILE = Path(__file__).with_name("defaultconfig.toml")


class ConfigLoaderProtocol(Protocol):
    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...

    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Refuse empty, over-long or path-like profile names.

    Raises:
        ValueError: lib_layered_config rejected ``profile``.

    >>> validate_profile("staging-v2")
    >>> validate_profile("../etc")  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    ValueError: profile contains invalid characters: ../etc
    """
    validate_profile_name(profile, max_length=DEFAULT_MAX_PROFILE_LENGTH if max_length is None else max_length)


def get_default_config_path() -> Path:
    """Path of the ``defaultconfig.toml`` shipped inside the wheel.

    >>> get_default_config_path().name
    'defaultconfig.toml'
    """
    return _DEFAULT_CONFIG_FILE


class _CachedConfigLoader:
    """Callable satisfying :class:`ConfigLoaderProtocol`.

    Each ``(profile, start_dir)`` pair is read from disk once. Validation
    runs on every call so a bad profile never reaches the filesystem.
    """

    def __init__(self) -> None:
        self._read = lru_cache(maxsize=4)(self._read_uncached)

    @staticmethod
    def _read_uncached(profile: str | None, start_dir: str | None) -> Config:
        return read_config(
            vendor=__init__conf__.LAYEREDCONF_VENDOR,
            app=__init__conf__.LAYEREDCONF_APP,
            slug=__init__conf__.LAYEREDCONF_SLUG,
            profile=profile,
            default_file=get_default_config_path(),
            start_dir=start_dir,
        )

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config:
        """Return the merged configuration.

        Args:
            profile: Adds a ``profile/<name>/`` level to every search path.
            start_dir: Where ``.env`` discovery starts; the working
                directory when None.

        Raises:
            ValueError: ``profile`` is not an acceptable name.

        >>> get_config().get("bridge.speaker")  # doctest: +SKIP
        'Python'
        """
        if profile is not None:
            validate_profile(profile)
        return self._read(profile, start_dir)

    def cache_clear(self) -> None:
        """Forget every cached read, e.g. after config files changed on disk."""
        self._read.cache_clear()


get_config: ConfigLoaderProtocol = _CachedConfigLoader()


__all__ = [
    "ConfigLoaderProtocol",
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
