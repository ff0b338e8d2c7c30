"""One-time lib_log_rich initialisation shared by every entry point.

The console script, ``python -m greetbridge`` and the tests all call
:func:`init_logging`; only the first call in a process configures the
runtime. Standard :mod:`logging` is bridged afterwards, so modules keep
using ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from greetbridge import __init__conf__


class LoggingConfigModel(BaseModel):
    """Validated view of the ``[lib_log_rich]`` section.

    Unknown keys are kept and forwarded to ``RuntimeConfig`` unchanged.

    Example:
        >>> LoggingConfigModel(environment="staging").environment
        'staging'
        >>> LoggingConfigModel().service is None
        True
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    ``service`` falls back to the package name when not configured.
    """
    section: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", section) if section else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialise the lib_log_rich runtime unless it is already running.

    Loads ``.env`` files first so ``LOG_*`` variables take effect, then
    attaches the std-logging bridge.

    Example:
        >>> init_logging(Config({"lib_log_rich": {"environment": "test"}}, {}))  # doctest: +SKIP
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
