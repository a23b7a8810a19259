"""One-time lib_log_rich initialization shared by every entry point.

``python -m google_home``, the ``google-home`` console script and CLI tests
all call :func:`init_logging`; only the first call configures the runtime.

Contents:
    * :class:`LoggingConfigModel` - Validates the ``[lib_log_rich]`` section.
    * :func:`init_logging` - Idempotent logging initialization.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from google_home import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` section.

    Keys other than ``service`` and ``environment`` pass straight through to
    ``lib_log_rich.runtime.RuntimeConfig``.

    Example:
        >>> LoggingConfigModel(service="google-home", console_level="DEBUG").model_dump(exclude={"service"})
        {'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Translate the ``[lib_log_rich]`` section into a RuntimeConfig.

    ``service`` falls back to the package name when not configured.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Start the lib_log_rich runtime unless it is already running.

    On the first call, loads ``.env`` files so ``LOG_*`` variables take
    effect, initializes the runtime from ``config`` and bridges the standard
    ``logging`` module into it. Later calls return immediately.

    Args:
        config: Loaded configuration; only ``[lib_log_rich]`` is read.

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
