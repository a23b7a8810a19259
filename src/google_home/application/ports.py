"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol's ``__call__`` matches the signature of the adapter function
that implements it, so plain module-level functions satisfy the ports by
structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types are imported
    under ``TYPE_CHECKING`` only, keeping this layer free of adapter imports
    at runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.settings import GreetingSettings, SearchSettings


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadGreetingSettings(Protocol):
    """Parse the ``[greeting]`` section into GreetingSettings."""

    def __call__(self, config_dict: Mapping[str, Any]) -> GreetingSettings: ...


class LoadSearchSettings(Protocol):
    """Parse the ``[search]`` section into SearchSettings."""

    def __call__(self, config_dict: Mapping[str, Any]) -> SearchSettings: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LoadGreetingSettings",
    "LoadSearchSettings",
]
