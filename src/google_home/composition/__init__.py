"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.loader import get_config
from ..adapters.config.settings import load_greeting_settings, load_search_settings

# Logging services
from ..adapters.logging.setup import init_logging

# Static conformance assertions, checked by pyright.
if TYPE_CHECKING:
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LoadGreetingSettings,
        LoadSearchSettings,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_greeting_settings: LoadGreetingSettings = load_greeting_settings
    _assert_load_search_settings: LoadSearchSettings = load_search_settings
    _assert_init_logging: InitLogging = init_logging


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_greeting_settings: LoadGreetingSettings
    load_search_settings: LoadSearchSettings
    init_logging: InitLogging


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_greeting_settings=load_greeting_settings,
        load_search_settings=load_search_settings,
        init_logging=init_logging,
    )


def build_testing() -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Configuration comes from memory and logging stays uninitialized; the
    settings parsers are pure and shared with production.
    """
    from ..adapters.memory import (
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
    )

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_greeting_settings=load_greeting_settings,
        load_search_settings=load_search_settings,
        init_logging=init_logging_in_memory,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    "load_greeting_settings",
    "load_search_settings",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
