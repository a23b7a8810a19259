"""Typed views of the ``[greeting]`` and ``[search]`` configuration sections.

The CLI reads its option defaults from these models. Parsing happens once
at the boundary; values that fail validation surface as pydantic errors
naming the offending key.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from google_home.domain.enums import URLTarget
from google_home.domain.search import DEFAULT_SEARCH_ENGINE


class GreetingSettings(BaseModel):
    """Defaults for the ``greet`` command.

    Example:
        >>> GreetingSettings.model_validate({"signed_in": True, "username": "Ada"}).username
        'Ada'
        >>> GreetingSettings().signed_in
        False
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    signed_in: bool = False
    username: str = ""


class SearchSettings(BaseModel):
    """Defaults for the ``search`` command.

    Example:
        >>> settings = SearchSettings.model_validate({"engine": "Bing", "target": "_top"})
        >>> settings.target
        <URLTarget.TOP: '_top'>
        >>> SearchSettings.model_validate({"engine": "  "}).engine
        'Google'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    engine: str = DEFAULT_SEARCH_ENGINE
    target: URLTarget = URLTarget.BLANK
    username: str = ""

    @field_validator("engine", mode="before")
    @classmethod
    def _blank_engine_means_default(cls, v: Any) -> Any:
        """Treat an empty or whitespace-only engine as "not configured"."""
        if isinstance(v, str) and not v.strip():
            return DEFAULT_SEARCH_ENGINE
        return v


def _section(config_dict: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = config_dict.get(name, {})
    return raw if raw else {}


def load_greeting_settings(config_dict: Mapping[str, Any]) -> GreetingSettings:
    """Parse the ``[greeting]`` section of a configuration dictionary.

    Example:
        >>> load_greeting_settings({}).username
        ''
    """
    return GreetingSettings.model_validate(_section(config_dict, "greeting"))


def load_search_settings(config_dict: Mapping[str, Any]) -> SearchSettings:
    """Parse the ``[search]`` section of a configuration dictionary.

    Example:
        >>> load_search_settings({"search": {"engine": "Ecosia"}}).engine
        'Ecosia'
    """
    return SearchSettings.model_validate(_section(config_dict, "search"))


__all__ = [
    "GreetingSettings",
    "SearchSettings",
    "load_greeting_settings",
    "load_search_settings",
]
