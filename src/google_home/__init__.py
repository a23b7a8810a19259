"""Public package surface exposing greetings, search, users, and metadata.

This module provides the stable public API for the package, routing imports
through the proper architectural layers:
- Domain exports: Greeting selection, search URLs, user profiles
- Composition exports: Wired adapter services (configuration)
- Metadata: Package and website version constants
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info, version, website_version

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.enums import OtherBool, URLTarget
from .domain.errors import ValidationError
from .domain.greeting import random_greeting
from .domain.search import BasicSearch, SearchResult
from .domain.user import User

__all__ = [
    "BasicSearch",
    "OtherBool",
    "SearchResult",
    "URLTarget",
    "User",
    "ValidationError",
    "get_config",
    "print_info",
    "random_greeting",
    "version",
    "website_version",
]
