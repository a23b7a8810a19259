"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.greeting` - Greeting selection by sign-in state and time of day
    * :mod:`.search` - Query formatting and search URL construction
    * :mod:`.user` - User profile, email checks, existence flag
    * :mod:`.enums` - Domain enumerations (URLTarget, OtherBool, TimeOfDay, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import OtherBool, OutputFormat, TimeOfDay, URLTarget
from .errors import ValidationError
from .greeting import possible_greetings, random_greeting, time_of_day
from .search import BasicSearch, SearchEngine, SearchResult
from .user import User

__all__ = [
    # Greeting
    "possible_greetings",
    "random_greeting",
    "time_of_day",
    # Search
    "BasicSearch",
    "SearchEngine",
    "SearchResult",
    # User
    "User",
    # Enums
    "OtherBool",
    "OutputFormat",
    "TimeOfDay",
    "URLTarget",
    # Errors
    "ValidationError",
]
