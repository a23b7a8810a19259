"""Type-safe domain enums for URL targets, yes/no flags, and output formats."""

from __future__ import annotations

from datetime import time
from enum import Enum


class URLTarget(str, Enum):
    """Browsing context a search URL opens in.

    Frames addressed by name are not supported, only the four reserved
    keywords. Inherits from str so members compare equal to their values.

    Example:
        >>> URLTarget("_blank") is URLTarget.BLANK
        True
        >>> URLTarget.TOP == "_top"
        True
    """

    BLANK = "_blank"
    SELF = "_self"
    PARENT = "_parent"
    TOP = "_top"


class OtherBool(str, Enum):
    """Spelled-out boolean used where callers answer with *yes* or *no*.

    Example:
        >>> OtherBool("yes").as_bool()
        True
        >>> OtherBool.NO.as_bool()
        False
    """

    YES = "yes"
    NO = "no"

    def as_bool(self) -> bool:
        """Return the boolean this answer stands for."""
        return self is OtherBool.YES


class TimeOfDay(str, Enum):
    """Wall-clock bands used to pick a time-sensitive greeting.

    Attributes:
        MORNING: 05:00 to 11:59.
        AFTERNOON: 12:00 to 16:59.
        EVENING: 17:00 to 20:59.
        NIGHT: 21:00 to 04:59.

    Example:
        >>> TimeOfDay.MORNING.starts_at
        datetime.time(5, 0)
    """

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    NIGHT = "night"

    @property
    def starts_at(self) -> time:
        """First minute of the band."""
        return _BAND_STARTS[self]


_BAND_STARTS: dict[TimeOfDay, time] = {
    TimeOfDay.MORNING: time(5, 0),
    TimeOfDay.AFTERNOON: time(12, 0),
    TimeOfDay.EVENING: time(17, 0),
    TimeOfDay.NIGHT: time(21, 0),
}


class OutputFormat(str, Enum):
    """Output format options for CLI commands.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable output.
        JSON: Machine-readable JSON output.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "OtherBool",
    "OutputFormat",
    "TimeOfDay",
    "URLTarget",
]
