"""Values shared by the root group, the commands and the exit wrapper."""

from __future__ import annotations

from typing import Final

CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}
"""Every command accepts ``-h`` as well as ``--help``."""

TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
"""Characters of error output kept without ``--traceback``."""

TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000
"""Characters of traceback kept with ``--traceback``."""

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
