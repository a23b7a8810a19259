"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Greeting command from :mod:`.greet`
    * Search command from :mod:`.search`
    * User command from :mod:`.user`
    * Config command from :mod:`.config`
    * Logging demo from :mod:`.logging`
"""

from __future__ import annotations

from .config import cli_config
from .greet import cli_greet
from .info import cli_info
from .logging import cli_logdemo
from .search import cli_search
from .user import cli_user

__all__ = [
    "cli_config",
    "cli_greet",
    "cli_info",
    "cli_logdemo",
    "cli_search",
    "cli_user",
]
