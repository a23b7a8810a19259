"""The ``google-home`` command line.

``cli`` is the rich-click group, ``main`` runs it with exit-code handling,
and the ``cli_*`` names are its subcommands. Traceback helpers are exported
for tests that need to pin ``lib_cli_exit_tools.config``.
"""

from __future__ import annotations

from .commands import cli_config, cli_greet, cli_info, cli_logdemo, cli_search, cli_user
from .context import (
    CLIContext,
    TracebackState,
    apply_traceback_preferences,
    get_cli_context,
    restore_traceback_state,
    snapshot_traceback_state,
    store_cli_context,
)
from .exit_codes import ExitCode
from .main import main
from .root import cli

__all__ = [
    "CLIContext",
    "ExitCode",
    "TracebackState",
    "apply_traceback_preferences",
    "cli",
    "cli_config",
    "cli_greet",
    "cli_info",
    "cli_logdemo",
    "cli_search",
    "cli_user",
    "get_cli_context",
    "main",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
