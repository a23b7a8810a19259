"""Shared helpers for CLI command modules.

Contents:
    * :func:`exit_on_validation_error` - Report rejected input and exit with INVALID_ARGUMENT.
    * :func:`echo_json` - Print a mapping as JSON.
    * :func:`output_format_option` - The ``--format`` option shared by several commands.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, TypeVar

import orjson
import rich_click as click

from google_home.domain.enums import OutputFormat
from google_home.domain.errors import ValidationError

from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


@contextmanager
def exit_on_validation_error(command: str) -> Iterator[None]:
    """Turn a :class:`ValidationError` into a stderr message and exit code 22.

    Args:
        command: Command name recorded in the log entry.

    Raises:
        SystemExit: With INVALID_ARGUMENT when the body raises ValidationError.
    """
    try:
        yield
    except ValidationError as exc:
        logger.warning("Rejected invalid input", extra={"command": command, "error": str(exc)})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


def echo_json(payload: Mapping[str, Any]) -> None:
    """Print ``payload`` as indented JSON on stdout.

    Example:
        >>> echo_json({"target": "_blank"})
        {
          "target": "_blank"
        }
    """
    click.echo(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode())


def output_format_option(func: F) -> F:
    """Attach ``--format human|json`` to a command."""
    option = click.option(
        "--format",
        "output_format",
        type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
        default=OutputFormat.HUMAN.value,
        help="Output format (human-readable or JSON)",
    )
    return option(func)


__all__ = [
    "echo_json",
    "exit_on_validation_error",
    "output_format_option",
]
