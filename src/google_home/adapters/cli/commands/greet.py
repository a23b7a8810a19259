"""Greeting command.

Contents:
    * :func:`cli_greet` - Print a random greeting, or every possible one.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from google_home.domain.greeting import SIGNED_OUT_GREETING, possible_greetings, random_greeting

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import exit_on_validation_error

logger = logging.getLogger(__name__)


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--signed-in/--signed-out",
    "signed_in",
    default=None,
    help="Greet a signed-in user or an anonymous visitor. Default: greeting.signed_in",
)
@click.option("--username", type=str, default=None, help="Name to greet. Default: greeting.username")
@click.option("--all", "show_all", is_flag=True, default=False, help="List every greeting the user could get")
@click.pass_context
def cli_greet(ctx: click.Context, signed_in: bool | None, username: str | None, show_all: bool) -> None:
    """Greet the user the way the website's home page does.

    Signed-in users must have a username; it comes from ``--username`` or
    the ``greeting.username`` setting.
    """
    cli_ctx = get_cli_context(ctx)
    settings = cli_ctx.services.load_greeting_settings(cli_ctx.config.as_dict())
    effective_signed_in = settings.signed_in if signed_in is None else signed_in
    effective_username = username if username is not None else settings.username

    extra = {"command": "greet", "signed_in": effective_signed_in}
    with lib_log_rich.runtime.bind(job_id="cli-greet", extra=extra):
        logger.info("Selecting greeting", extra={"show_all": show_all})
        with exit_on_validation_error("greet"):
            if not show_all:
                click.echo(random_greeting(effective_signed_in, effective_username or None))
            elif effective_signed_in:
                for greeting in sorted(possible_greetings(effective_username)):
                    click.echo(greeting)
            else:
                click.echo(SIGNED_OUT_GREETING)


__all__ = ["cli_greet"]
