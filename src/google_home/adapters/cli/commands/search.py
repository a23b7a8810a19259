"""Search URL command.

Contents:
    * :func:`cli_search` - Format a query and print the search URL for it.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from google_home.domain.enums import OutputFormat, URLTarget
from google_home.domain.search import SEARCH_ENGINES, BasicSearch

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import echo_json, exit_on_validation_error, output_format_option

logger = logging.getLogger(__name__)

_KNOWN_ENGINES = ", ".join(engine.name for engine in SEARCH_ENGINES.values())


@click.command("search", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("query")
@click.option(
    "--engine",
    type=str,
    default=None,
    help=f"Search engine ({_KNOWN_ENGINES} or any other name). Default: search.engine",
)
@click.option(
    "--target",
    type=click.Choice([t.value for t in URLTarget]),
    default=None,
    help="Browsing context for the URL. Default: search.target",
)
@click.option("--username", type=str, default=None, help="Who is searching. Default: search.username or Anonymous")
@output_format_option
@click.pass_context
def cli_search(
    ctx: click.Context,
    query: str,
    engine: str | None,
    target: str | None,
    username: str | None,
    output_format: str,
) -> None:
    """Build the URL that searches for QUERY. Nothing is fetched."""
    cli_ctx = get_cli_context(ctx)
    settings = cli_ctx.services.load_search_settings(cli_ctx.config.as_dict())
    search = BasicSearch(query, engine or settings.engine)
    effective_target = target or settings.target.value
    effective_username = username if username is not None else settings.username
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "search", "engine": search.search_engine, "format": fmt.value}
    with lib_log_rich.runtime.bind(job_id="cli-search", extra=extra):
        logger.info("Building search URL", extra={"target": effective_target})
        with exit_on_validation_error("search"):
            result = search.search(effective_target)
        description = search.format_query(effective_username)

        if fmt is OutputFormat.JSON:
            echo_json({"query": query, "engine": search.search_engine, "description": description, **result.as_dict()})
            return
        click.echo(description)
        click.echo(f"URL:    {result.url}")
        click.echo(f"Target: {result.target.value}")


__all__ = ["cli_search"]
