"""Root CLI command group and global option handling.

Contents:
    * :func:`cli` - Root command group with ``--traceback``, ``--profile`` and ``--set``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from google_home import __init__conf__
from google_home.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from google_home.composition import AppServices


def _apply_cli_overrides(config: Config, set_overrides: tuple[str, ...]) -> Config:
    """Merge ``--set`` options into ``config``.

    Raises:
        click.UsageError: If an override is malformed or would replace a
            value with a table.
    """
    try:
        return apply_overrides(config, set_overrides)
    except (TypeError, ValueError) as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load configuration from a named profile (e.g., 'production', 'test')",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. search.engine=Bing.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Load configuration once and share it with the subcommand.

    ``ctx.obj`` arrives as the services factory and leaves as a
    :class:`~google_home.adapters.cli.context.CLIContext`.

    Example:
        >>> from click.testing import CliRunner
        >>> from google_home.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["greet", "--signed-out"], obj=build_testing)
        >>> result.stdout
        'Welcome!\\n'
    """
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = services.get_config(profile=profile)
    config = _apply_cli_overrides(config, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Commands import from this package, so registration waits until ``cli`` exists.
def _register_commands() -> None:
    from .commands import (
        cli_config,
        cli_greet,
        cli_info,
        cli_logdemo,
        cli_search,
        cli_user,
    )

    for cmd in (cli_info, cli_greet, cli_search, cli_user, cli_config, cli_logdemo):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
