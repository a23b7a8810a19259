"""CLI context helpers: storing and retrieving the per-invocation state."""

from __future__ import annotations

import pytest
import rich_click as click
from lib_layered_config import Config

from google_home.adapters.cli.context import CLIContext, get_cli_context, store_cli_context
from google_home.adapters.cli.root import cli
from google_home.composition import build_testing


@pytest.mark.os_agnostic
def test_store_cli_context_replaces_obj() -> None:
    """store_cli_context puts a CLIContext on the click context."""
    ctx = click.Context(cli)
    config = Config({}, {})
    services = build_testing()

    store_cli_context(ctx, traceback=False, config=config, services=services, set_overrides=("search.engine=Bing",))

    assert isinstance(ctx.obj, CLIContext)
    assert ctx.obj.config is config
    assert ctx.obj.services is services
    assert ctx.obj.profile is None
    assert ctx.obj.set_overrides == ("search.engine=Bing",)


@pytest.mark.os_agnostic
def test_get_cli_context_returns_stored_context() -> None:
    """get_cli_context hands back what store_cli_context stored."""
    ctx = click.Context(cli)
    store_cli_context(ctx, traceback=True, config=Config({}, {}), services=build_testing(), profile="test")

    cli_ctx = get_cli_context(ctx)

    assert cli_ctx.traceback is True
    assert cli_ctx.profile == "test"


@pytest.mark.os_agnostic
def test_get_cli_context_without_store_raises() -> None:
    """Subcommands cannot run before the root command."""
    ctx = click.Context(cli, obj=build_testing)

    with pytest.raises(RuntimeError, match="not initialized"):
        get_cli_context(ctx)
