"""CLI greet stories: anonymous welcome, signed-in greetings, config defaults, the catalog."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from click.testing import CliRunner, Result

from google_home.adapters import cli as cli_mod
from google_home.adapters.cli.exit_codes import ExitCode
from google_home.domain.greeting import possible_greetings


@pytest.mark.os_agnostic
def test_greet_signed_out_prints_welcome(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    """Anonymous visitors get the fixed welcome."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["greet", "--signed-out"], obj=testing_factory)

    assert result.exit_code == 0
    assert result.stdout == "Welcome!\n"


@pytest.mark.os_agnostic
def test_greet_defaults_to_signed_out(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    """With the bundled defaults the visitor is anonymous."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["greet"], obj=testing_factory)

    assert result.exit_code == 0
    assert result.stdout == "Welcome!\n"


@pytest.mark.os_agnostic
def test_greet_signed_in_prints_catalog_greeting(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    """Signed-in users get one greeting from the catalog, with their name."""
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["greet", "--signed-in", "--username", "Ada"], obj=testing_factory
    )

    assert result.exit_code == 0
    assert result.stdout.strip() in possible_greetings("Ada")


@pytest.mark.os_agnostic
def test_greet_signed_in_without_username_exits_invalid_argument(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    """A signed-in user without a name is rejected with exit code 22."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["greet", "--signed-in"], obj=testing_factory)

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "Error:" in result.stderr
    assert "'signed_in'" in result.stderr
    assert result.stdout == ""


@pytest.mark.os_agnostic
def test_greet_reads_defaults_from_config(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """greeting.signed_in and greeting.username drive the defaults."""
    factory = config_cli_context({"greeting": {"signed_in": True, "username": "Grace"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["greet"], obj=factory)

    assert result.exit_code == 0
    assert result.stdout.strip() in possible_greetings("Grace")


@pytest.mark.os_agnostic
def test_greet_options_beat_config(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    """Command-line options override configured defaults."""
    factory = config_cli_context({"greeting": {"signed_in": True, "username": "Grace"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["greet", "--signed-out"], obj=factory)

    assert result.exit_code == 0
    assert result.stdout == "Welcome!\n"


@pytest.mark.os_agnostic
def test_greet_set_override_feeds_defaults(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    """--set on the root group reaches the greet defaults."""
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "greeting.signed_in=true", "--set", "greeting.username=Linus", "greet"],
        obj=testing_factory,
    )

    assert result.exit_code == 0
    assert result.stdout.strip() in possible_greetings("Linus")


@pytest.mark.os_agnostic
def test_greet_all_lists_catalog(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    """--all prints every greeting the user could get, sorted."""
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["greet", "--signed-in", "--username", "Ada", "--all"], obj=testing_factory
    )

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines == sorted(possible_greetings("Ada"))


@pytest.mark.os_agnostic
def test_greet_all_signed_out_lists_welcome_only(
    cli_runner: CliRunner,
    testing_factory: Callable[[], Any],
) -> None:
    """Anonymous visitors have a one-entry catalog."""
    result: Result = cli_runner.invoke(cli_mod.cli, ["greet", "--all"], obj=testing_factory)

    assert result.exit_code == 0
    assert result.stdout == "Welcome!\n"
