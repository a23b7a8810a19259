"""Shared pytest fixtures for domain, CLI and module-entry tests.

Fixtures use descriptive names that read as plain English; tests receive
them implicitly via pytest's conftest discovery.
"""

from __future__ import annotations

import random
import re
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from datetime import datetime
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from google_home.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when parsing output, so log lines written to
    stderr cannot interfere.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory (real config and logging)."""
    from google_home.composition import build_production

    return build_production


@pytest.fixture
def testing_factory() -> Callable[[], AppServices]:
    """Provide the in-memory services factory (no filesystem, no logging runtime)."""
    from google_home.composition import build_testing

    return build_testing


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them afterwards.

    Use whenever a test reads or mutates ``lib_cli_exit_tools.config``.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before the test runs."""
    from google_home.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without filesystem I/O."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_cli_context(clear_config_cache: None) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    The factory wires the production services with ``get_config`` replaced
    so every command sees exactly ``config_data``.

    Example:
        def test_engine(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"search": {"engine": "Bing"}})
            result = cli_runner.invoke(cli, ["search", "cats"], obj=factory)
            assert "bing.com" in result.output
    """
    from google_home.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = replace(build_production(), get_config=_fake_get_config)
        return lambda: services

    return _create


@pytest.fixture
def config_with_profile_capture() -> Callable[[Config, list[str | None]], Callable[[], AppServices]]:
    """Return a function building a services factory that records requested profiles."""
    from google_home.composition import AppServices, build_production

    def _create(config: Config, captured_profiles: list[str | None]) -> Callable[[], AppServices]:
        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured_profiles.append(profile)
            return config

        services = replace(build_production(), get_config=_capturing_get_config)
        return lambda: services

    return _create


@pytest.fixture
def morning() -> datetime:
    """A moment inside the morning band."""
    return datetime(2024, 3, 14, 9, 15)


@pytest.fixture
def seeded_rng() -> random.Random:
    """A random source with a fixed seed."""
    return random.Random(20240314)
