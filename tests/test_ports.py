"""Port behavioural contracts, checked against the in-memory adapters.

Production adapters are covered by the CLI integration tests; static
conformance is checked by pyright.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

import pytest
from lib_layered_config import Config

from google_home.adapters.config.settings import (
    GreetingSettings,
    SearchSettings,
    load_greeting_settings,
    load_search_settings,
)
from google_home.adapters.memory import (
    display_config_in_memory,
    get_config_in_memory,
    init_logging_in_memory,
)
from google_home.composition import AppServices, build_production, build_testing

if TYPE_CHECKING:
    from google_home.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
    )


@pytest.fixture
def get_config_impl() -> GetConfig:
    """Provide in-memory GetConfig implementation."""
    return get_config_in_memory


@pytest.fixture
def display_config_impl() -> DisplayConfig:
    """Provide in-memory DisplayConfig implementation."""
    return display_config_in_memory


@pytest.fixture
def init_logging_impl() -> InitLogging:
    """Provide in-memory InitLogging implementation."""
    return init_logging_in_memory


@pytest.mark.os_agnostic
def test_get_config_returns_config_with_dict(get_config_impl: GetConfig) -> None:
    """GetConfig must return a Config whose as_dict() yields a dict."""
    config = get_config_impl()
    assert isinstance(config, Config)
    assert isinstance(config.as_dict(), dict)


@pytest.mark.os_agnostic
def test_get_config_in_memory_matches_bundled_defaults(get_config_impl: GetConfig) -> None:
    """The in-memory config parses into the same settings as an empty one."""
    data = get_config_impl(profile="anything").as_dict()

    assert load_greeting_settings(data) == load_greeting_settings({})
    assert load_search_settings(data) == load_search_settings({})


@pytest.mark.os_agnostic
def test_display_config_in_memory_writes_nothing(
    display_config_impl: DisplayConfig,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """The in-memory display is silent."""
    display_config_impl(Config({"search": {"engine": "Bing"}}, {}))

    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_init_logging_returns_none(init_logging_impl: InitLogging) -> None:
    """InitLogging must accept a Config and return None."""
    assert init_logging_impl(Config({}, {})) is None


@pytest.mark.os_agnostic
@pytest.mark.parametrize("factory", [build_production, build_testing])
def test_factories_share_settings_parsers(factory: object) -> None:
    """Both wirings parse settings with the same pure functions."""
    services = factory()  # type: ignore[operator]

    assert isinstance(services, AppServices)
    assert isinstance(services.load_greeting_settings({}), GreetingSettings)
    assert isinstance(services.load_search_settings({}), SearchSettings)


@pytest.mark.os_agnostic
def test_build_testing_wires_memory_adapters() -> None:
    """The testing wiring never touches the filesystem or logging runtime."""
    services = build_testing()

    assert services.get_config is get_config_in_memory
    assert services.display_config is display_config_in_memory
    assert services.init_logging is init_logging_in_memory


@pytest.mark.os_agnostic
def test_app_services_is_frozen() -> None:
    """Wired services cannot be swapped after construction."""
    services = build_testing()

    with pytest.raises(AttributeError):
        services.get_config = get_config_in_memory  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_app_services_holds_only_consumed_ports() -> None:
    """Every wired port is one the CLI actually calls."""
    names = {field.name for field in dataclasses.fields(AppServices)}

    assert names == {"get_config", "display_config", "load_greeting_settings", "load_search_settings", "init_logging"}
