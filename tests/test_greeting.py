"""Greeting stories: anonymous visitors, signed-in users, time-of-day bands."""

from __future__ import annotations

import random
from datetime import datetime

import pytest

from google_home.domain.enums import TimeOfDay
from google_home.domain.errors import ValidationError
from google_home.domain.greeting import (
    GENERIC_TEMPLATES,
    SIGNED_OUT_GREETING,
    TIME_OF_DAY_TEMPLATES,
    possible_greetings,
    random_greeting,
    time_of_day,
)


@pytest.mark.os_agnostic
def test_signed_out_visitor_is_welcomed() -> None:
    """Anonymous visitors always get the fixed welcome."""
    assert random_greeting(False) == "Welcome!"


@pytest.mark.os_agnostic
def test_signed_out_visitor_username_is_ignored() -> None:
    """A username given while signed out changes nothing."""
    assert random_greeting(False, "Google") == SIGNED_OUT_GREETING


@pytest.mark.os_agnostic
@pytest.mark.parametrize("username", [None, ""])
def test_signed_in_user_without_username_is_rejected(username: str | None) -> None:
    """Signing in without a username is a validation error, not a default."""
    with pytest.raises(ValidationError) as exc_info:
        random_greeting(True, username)

    message = str(exc_info.value)
    assert "'signed_in'" in message
    assert "'username'" in message
    assert "True" in message
    assert repr(username) in message
    assert exc_info.value.actual == username


@pytest.mark.os_agnostic
def test_signed_in_greeting_contains_username(morning: datetime, seeded_rng: random.Random) -> None:
    """Signed-in greetings embed the username verbatim."""
    greeting = random_greeting(True, "Google", now=morning, rng=seeded_rng)

    assert "Google" in greeting
    assert greeting in possible_greetings("Google")


@pytest.mark.os_agnostic
def test_signed_in_greeting_only_uses_current_band(morning: datetime) -> None:
    """Across many draws, only the morning time-of-day greeting appears."""
    rng = random.Random(7)
    seen = {random_greeting(True, "Ada", now=morning, rng=rng) for _ in range(500)}

    allowed = {TIME_OF_DAY_TEMPLATES[TimeOfDay.MORNING].format(username="Ada")}
    allowed |= {template.format(username="Ada") for template in GENERIC_TEMPLATES}
    assert seen == allowed


@pytest.mark.os_agnostic
def test_signed_in_greeting_sometimes_welcomes_back(morning: datetime) -> None:
    """A returning-visitor phrasing is one of the options."""
    rng = random.Random(11)
    seen = {random_greeting(True, "Ada", now=morning, rng=rng) for _ in range(500)}

    assert "Welcome back, Ada!" in seen


@pytest.mark.os_agnostic
def test_same_seed_gives_same_greeting(morning: datetime) -> None:
    """Injecting equally seeded sources makes the choice reproducible."""
    first = random_greeting(True, "Ada", now=morning, rng=random.Random(3))
    second = random_greeting(True, "Ada", now=morning, rng=random.Random(3))

    assert first == second


@pytest.mark.os_agnostic
def test_username_with_braces_is_kept_verbatim(morning: datetime, seeded_rng: random.Random) -> None:
    """Template placeholders inside a username are not expanded."""
    greeting = random_greeting(True, "{username}", now=morning, rng=seeded_rng)

    assert "{username}" in greeting


@pytest.mark.os_agnostic
def test_greeting_without_clock_uses_current_time(seeded_rng: random.Random) -> None:
    """Omitting ``now`` still yields a catalog greeting."""
    assert random_greeting(True, "Ada", rng=seeded_rng) in possible_greetings("Ada")


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("hour", "minute", "band"),
    [
        (0, 0, TimeOfDay.NIGHT),
        (4, 59, TimeOfDay.NIGHT),
        (5, 0, TimeOfDay.MORNING),
        (11, 59, TimeOfDay.MORNING),
        (12, 0, TimeOfDay.AFTERNOON),
        (16, 59, TimeOfDay.AFTERNOON),
        (17, 0, TimeOfDay.EVENING),
        (20, 59, TimeOfDay.EVENING),
        (21, 0, TimeOfDay.NIGHT),
        (23, 59, TimeOfDay.NIGHT),
    ],
)
def test_time_of_day_band_edges(hour: int, minute: int, band: TimeOfDay) -> None:
    """Band boundaries fall on the first minute of each band."""
    assert time_of_day(datetime(2024, 1, 1, hour, minute)) is band


@pytest.mark.os_agnostic
def test_possible_greetings_covers_every_template() -> None:
    """The catalog renders each template exactly once."""
    catalog = possible_greetings("Ada")

    assert len(catalog) == len(TIME_OF_DAY_TEMPLATES) + len(GENERIC_TEMPLATES)
    assert "Good morning, Ada!" in catalog
    assert "Good evening, Ada!" in catalog


@pytest.mark.os_agnostic
def test_possible_greetings_rejects_empty_username() -> None:
    """An empty username has no catalog."""
    with pytest.raises(ValidationError):
        possible_greetings("")
