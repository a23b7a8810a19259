"""Greeting selection keyed on sign-in state and the local time of day.

Pure functions with no I/O. The clock and the random source are injectable
so callers (and tests) can pin both.

Contents:
    * :func:`random_greeting` - Pick a greeting for a signed-in or anonymous user.
    * :func:`time_of_day` - Map a wall-clock moment to its :class:`TimeOfDay` band.
    * :func:`possible_greetings` - Enumerate every greeting a user could receive.
"""

from __future__ import annotations

import random
from datetime import datetime
from typing import Final

from .enums import TimeOfDay
from .errors import ValidationError

SIGNED_OUT_GREETING: Final[str] = "Welcome!"

TIME_OF_DAY_TEMPLATES: Final[dict[TimeOfDay, str]] = {
    TimeOfDay.MORNING: "Good morning, {username}!",
    TimeOfDay.AFTERNOON: "Good afternoon, {username}!",
    TimeOfDay.EVENING: "Good evening, {username}!",
    TimeOfDay.NIGHT: "Burning the midnight oil, {username}?",
}

GENERIC_TEMPLATES: Final[tuple[str, ...]] = (
    "Hello, {username}!",
    "Hi there, {username}!",
    "Hey {username}, good to see you!",
    "Greetings, {username}!",
    "Welcome back, {username}!",
    "Nice to see you again, {username}!",
)

_DEFAULT_RNG = random.Random()


def time_of_day(moment: datetime) -> TimeOfDay:
    """Return the band the wall-clock part of ``moment`` falls into.

    Timezone information is ignored; the caller decides which clock counts
    as local.

    Example:
        >>> time_of_day(datetime(2024, 1, 1, 8, 30))
        <TimeOfDay.MORNING: 'morning'>
        >>> time_of_day(datetime(2024, 1, 1, 23, 0))
        <TimeOfDay.NIGHT: 'night'>
        >>> time_of_day(datetime(2024, 1, 1, 4, 59))
        <TimeOfDay.NIGHT: 'night'>
    """
    clock = moment.time()
    if clock < TimeOfDay.MORNING.starts_at or clock >= TimeOfDay.NIGHT.starts_at:
        return TimeOfDay.NIGHT
    if clock < TimeOfDay.AFTERNOON.starts_at:
        return TimeOfDay.MORNING
    if clock < TimeOfDay.EVENING.starts_at:
        return TimeOfDay.AFTERNOON
    return TimeOfDay.EVENING


def _missing_username(signed_in: bool, username: str | None) -> ValidationError:
    return ValidationError(
        f"Parameters 'signed_in' was {signed_in!r} while 'username' was {username!r}. "
        f"Expected a value for 'username' while 'signed_in' was True, "
        f"but got {signed_in!r} for 'signed_in' and {username!r} for 'username'.",
        expected="a non-empty username",
        actual=username,
    )


def random_greeting(
    signed_in: bool,
    username: str | None = None,
    *,
    now: datetime | None = None,
    rng: random.Random | None = None,
) -> str:
    """Return a greeting for the user.

    Anonymous visitors always get ``"Welcome!"`` and any username is ignored.
    Signed-in users get one template drawn uniformly from the greeting for
    the current time of day plus every generic greeting. Some generic
    greetings are phrased for a returning visitor; nothing is remembered
    between calls.

    Args:
        signed_in: Whether the user is signed in.
        username: Name to greet. Required when ``signed_in`` is true.
        now: Moment whose local wall-clock time selects the band. Defaults
            to :func:`datetime.now`.
        rng: Random source. Defaults to a module-level ``random.Random``.

    Returns:
        The chosen greeting, containing ``username`` verbatim when signed in.

    Raises:
        ValidationError: When ``signed_in`` is true and ``username`` is
            missing or empty.

    Example:
        >>> random_greeting(False, "Google")
        'Welcome!'
        >>> random_greeting(True, "Google", now=datetime(2024, 1, 1, 14, 0), rng=random.Random(3)) in (
        ...     possible_greetings("Google")
        ... )
        True
        >>> random_greeting(True)  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValidationError: Parameters 'signed_in' was True while 'username' was None. ...
    """
    if signed_in and not username:
        raise _missing_username(signed_in, username)
    if not signed_in:
        return SIGNED_OUT_GREETING

    moment = now if now is not None else datetime.now()
    chooser = rng if rng is not None else _DEFAULT_RNG
    templates = (TIME_OF_DAY_TEMPLATES[time_of_day(moment)], *GENERIC_TEMPLATES)
    return chooser.choice(templates).format(username=username)


def possible_greetings(username: str) -> frozenset[str]:
    """Render the whole greeting catalog for ``username``.

    Covers every time-of-day band, so the result is a superset of what
    :func:`random_greeting` can return at any single moment.

    Raises:
        ValidationError: When ``username`` is empty.

    Example:
        >>> "Welcome back, Ada!" in possible_greetings("Ada")
        True
        >>> len(possible_greetings("Ada")) == len(TIME_OF_DAY_TEMPLATES) + len(GENERIC_TEMPLATES)
        True
    """
    if not username:
        raise _missing_username(True, username)
    templates = (*TIME_OF_DAY_TEMPLATES.values(), *GENERIC_TEMPLATES)
    return frozenset(template.format(username=username) for template in templates)


__all__ = [
    "GENERIC_TEMPLATES",
    "SIGNED_OUT_GREETING",
    "TIME_OF_DAY_TEMPLATES",
    "possible_greetings",
    "random_greeting",
    "time_of_day",
]
