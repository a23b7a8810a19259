"""Parse ``--set SECTION.KEY=VALUE`` options and merge them into a Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

CoercedValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Values :func:`coerce_value` can produce."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One ``--set`` option after parsing."""

    section: str
    key_path: tuple[str, ...]
    value: CoercedValue


def parse_override(raw: str) -> ConfigOverride:
    """Parse ``SECTION.KEY[.SUBKEY...]=VALUE``.

    Splits once at the first ``=``; the part before it is split on dots
    into the section and the key path.

    Raises:
        ValueError: If ``=`` is missing, the key has no dot, or any path
            component is empty.

    Examples:
        >>> parse_override("search.engine=Bing")
        ConfigOverride(section='search', key_path=('engine',), value='Bing')
        >>> parse_override("greeting.signed_in=true").value
        True
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)
    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *key_parts = path_part.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(key_parts), value=coerce_value(value_str))


def coerce_value(raw: str) -> CoercedValue:
    """Read ``raw`` as JSON, falling back to the plain string.

    Examples:
        >>> coerce_value("false")
        False
        >>> coerce_value("3")
        3
        >>> coerce_value("_blank")
        '_blank'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except (orjson.JSONDecodeError, ValueError):
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write ``override`` into ``target``, creating intermediate tables.

    Raises:
        TypeError: If an intermediate key already holds a non-table value.

    Example:
        >>> tree: dict[str, dict[str, object]] = {}
        >>> _nest_override(tree, ConfigOverride(section="lib_log_rich", key_path=("limits", "max"), value=5))
        >>> tree
        {'lib_log_rich': {'limits': {'max': 5}}}
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(existing).__name__}")
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` option deep-merged on top.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"search": {"engine": "Google"}}, {})
        >>> apply_overrides(cfg, ("search.engine=Bing",))["search"]["engine"]
        'Bing'
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))
    return config.with_overrides(overrides)


__all__ = [
    "CoercedValue",
    "ConfigOverride",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
