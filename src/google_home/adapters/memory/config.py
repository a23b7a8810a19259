"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production adapters without touching
the filesystem.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return a Config holding the same defaults the bundled TOML declares."""
    return Config(
        {
            "greeting": {"signed_in": False, "username": ""},
            "search": {"engine": "Google", "target": "_blank", "username": ""},
        },
        {},
    )


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
]
