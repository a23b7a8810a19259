"""Static package metadata surfaced to CLI commands and documentation.

Values are fixed at import time; nothing refreshes them while the process
runs. Keep ``version`` in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Final

name: Final[str] = "google_home"
title: Final[str] = "Greetings, search URLs and user profiles for the Google Home website"
version: Final[str] = "1.3.0"
website_version: Final[str] = "2.4.1"
homepage: Final[str] = "https://arnavthorat78.github.io/Google-Home/"
author: Final[str] = "arnavthorat78"
author_email: Final[str] = "arnavthorat78@users.noreply.github.com"
shell_command: Final[str] = "google-home"

# lib_layered_config identifiers; they decide the platform config paths.
LAYEREDCONF_VENDOR: Final[str] = "arnavthorat78"
LAYEREDCONF_APP: Final[str] = "Google Home"
LAYEREDCONF_SLUG: Final[str] = "google-home"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for google_home:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("website_version", website_version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "print_info",
]
