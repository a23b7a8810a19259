"""Console script entry point with production wiring.

Wires production services from the composition layer before invoking the
CLI, so the ``google-home`` command and ``python -m google_home`` behave
the same.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``google-home`` console script.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
