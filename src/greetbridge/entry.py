"""Console script target for ``greetbridge``.

The adapters package never imports the composition root, so the production
wiring is chosen here, one level up.
"""

from __future__ import annotations

from .adapters.cli.main import main as run_cli
from .composition import build_production


def main() -> int:
    """Run ``greetbridge`` against production services and return the exit status."""
    return run_cli(services_factory=build_production)


__all__ = ["main"]
