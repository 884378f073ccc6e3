"""CLI package for QueryParser command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from QueryParser.cli.runner import CommandRunner
from QueryParser.cli.ui import cli


def main() -> None:
    """Run QueryParser CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
