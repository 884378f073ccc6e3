"""Command runner for coordinating CLI execution.

Manages logging configuration, writer creation and error handling for
command execution.
"""

from __future__ import annotations

from typing import Sequence

import click

from QueryParser.cli.commands import ParseCommand
from QueryParser.config import AppConfig
from QueryParser.renderers import create_output_writer
from QueryParser.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution.

    Handles logging configuration, component creation and error handling
    for CLI commands.
    """

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_parse(self, action: str, queries: Sequence[str]) -> None:
        """Execute the parse command.

        Args:
            action: The CLI command name (e.g., 'parse').
            queries: Queries from the command line; the configured queries are
                used when empty.

        Raises:
            click.UsageError: When there is nothing to parse.
            click.Abort: When any query fails or output cannot be written.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        batch = tuple(queries) or self.config.queries
        if not batch:
            raise click.UsageError("No query given and no queries configured")

        try:
            output_writer = create_output_writer(self.config)
            command = ParseCommand(queries=batch, output_writer=output_writer)
            failures = command.execute()
            output_writer.finalize(action)
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Parse failed: %s", e)
            raise click.Abort from e

        if failures:
            log.error("%d of %d queries failed to parse", failures, len(batch))
            raise click.Abort
