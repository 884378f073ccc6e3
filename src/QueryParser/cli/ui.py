"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path

import click

from QueryParser.cli.runner import CommandRunner
from QueryParser.config import DEFAULT_CONFIG_PATH, load_config_with_defaults


@click.group(help="QueryParser: parse search-box queries into structured clauses.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file, merged over the defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Args:
        ctx: Click context.
        config_path: Path to YAML config file.
    """
    try:
        cfg = load_config_with_defaults(config_path)
    except (OSError, TypeError, ValueError) as e:
        raise click.ClickException(f"Invalid config {config_path}: {e}") from e
    ctx.obj = cfg


@cli.command("parse")
@click.argument("queries", nargs=-1)
@click.pass_context
def parse_cmd(ctx: click.Context, queries: tuple[str, ...]) -> None:
    """Parse QUERIES (or the configured queries) and write the clauses.

    Args:
        ctx: Click context.
        queries: Query strings given on the command line.

    Raises:
        click.Abort: When any query fails to parse.
    """
    runner = CommandRunner(ctx.obj)
    runner.run_parse(action=ctx.command.name, queries=queries)
