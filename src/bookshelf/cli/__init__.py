# ABOUTME: CLI package for Bookshelf, built on Click.
# ABOUTME: Defines the root command group, logging setup, and registers subcommands.

import logging
from pathlib import Path

import click
from rich.logging import RichHandler

from bookshelf.cli.commands import config_cmd, lookup_cmd, parse_cmd, search_cmd


@click.group()
@click.version_option(package_name="bookshelf")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to the configuration file (default: ~/.bookshelf/config.json).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """Bookshelf - find Google Books metadata for book files."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


cli.add_command(parse_cmd.parse)
cli.add_command(search_cmd.search)
cli.add_command(lookup_cmd.lookup)
cli.add_command(config_cmd.config)
