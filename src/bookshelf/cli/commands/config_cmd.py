# ABOUTME: The `bookshelf config` command for viewing and updating plugin settings.
# ABOUTME: Reads and writes the JSON configuration file holding the Comic Vine API key.

from pathlib import Path

import click
from rich.console import Console

from bookshelf.config import (
    DEFAULT_CONFIG_PATH,
    ConfigurationError,
    load_configuration,
    save_configuration,
)

console = Console()


@click.command("config")
@click.option(
    "--set-comicvine-key",
    "comicvine_key",
    default=None,
    help="Store a Comic Vine API key (use an empty string to clear it).",
)
@click.pass_context
def config(ctx: click.Context, comicvine_key: str | None) -> None:
    """Show or update the bookshelf configuration."""
    config_path: Path = (ctx.obj or {}).get("config_path") or DEFAULT_CONFIG_PATH

    try:
        settings = load_configuration(config_path)
        if comicvine_key is not None:
            settings.comicvine_api_key = comicvine_key
            save_configuration(settings, config_path)
            console.print(f"[green]Saved configuration to {config_path}[/green]")
    except ConfigurationError as exc:
        console.print(f"Error: {exc}", style="red", markup=False)
        raise SystemExit(1) from exc

    console.print(f"Config file: {config_path}")
    status = "set" if settings.has_comicvine_api_key else "not set"
    console.print(f"Comic Vine API key: {status}")
