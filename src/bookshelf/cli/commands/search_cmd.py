# ABOUTME: The `bookshelf search` command for listing Google Books candidates.
# ABOUTME: Runs the remote search for a file name and prints the candidates as a table.

import asyncio

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from bookshelf.cli.options import book_options, make_book_info
from bookshelf.metadata.googlebooks import PROVIDER_ID, GoogleBooksProvider
from bookshelf.metadata.http import BookshelfHttpClient, MetadataFetchError
from bookshelf.metadata.types import BookInfo, RemoteSearchResult

console = Console()


def _create_http_client() -> BookshelfHttpClient:
    return BookshelfHttpClient()


async def _run_search(info: BookInfo) -> list[RemoteSearchResult]:
    async with _create_http_client() as http_client:
        provider = GoogleBooksProvider(http_client=http_client)
        return await provider.get_search_results(info)


@click.command("search")
@click.argument("name")
@book_options
def search(
    name: str, series_name: str | None, index_number: int | None, year: int | None
) -> None:
    """Search Google Books for NAME and list the candidates."""
    info = make_book_info(name, series_name, index_number, year)

    try:
        results = asyncio.run(_run_search(info))
    except MetadataFetchError as exc:
        console.print(f"Error: {exc}", style="red", markup=False)
        raise SystemExit(1) from exc

    if not results:
        console.print("[yellow]No results found.[/yellow]")
        return

    table = Table()
    table.add_column("ID", style="dim")
    table.add_column("Title", style="bold")
    table.add_column("Year", width=5)

    for result in results:
        table.add_row(
            result.provider_ids.get(PROVIDER_ID, "?"),
            Text(result.name) if result.name else Text("untitled", style="dim"),
            str(result.production_year) if result.production_year is not None else "?",
        )

    console.print(table)
    console.print(f"\n[dim]{len(results)} result(s)[/dim]")
