# ABOUTME: The `bookshelf lookup` command for resolving full metadata of one book.
# ABOUTME: Identifies the Google Books volume for a file name and prints the mapped record.

import asyncio

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from bookshelf.cli.options import book_options, make_book_info
from bookshelf.metadata.googlebooks import PROVIDER_ID, GoogleBooksProvider
from bookshelf.metadata.http import BookshelfHttpClient, MetadataFetchError
from bookshelf.metadata.types import BookInfo, MetadataResult

console = Console()


def _create_http_client() -> BookshelfHttpClient:
    return BookshelfHttpClient()


async def _run_lookup(info: BookInfo) -> MetadataResult:
    async with _create_http_client() as http_client:
        provider = GoogleBooksProvider(http_client=http_client)
        return await provider.get_metadata(info)


@click.command("lookup")
@click.argument("name")
@book_options
@click.option(
    "--id",
    "volume_id",
    default=None,
    help="Known Google Books volume id; skips the search.",
)
def lookup(
    name: str,
    series_name: str | None,
    index_number: int | None,
    year: int | None,
    volume_id: str | None,
) -> None:
    """Find Google Books metadata for the book file NAME."""
    provider_ids = {PROVIDER_ID: volume_id} if volume_id else {}
    info = make_book_info(name, series_name, index_number, year, provider_ids)

    try:
        result = asyncio.run(_run_lookup(info))
    except MetadataFetchError as exc:
        console.print(f"Error: {exc}", style="red", markup=False)
        raise SystemExit(1) from exc

    if not result.has_metadata or result.item is None:
        console.print(f"No metadata found for {name!r}.", style="yellow", markup=False)
        raise SystemExit(1)

    book = result.item
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=12)
    table.add_column("Value")

    table.add_row("ID", book.provider_ids.get(PROVIDER_ID, "?"))
    table.add_row("Title", Text(book.name or "untitled"))
    if book.production_year is not None:
        table.add_row("Year", str(book.production_year))
    authors = [p.name for p in result.people if p.type == "Author"]
    if authors:
        table.add_row("Authors", ", ".join(authors))
    if book.studios:
        table.add_row("Publisher", ", ".join(book.studios))
    if book.genres:
        table.add_row("Genre", ", ".join(book.genres))
    if book.tags:
        table.add_row("Tags", ", ".join(book.tags))
    if book.community_rating is not None:
        table.add_row("Rating", f"{book.community_rating:g}/10")
    if result.result_language:
        table.add_row("Language", result.result_language)
    table.add_row("Matched by", "id" if result.queried_by_id else "search")
    if book.overview:
        table.add_row("Overview", Text(book.overview))

    console.print(table)
