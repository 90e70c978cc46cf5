# ABOUTME: Shared Click options for Bookshelf CLI commands.
# ABOUTME: Provides the --series/--index/--year decorators and BookInfo construction.

from collections.abc import Callable
from typing import Any

import click

from bookshelf.metadata.types import BookInfo

series_option = click.option(
    "--series",
    "series_name",
    default=None,
    help="Series name, e.g. taken from the parent folder.",
)

index_option = click.option(
    "--index",
    "index_number",
    type=int,
    default=None,
    help="Position of the book within its series.",
)

year_option = click.option(
    "--year",
    type=int,
    default=None,
    help="Publication year, if known.",
)


def book_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Apply the series, index, and year options to a command."""
    return series_option(index_option(year_option(func)))


def make_book_info(
    name: str,
    series_name: str | None = None,
    index_number: int | None = None,
    year: int | None = None,
    provider_ids: dict[str, str] | None = None,
) -> BookInfo:
    """Build the lookup input the way the media server would."""
    return BookInfo(
        name=name,
        series_name=series_name,
        index_number=index_number,
        year=year,
        provider_ids=provider_ids or {},
    )
