# ABOUTME: The `bookshelf parse` command for inspecting file name parsing.
# ABOUTME: Shows the series, index, year, and search query derived from a file name.

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from bookshelf.cli.options import make_book_info, series_option
from bookshelf.metadata.comparable import comparable_name
from bookshelf.metadata.filename import apply_parsed_name, build_search_query, parse_book_name

console = Console()


def _value(value: object) -> Text:
    if value is None or value == "":
        return Text("-", style="dim")
    return Text(str(value))


@click.command("parse")
@click.argument("name")
@series_option
def parse(name: str, series_name: str | None) -> None:
    """Show how a book file NAME is parsed for searching."""
    info = apply_parsed_name(make_book_info(name, series_name), parse_book_name(name))

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=12)
    table.add_column("Value")

    table.add_row("Name", _value(info.name))
    table.add_row("Series", _value(info.series_name))
    table.add_row("Index", _value(info.index_number))
    table.add_row("Year", _value(info.year))
    table.add_row("Query", Text(build_search_query(info)))
    table.add_row(
        "Comparable", Text(comparable_name(info.name, info.series_name, info.index_number))
    )

    console.print(table)
