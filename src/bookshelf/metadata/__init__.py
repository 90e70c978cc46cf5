# ABOUTME: Metadata package for book file name parsing, remote lookup, and result mapping.
# ABOUTME: Exports the host-shaped records and the Google Books provider.

from bookshelf.metadata.comparable import comparable_name, names_match
from bookshelf.metadata.filename import ParsedName, apply_parsed_name, parse_book_name
from bookshelf.metadata.googlebooks import GoogleBooksProvider
from bookshelf.metadata.provider import RemoteMetadataProvider
from bookshelf.metadata.types import (
    Book,
    BookInfo,
    MetadataResult,
    PersonInfo,
    RemoteSearchResult,
)

__all__ = [
    "Book",
    "BookInfo",
    "GoogleBooksProvider",
    "MetadataResult",
    "ParsedName",
    "PersonInfo",
    "RemoteMetadataProvider",
    "RemoteSearchResult",
    "apply_parsed_name",
    "comparable_name",
    "names_match",
    "parse_book_name",
]
