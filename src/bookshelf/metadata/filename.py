# ABOUTME: File name parsing into name/series/index/year, and search query construction.
# ABOUTME: Patterns are tried in priority order and the first full match wins.

import logging
import re
from dataclasses import dataclass, replace

from bookshelf.metadata.types import BookInfo

logger = logging.getLogger(__name__)

# Fields a pattern can own. A field is owned when the pattern defines a group for it.
_OWNABLE_FIELDS = ("name", "series_name", "index", "year")

# Ordered by priority. Every pattern is matched against the whole (whitespace-normalized) string.
NAME_PATTERNS: tuple[re.Pattern[str], ...] = (
    # seriesName (seriesYear) #index (of count) (year); only seriesName and index required
    re.compile(
        r"(?P<series_name>.+?)(?:\s\((?P<series_year>\d{4})\))?\s#(?P<index>\d+)"
        r"(?:\s\(of\s(?P<count>\d+)\))?(?:\s\((?P<year>\d{4})\))?"
    ),
    # name (seriesName, #index) (year); year optional
    re.compile(
        r"(?P<name>.+?)\s\((?P<series_name>.+?),\s#(?P<index>\d+)\)(?:\s\((?P<year>\d{4})\))?"
    ),
    # index - name (year); year optional
    re.compile(r"(?P<index>\d+)\s-\s(?P<name>.+?)(?:\s\((?P<year>\d{4})\))?"),
    # name (year)
    re.compile(r"(?P<name>.*)\((?P<year>\d{4})\)"),
    # last resort: the whole string is the name
    re.compile(r"(?P<name>.*)"),
)

_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class ParsedName:
    """Structured decomposition of a book file name.

    Attributes:
        name: The book title, empty when the matching pattern has no name group.
        series_name: Series name, if captured.
        index: Position in the series, if captured. 0 is a valid index.
        year: Publication year, if captured.
        series_year: Year the series started, if captured (informational).
        count: Total books in the series, if captured (informational).
        owned_fields: Fields the matching pattern defines groups for.
    """

    name: str = ""
    series_name: str | None = None
    index: int | None = None
    year: int | None = None
    series_year: int | None = None
    count: int | None = None
    owned_fields: frozenset[str] = frozenset({"name"})


def _group_int(match: re.Match[str], group: str) -> int | None:
    """Parse a numeric capture group. Absent or non-numeric groups give None."""
    if group not in match.re.groupindex:
        return None
    value = match.group(group)
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _group_str(match: re.Match[str], group: str) -> str | None:
    if group not in match.re.groupindex:
        return None
    value = match.group(group)
    return value.strip() if value is not None else None


def parse_book_name(raw: str) -> ParsedName:
    """Parse a raw file-name-derived title into its parts.

    Whitespace runs are collapsed and the string trimmed before matching.
    Patterns are tried in order and the first one that matches the whole
    string wins. The final pattern always matches, so this never fails.
    """
    text = _WHITESPACE_RE.sub(" ", raw).strip()

    for pattern in NAME_PATTERNS:
        match = pattern.fullmatch(text)
        if match is None:
            continue

        owned = frozenset(f for f in _OWNABLE_FIELDS if f in pattern.groupindex) | {"name"}
        parsed = ParsedName(
            name=_group_str(match, "name") or "",
            series_name=_group_str(match, "series_name"),
            index=_group_int(match, "index"),
            year=_group_int(match, "year"),
            series_year=_group_int(match, "series_year"),
            count=_group_int(match, "count"),
            owned_fields=owned,
        )
        logger.debug("Parsed %r with pattern %r -> %s", raw, pattern.pattern, parsed)
        return parsed

    # Unreachable: the fallback pattern matches any string.
    return ParsedName(name=text)


def apply_parsed_name(info: BookInfo, parsed: ParsedName) -> BookInfo:
    """Merge a parse result into a copy of `info`.

    The name is always replaced. Series name, index, and year are replaced
    only when the matching pattern owns them; an owned field whose group did
    not participate becomes None. Fields the pattern does not own, such as a
    series name taken from the parent folder, are kept.
    """
    updates: dict[str, object] = {"name": parsed.name}
    if "series_name" in parsed.owned_fields:
        updates["series_name"] = parsed.series_name
    if "index" in parsed.owned_fields:
        updates["index_number"] = parsed.index
    if "year" in parsed.owned_fields:
        updates["year"] = parsed.year
    return replace(info, **updates)


def build_search_query(info: BookInfo) -> str:
    """Compose the remote search string for a book.

    Series books search by series name plus the book name, or the index when
    there is no name. Other books search by name plus year.
    """
    if info.series_name and info.series_name.strip():
        query = info.series_name
        if info.name and info.name.strip():
            return f"{query} {info.name}"
        if info.index_number is not None:
            return f"{query} {info.index_number}"
        return query

    if info.name and info.name.strip():
        if info.year is not None:
            return f"{info.name} {info.year}"
        return info.name

    return ""
