# ABOUTME: Title normalization used to decide whether two titles denote the same book.
# ABOUTME: Folds case, numerals, punctuation, and "the" so equality can be ordinal.

import re
import unicodedata

# Trailing roman numerals and their arabic equivalents. Suffixes never overlap
# because each one includes the preceding space.
_END_NUMERALS: tuple[tuple[str, str], ...] = (
    (" i", " 1"),
    (" ii", " 2"),
    (" iii", " 3"),
    (" iv", " 4"),
    (" v", " 5"),
    (" vi", " 6"),
    (" vii", " 7"),
    (" viii", " 8"),
    (" ix", " 9"),
    (" x", " 10"),
)

# Converted to whitespace. Two distinct dashes: hyphen-minus and en dash.
_SPACERS = frozenset("/,.:;\\(){}[]+-_=–*")

_REMOVE = frozenset("\"'!`?")

# Spacing modifier letters through the first combining diacritical marks.
_MODIFIER_RANGE = (0x02B0, 0x0333)

_THE_RE = re.compile("the", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")


def _replace_end_numeral(name: str) -> str:
    for suffix, replacement in _END_NUMERALS:
        if name.endswith(suffix):
            return name[: -len(suffix)] + replacement
    return name


def _fold_characters(name: str) -> str:
    low, high = _MODIFIER_RANGE
    parts: list[str] = []
    for ch in name:
        if low <= ord(ch) <= high or ch in _REMOVE:
            continue
        if ch in _SPACERS:
            parts.append(" ")
        elif ch == "&":
            parts.append(" and ")
        else:
            parts.append(ch)
    return "".join(parts)


def comparable_name(
    name: str | None, series_name: str | None = None, index: int | None = None
) -> str:
    """Normalize a title for equality comparison.

    When `name` is blank but a series name and index are known, the title
    "{series_name} {index}" is used instead, matching how such books are
    searched. Returns an empty string when there is nothing to compare.

    The result is only meant for comparison, never for display.
    """
    if name is None or not name.strip():
        if series_name and series_name.strip() and index is not None:
            name = f"{series_name} {index}"
        else:
            return ""

    name = unicodedata.normalize("NFC", name.lower())
    name = _replace_end_numeral(name)
    name = _fold_characters(name)
    # Dropping a modifier can leave a base letter next to a mark it composes with.
    name = unicodedata.normalize("NFC", name)
    name = _THE_RE.sub(" ", name)
    # Dashes are already spacers by now; kept so older comparable names still agree.
    name = name.replace(" - ", ": ")
    name = _WHITESPACE_RE.sub(" ", name).strip()
    # Folding can expose a trailing numeral ("Book II!"), replace it so the result is stable.
    return _replace_end_numeral(name)


def names_match(left: str | None, right: str | None) -> bool:
    """Whether two titles normalize to the same comparable name."""
    return comparable_name(left) == comparable_name(right)
