from __future__ import annotations

import string

"""Spreadsheet column label <-> zero-based index conversion.

Labels are base-26 numerals without a zero digit (A=1 .. Z=26), so
"A" -> 0, "Z" -> 25, "AA" -> 26, "AZ" -> 51.
"""

__all__ = [
    "InvalidColumnLabelError",
    "column_to_index",
    "index_to_column",
]

_LETTERS = frozenset(string.ascii_uppercase)


class InvalidColumnLabelError(ValueError):
    """Raised when a column label is not a non-empty run of letters A-Z."""


def column_to_index(label: str) -> int:
    """Convert a column label such as "A" or "AB" to a zero-based index.

    Lowercase letters are accepted and treated as their uppercase form.
    """
    if not isinstance(label, str):
        raise InvalidColumnLabelError(f"column label must be a string: {label!r}")
    normalized = label.strip().upper()
    if not normalized or not set(normalized) <= _LETTERS:
        raise InvalidColumnLabelError(f"invalid column label: {label!r}")
    index = 0
    for ch in normalized:
        index = index * 26 + (ord(ch) - ord("A") + 1)
    return index - 1


def index_to_column(index: int) -> str:
    if index < 0:
        raise InvalidColumnLabelError(f"column index must be >= 0: {index}")
    letters = []
    n = index + 1
    while n:
        n, rem = divmod(n - 1, 26)
        letters.append(chr(ord("A") + rem))
    return "".join(reversed(letters))
