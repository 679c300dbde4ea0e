"""Normalization helpers.

Centralizes whitespace handling and numeric parsing of report fields.
"""

from __future__ import annotations

import re

from pyxkeys.exceptions import EmptyResultError, NumericParseError

_SPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run in *text* into a single space.

    Leading and trailing whitespace is dropped. The result is never the
    empty string: whitespace-only input raises :class:`EmptyResultError`
    because it means the field was malformed.
    """
    result = " ".join(word for word in _SPACE_RE.split(text) if word)
    if not result:
        raise EmptyResultError(f"empty result for {text!r}", text=text)
    return result


def parse_int(text: str) -> int:
    """Parse the normalized form of *text* as an integer.

    Raises
    ------
    EmptyResultError
        If *text* is blank.
    NumericParseError
        If the normalized text is not a decimal integer.
    """
    normalized = normalize_whitespace(text)
    try:
        return int(normalized)
    except ValueError as exc:
        raise NumericParseError(f"not an integer: {normalized!r}", text=text) from exc
