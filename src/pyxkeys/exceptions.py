"""Custom exception hierarchy for pyxkeys."""

from __future__ import annotations


class XkeysError(Exception):
    """Base exception for all pyxkeys errors."""


class XkeysConfigError(XkeysError):
    """Invalid or missing configuration."""


class XkeysSourceError(XkeysError):
    """A report source could not produce the report text."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)


class XkeysParseError(XkeysError, ValueError):
    """Report text could not be turned into a key status."""

    def __init__(self, message: str, *, text: str = "") -> None:
        self.text = text
        super().__init__(message)


class EmptyResultError(XkeysParseError):
    """Whitespace normalization left nothing behind.

    Raised for empty or whitespace-only input, which means a name or id
    field in the report was malformed.
    """


class NumericParseError(XkeysParseError):
    """A key id is not a decimal integer."""


class MissingCaptureError(XkeysError):
    """A report line matched but one of its capture groups is missing.

    The status pattern always captures every group on a match, so this
    indicates a broken pattern rather than bad input.
    """

    def __init__(self, message: str, *, group: str = "") -> None:
        self.group = group
        super().__init__(message)
