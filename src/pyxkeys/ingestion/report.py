"""Parsing of the keyboard indicator section of ``xset q``.

A report contains entries such as::

    XKB indicators:
      00: Caps Lock:   off    01: Num Lock:    on     02: Scroll Lock: off

Every ``ID: NAME: on|off`` entry anywhere in the text becomes one
:class:`~pyxkeys.models.status.KeyStatus`. The scan is global rather than
line based, so several entries on one line and unrelated surrounding
lines are both fine.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from pyxkeys.exceptions import MissingCaptureError
from pyxkeys.ingestion.normalize import normalize_whitespace, parse_int
from pyxkeys.models.status import KeyState, KeyStatus

_logger = logging.getLogger(__name__)

STATUS_RE = re.compile(r"(?P<id>\d+):\s+(?P<name>(?:\w+\s+)*\w+)\s*:\s+(?P<state>on|off)")
"""Pattern matching one key entry of ``xset q`` output."""


def _capture(match: re.Match[str], group: str) -> str:
    value = match.group(group)
    if value is None:
        raise MissingCaptureError(f"status match {match.group(0)!r} has no {group!r} group", group=group)
    return value


def _parse_match(match: re.Match[str]) -> KeyStatus:
    name = normalize_whitespace(_capture(match, "name"))
    key_id = parse_int(_capture(match, "id"))
    state = KeyState.ON if _capture(match, "state") == "on" else KeyState.OFF
    return KeyStatus(name=name, id=key_id, state=state)


def iter_statuses(text: str) -> Iterator[KeyStatus]:
    """Yield a :class:`KeyStatus` for every key entry in *text*, in order.

    Raises
    ------
    EmptyResultError
        If a captured field is blank after normalization.
    NumericParseError
        If a captured id is not an integer.
    MissingCaptureError
        If a match lacks one of the ``id``, ``name`` or ``state`` groups.
    """
    for match in STATUS_RE.finditer(text):
        yield _parse_match(match)


class KeyStatusReport:
    """Lazy, re-iterable view over the key statuses in a report.

    Nothing is parsed on construction. Each iteration scans the report
    text again from the start, so parse errors surface while iterating.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        self._text = text

    @property
    def text(self) -> str:
        """The raw report text."""
        return self._text

    def __iter__(self) -> Iterator[KeyStatus]:
        return iter_statuses(self._text)

    def __repr__(self) -> str:
        return f"KeyStatusReport(<{len(self._text)} chars>)"


def parse_report(text: str) -> KeyStatusReport:
    """Parse ``xset q`` output into a lazy sequence of key statuses."""
    _logger.debug("Parsing key status report (%d chars)", len(text))
    return KeyStatusReport(text)
