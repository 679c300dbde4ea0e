"""Report sources that supply raw ``xset q`` text."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Protocol, TextIO

from pyxkeys.config import XkeysConfig
from pyxkeys.exceptions import XkeysSourceError

_logger = logging.getLogger(__name__)


class ReportSource(Protocol):
    """Structural interface for anything that can produce report text.

    Having a protocol here makes it easy to pass test doubles while the
    concrete sources below stay simple.
    """

    async def fetch_report_text(self) -> str:
        ...


class StaticReportSource:
    """Source returning a report captured beforehand."""

    def __init__(self, text: str) -> None:
        self._text = text

    async def fetch_report_text(self) -> str:
        return self._text


class FileReportSource:
    """Source reading the report from a file on every fetch."""

    def __init__(self, path: str | Path, *, encoding: str = "utf-8") -> None:
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    async def fetch_report_text(self) -> str:
        _logger.debug("Reading key status report from %s", self._path)
        try:
            return await asyncio.to_thread(self._path.read_text, encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise XkeysSourceError(
                f"Could not read report from {self._path}: {exc}",
                path=str(self._path),
            ) from exc


class StreamReportSource:
    """Source reading a text stream (e.g. ``sys.stdin``) to its end.

    A stream can only be drained once; later fetches return whatever the
    stream still holds, usually the empty string.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    async def fetch_report_text(self) -> str:
        name = getattr(self._stream, "name", "<stream>")
        _logger.debug("Reading key status report from %s", name)
        try:
            return await asyncio.to_thread(self._stream.read)
        except OSError as exc:
            raise XkeysSourceError(f"Could not read report from {name}: {exc}", path=str(name)) from exc


def source_from_config(config: XkeysConfig) -> ReportSource:
    """Build the report source described by *config*.

    Uses :class:`FileReportSource` when ``report_path`` is set and falls
    back to reading standard input otherwise.
    """
    if config.report_path:
        return FileReportSource(config.report_path, encoding=config.encoding)
    return StreamReportSource(sys.stdin)
