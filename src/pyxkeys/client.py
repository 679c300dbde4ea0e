"""High-level async client for toggle key status reports."""

from __future__ import annotations

import logging
from typing import Any

from pyxkeys._api import status as _status_api
from pyxkeys.config import XkeysConfig
from pyxkeys.models.status import KeyStatus
from pyxkeys.sources import ReportSource, source_from_config

_logger = logging.getLogger(__name__)

_TRACE_MAX_CHARS = 512


class _TracingSource:
    """Wraps a source and logs every report it returns."""

    def __init__(self, inner: ReportSource) -> None:
        self._inner = inner

    async def fetch_report_text(self) -> str:
        text = await self._inner.fetch_report_text()
        if len(text) > _TRACE_MAX_CHARS:
            _logger.debug("Report text: %r…<truncated>", text[:_TRACE_MAX_CHARS])
        else:
            _logger.debug("Report text: %r", text)
        return text


class XkeysClient:
    """Async client for reading toggle key states.

    Usage::

        async with XkeysClient(FileReportSource("xset.txt")) as client:
            statuses = await client.query_all()
            caps = await client.query("Caps Lock")
    """

    def __init__(
        self,
        source: ReportSource | None = None,
        *,
        config: XkeysConfig | None = None,
    ) -> None:
        self._config = config if config is not None else XkeysConfig()
        resolved = source if source is not None else source_from_config(self._config)
        self._source: ReportSource = _TracingSource(resolved) if self._config.trace_enabled else resolved

    @property
    def config(self) -> XkeysConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> XkeysClient:
        return self

    async def __aexit__(self, *exc: Any) -> None:
        return None

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    async def query_all(self) -> dict[str, KeyStatus]:
        """Return every reported key status keyed by name (last entry wins)."""
        return await _status_api.fetch_status_map(self._source)

    async def query(self, name: str) -> KeyStatus | None:
        """Return the first reported status for *name*, or ``None``."""
        return await _status_api.fetch_status(self._source, name)
