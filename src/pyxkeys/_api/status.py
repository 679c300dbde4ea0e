"""Key status retrieval.

Each call fetches one fresh report from the source and parses it; no
state is kept between calls.
"""

from __future__ import annotations

import logging

from pyxkeys.ingestion.report import parse_report
from pyxkeys.models.status import KeyStatus
from pyxkeys.sources import ReportSource

_logger = logging.getLogger(__name__)


async def fetch_status_map(source: ReportSource) -> dict[str, KeyStatus]:
    """Fetch and parse every key status in the current report.

    Parameters
    ----------
    source : ReportSource
        Supplier of the raw report text.

    Returns
    -------
    dict[str, KeyStatus]
        Statuses keyed by name, in report order. When a name appears
        more than once the last entry wins.
    """
    text = await source.fetch_report_text()
    statuses: dict[str, KeyStatus] = {}
    for status in parse_report(text):
        statuses[status.name] = status
    _logger.debug("Parsed %d key statuses", len(statuses))
    return statuses


async def fetch_status(source: ReportSource, name: str) -> KeyStatus | None:
    """Fetch the status of the key called *name*.

    The first entry whose name matches exactly (case-sensitive) is
    returned, so with duplicated names this differs from
    :func:`fetch_status_map`. Returns ``None`` when no entry matches.
    """
    text = await source.fetch_report_text()
    for status in parse_report(text):
        if status.name == name:
            return status
    _logger.debug("No key named %r in report", name)
    return None
