"""pyxkeys - Async Python parser for toggle key status reports from ``xset q``."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyxkeys")
except PackageNotFoundError:
    __version__ = "0+local"
from pyxkeys._api.status import fetch_status, fetch_status_map
from pyxkeys.client import XkeysClient
from pyxkeys.config import XkeysConfig
from pyxkeys.exceptions import (
    EmptyResultError,
    MissingCaptureError,
    NumericParseError,
    XkeysConfigError,
    XkeysError,
    XkeysParseError,
    XkeysSourceError,
)
from pyxkeys.ingestion.normalize import normalize_whitespace, parse_int
from pyxkeys.ingestion.report import KeyStatusReport, iter_statuses, parse_report
from pyxkeys.models import KeyState, KeyStatus
from pyxkeys.sources import (
    FileReportSource,
    ReportSource,
    StaticReportSource,
    StreamReportSource,
    source_from_config,
)

__all__ = [
    "__version__",
    "EmptyResultError",
    "FileReportSource",
    "KeyState",
    "KeyStatus",
    "KeyStatusReport",
    "MissingCaptureError",
    "NumericParseError",
    "ReportSource",
    "StaticReportSource",
    "StreamReportSource",
    "XkeysClient",
    "XkeysConfig",
    "XkeysConfigError",
    "XkeysError",
    "XkeysParseError",
    "XkeysSourceError",
    "fetch_status",
    "fetch_status_map",
    "iter_statuses",
    "normalize_whitespace",
    "parse_int",
    "parse_report",
    "source_from_config",
]
