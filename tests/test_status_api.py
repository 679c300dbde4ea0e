from __future__ import annotations

import pytest

from pyxkeys._api.status import fetch_status, fetch_status_map
from pyxkeys.exceptions import XkeysSourceError
from pyxkeys.models.status import KeyState, KeyStatus
from pyxkeys.sources import StaticReportSource


class _CountingSource:
    def __init__(self, text: str) -> None:
        self._text = text
        self.calls = 0

    async def fetch_report_text(self) -> str:
        self.calls += 1
        return self._text


class _FailingSource:
    def __init__(self, exc: Exception) -> None:
        self._exc = exc

    async def fetch_report_text(self) -> str:
        raise self._exc


@pytest.mark.asyncio
async def test_fetch_status_map_keys_by_name_in_order() -> None:
    source = _CountingSource("8: Caps Lock:   on\n9: Num Lock: off")

    statuses = await fetch_status_map(source)

    assert list(statuses) == ["Caps Lock", "Num Lock"]
    assert statuses["Caps Lock"] == KeyStatus(name="Caps Lock", id=8, state=KeyState.ON)
    assert statuses["Num Lock"] == KeyStatus(name="Num Lock", id=9, state=KeyState.OFF)
    assert source.calls == 1


@pytest.mark.asyncio
async def test_fetch_status_map_last_duplicate_wins() -> None:
    statuses = await fetch_status_map(StaticReportSource("1: A: on\n2: A: off"))

    assert list(statuses) == ["A"]
    assert statuses["A"].id == 2
    assert statuses["A"].state is KeyState.OFF


@pytest.mark.asyncio
async def test_fetch_status_first_duplicate_wins() -> None:
    status = await fetch_status(StaticReportSource("1: A: on\n2: A: off"), "A")

    assert status is not None
    assert status.id == 1
    assert status.state is KeyState.ON


@pytest.mark.asyncio
async def test_fetch_status_not_found_returns_none() -> None:
    source = _CountingSource("1: A: on\n2: B: off")

    assert await fetch_status(source, "NoSuchKey") is None
    assert source.calls == 1


@pytest.mark.asyncio
async def test_fetch_status_is_exact_and_case_sensitive() -> None:
    source = StaticReportSource("0: Caps Lock: on")

    assert await fetch_status(source, "caps lock") is None
    assert await fetch_status(source, "Caps  Lock") is None
    assert await fetch_status(source, "Caps") is None
    assert await fetch_status(source, "Caps Lock") is not None


@pytest.mark.asyncio
async def test_empty_report_gives_empty_results() -> None:
    source = StaticReportSource("DPMS is Enabled\nMonitor is On\n")

    assert await fetch_status_map(source) == {}
    assert await fetch_status(source, "Caps Lock") is None


@pytest.mark.asyncio
async def test_fetch_status_stops_at_first_match(monkeypatch: pytest.MonkeyPatch) -> None:
    seen: list[str] = []

    def _recording_parse(text: str):
        for name in ("A", "B", "C"):
            seen.append(name)
            yield KeyStatus(name=name, id=len(seen), state=KeyState.ON)

    monkeypatch.setattr("pyxkeys._api.status.parse_report", _recording_parse)

    status = await fetch_status(StaticReportSource("ignored"), "B")

    assert status is not None
    assert status.name == "B"
    assert seen == ["A", "B"]


@pytest.mark.asyncio
async def test_source_errors_propagate_unchanged() -> None:
    error = XkeysSourceError("boom", path="/nowhere")

    with pytest.raises(XkeysSourceError) as exc_info:
        await fetch_status_map(_FailingSource(error))
    assert exc_info.value is error

    other = RuntimeError("process died")
    with pytest.raises(RuntimeError) as exc_info2:
        await fetch_status(_FailingSource(other), "A")
    assert exc_info2.value is other
