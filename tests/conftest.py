"""Global pytest fixtures and default marks for xstime."""

from __future__ import annotations

import time
from collections.abc import Iterator
from datetime import date
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from xstime import config as xstime_config
from xstime.adapters.clocks import FixedZoneClock

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()

#: Top-level test directory -> marker applied to every test beneath it.
DEFAULT_MARKERS = {
    "unit": "unit",
    "contract": "contract",
    "integration": "integration",
    "e2e": "e2e",
}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark each test after the top-level directory it lives in."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        top = path.relative_to(TESTS_ROOT).parts[0]
        if (marker_name := DEFAULT_MARKERS.get(top)) is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture(autouse=True)
def no_zone_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's XSTIME_TZ from leaking into tests."""
    monkeypatch.delenv(xstime_config.ZONE_ENV_VAR, raising=False)


@pytest.fixture
def copenhagen() -> ZoneInfo:
    """A zone with daylight-saving time (CET/CEST)."""
    return ZoneInfo("Europe/Copenhagen")


@pytest.fixture
def copenhagen_winter_clock(copenhagen: ZoneInfo) -> FixedZoneClock:
    """Copenhagen on a winter day (+01:00)."""
    return FixedZoneClock(copenhagen, date(2024, 1, 15))


@pytest.fixture
def copenhagen_summer_clock(copenhagen: ZoneInfo) -> FixedZoneClock:
    """Copenhagen on a summer day (+02:00)."""
    return FixedZoneClock(copenhagen, date(2024, 7, 15))


@pytest.fixture
def copenhagen_process_zone(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Switch the process's own local zone (TZ) to Europe/Copenhagen."""
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset() is not available on this platform")
    monkeypatch.setenv("TZ", "Europe/Copenhagen")
    time.tzset()
    try:
        if time.tzname != ("CET", "CEST"):
            pytest.skip("system zone database has no Europe/Copenhagen")
        yield
    finally:
        monkeypatch.undo()
        time.tzset()
