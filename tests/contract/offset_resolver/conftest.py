"""Fixtures for offset resolver contract tests."""

from collections.abc import Iterable
from datetime import date
from zoneinfo import ZoneInfo

import pytest

from xstime.adapters.clocks import FixedZoneClock
from xstime.adapters.offset_resolvers import (
    FixedOffsetResolver,
    SystemZoneOffsetResolver,
)
from xstime.domain.value_objects import UtcOffset
from xstime.interfaces.offset_resolver import OffsetResolver


@pytest.fixture(params=["system-zone", "fixed"])
def offset_resolver(request: pytest.FixtureRequest) -> Iterable[OffsetResolver]:
    """Return a fresh OffsetResolver for each resolving implementation.

    Supported params:
      - `"system-zone"` → SystemZoneOffsetResolver over a pinned New York clock
      - `"fixed"` → FixedOffsetResolver(+05:30)

    RejectingOffsetResolver never resolves and is covered by unit tests.
    """
    match request.param:
        case "system-zone":
            clock = FixedZoneClock(ZoneInfo("America/New_York"), date(2024, 3, 10))
            yield SystemZoneOffsetResolver(clock)
        case "fixed":
            yield FixedOffsetResolver(UtcOffset(330))
        case _:
            raise ValueError(f"unknown offset resolver type: {request.param}")
