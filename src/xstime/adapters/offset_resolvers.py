"""Offset resolvers for xstime.

A resolver decides which UTC offset an ``xs:time`` value gets when its text
omits one. The parser depends only on the `OffsetResolver` contract; pick the
implementation that matches the semantics the caller needs.
"""

from __future__ import annotations

import logging
from datetime import datetime, time
from typing import TYPE_CHECKING

from xstime.adapters.clocks import SystemZoneClock
from xstime.domain.errors import (
    InvalidValueError,
    MissingOffsetError,
    UnresolvableOffsetError,
)
from xstime.domain.value_objects import NANOS_PER_MICRO, UtcOffset
from xstime.interfaces.offset_resolver import OffsetResolver

if TYPE_CHECKING:
    from xstime.domain.value_objects import TimeOfDay
    from xstime.interfaces.clock import ZoneClock

# pylint: disable=too-few-public-methods

logger = logging.getLogger(__name__)


class SystemZoneOffsetResolver(OffsetResolver):
    """Resolve the offset from the local zone rules on today's date.

    The time of day is combined with ``clock.today()`` and localized with the
    clock's zone rules. Ambiguous local times (the repeated hour when clocks
    go back) resolve to the earlier offset, i.e. the one in force before the
    transition. Local times skipped when clocks go forward also get the offset
    in force before the gap.
    """

    def __init__(self, clock: ZoneClock | None = None) -> None:
        self._clock = clock if clock is not None else SystemZoneClock()

    def resolve(self, time_of_day: TimeOfDay) -> UtcOffset:
        # fold=0 maps an ambiguous local time to its earlier instant (PEP 495)
        wall_time = time(
            time_of_day.hour,
            time_of_day.minute,
            time_of_day.second,
            time_of_day.nanosecond // NANOS_PER_MICRO,
            fold=0,
        )
        # one zone for both the date and the rules
        clock = self._clock.snapshot()
        naive = datetime.combine(clock.today(), wall_time)
        local = clock.localize(naive)
        if (delta := local.utcoffset()) is None:
            raise UnresolvableOffsetError(
                f"Zone {local.tzinfo!r} gives no UTC offset for {naive.isoformat()}."
            )
        try:
            offset = UtcOffset.from_timedelta(delta)
        except InvalidValueError as e:
            raise UnresolvableOffsetError(
                f"Zone {local.tzinfo!r} offset {delta} at {naive.isoformat()} "
                "is not representable as an xs:time offset."
            ) from e
        logger.debug("Resolved offset %s for local time %s", offset, naive)
        return offset


class FixedOffsetResolver(OffsetResolver):
    """Always answer with the same offset."""

    def __init__(self, offset: UtcOffset) -> None:
        self._offset = offset

    @property
    def offset(self) -> UtcOffset:
        return self._offset

    def resolve(self, time_of_day: TimeOfDay) -> UtcOffset:
        return self._offset


class RejectingOffsetResolver(OffsetResolver):
    """Refuse values without an explicit offset."""

    def resolve(self, time_of_day: TimeOfDay) -> UtcOffset:
        raise MissingOffsetError(time_of_day)


def default_offset_resolver() -> OffsetResolver:
    """Return the resolver used when a caller supplies none."""
    return SystemZoneOffsetResolver(SystemZoneClock())
