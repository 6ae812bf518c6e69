"""Module including value objects used across the domain layer.

All values are immutable and validated on construction, so an instance that
exists is always a legal time of day, offset or offset time.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import time, timedelta, timezone, tzinfo
from typing import ClassVar

from xstime.domain.errors import InvalidValueError
from xstime.domain.formatter import format_offset, format_time_of_day

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MICRO = 1_000
MAX_OFFSET_MINUTES = 18 * 60


def _check_range(kind: str, field: str, value: int, low: int, high: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValueError(kind, field, value, "must be an int")
    if not low <= value <= high:
        raise InvalidValueError(kind, field, value, f"must be in [{low}, {high}]")


@dataclass(frozen=True)
class TimeOfDay:
    """A wall-clock time of day with nanosecond resolution."""

    hour: int
    minute: int
    second: int
    nanosecond: int = 0

    def __post_init__(self) -> None:
        _check_range("time of day", "hour", self.hour, 0, 23)
        _check_range("time of day", "minute", self.minute, 0, 59)
        _check_range("time of day", "second", self.second, 0, 59)
        _check_range(
            "time of day", "nanosecond", self.nanosecond, 0, NANOS_PER_SECOND - 1
        )

    def __str__(self) -> str:
        return format_time_of_day(self)


@dataclass(frozen=True)
class UtcOffset:
    """A signed, minute-granular offset from UTC in the range -18:00..+18:00."""

    total_minutes: int

    UTC: ClassVar[UtcOffset]

    def __post_init__(self) -> None:
        _check_range(
            "UTC offset",
            "total_minutes",
            self.total_minutes,
            -MAX_OFFSET_MINUTES,
            MAX_OFFSET_MINUTES,
        )

    @classmethod
    def of(cls, hours: int, minutes: int = 0, negative: bool = False) -> UtcOffset:
        """Build an offset from an unsigned hour/minute pair and a sign."""
        _check_range("UTC offset", "minutes", minutes, 0, 59)
        _check_range("UTC offset", "hours", hours, 0, MAX_OFFSET_MINUTES // 60)
        total = hours * 60 + minutes
        return cls(-total if negative else total)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> UtcOffset:
        """Convert a ``timedelta`` (e.g. from ``utcoffset()``) to an offset.

        Raises:
            InvalidValueError: If the delta is not a whole number of minutes
                or lies outside -18:00..+18:00.
        """
        minutes, remainder = divmod(delta, timedelta(minutes=1))
        if remainder:
            raise InvalidValueError(
                "UTC offset", "delta", delta, "must be a whole number of minutes"
            )
        return cls(minutes)

    @property
    def is_utc(self) -> bool:
        """True for the zero offset."""
        return self.total_minutes == 0

    @property
    def hours(self) -> int:
        """Unsigned hour part of the offset."""
        return abs(self.total_minutes) // 60

    @property
    def minutes(self) -> int:
        """Unsigned minute part of the offset."""
        return abs(self.total_minutes) % 60

    def to_timedelta(self) -> timedelta:
        return timedelta(minutes=self.total_minutes)

    def to_tzinfo(self) -> tzinfo:
        if self.is_utc:
            return timezone.utc
        return timezone(self.to_timedelta())

    def __str__(self) -> str:
        return format_offset(self)


UtcOffset.UTC = UtcOffset(0)


@dataclass(frozen=True)
class OffsetTimeOfDay:
    """A time of day paired with the UTC offset it was observed in."""

    time: TimeOfDay
    offset: UtcOffset

    def __post_init__(self) -> None:
        # Both halves are validated by their own constructors; reject anything else.
        if not isinstance(self.time, TimeOfDay):
            raise InvalidValueError(
                "offset time", "time", self.time, "must be a TimeOfDay"
            )
        if not isinstance(self.offset, UtcOffset):
            raise InvalidValueError(
                "offset time", "offset", self.offset, "must be a UtcOffset"
            )

    @classmethod
    def of(  # pylint: disable=too-many-arguments
        cls,
        hour: int,
        minute: int,
        second: int,
        nanosecond: int = 0,
        offset: UtcOffset = UtcOffset.UTC,
    ) -> OffsetTimeOfDay:
        """Shorthand for ``OffsetTimeOfDay(TimeOfDay(...), offset)``."""
        return cls(TimeOfDay(hour, minute, second, nanosecond), offset)

    @classmethod
    def from_time(cls, value: time) -> OffsetTimeOfDay:
        """Build from an aware ``datetime.time``.

        Raises:
            InvalidValueError: If ``value`` carries no fixed UTC offset.
        """
        delta = value.utcoffset()
        if delta is None:
            raise InvalidValueError(
                "offset time", "tzinfo", value.tzinfo, "time must carry a UTC offset"
            )
        return cls(
            TimeOfDay(
                value.hour,
                value.minute,
                value.second,
                value.microsecond * NANOS_PER_MICRO,
            ),
            UtcOffset.from_timedelta(delta),
        )

    def to_time(self) -> time:
        """Convert to an aware ``datetime.time``; sub-microsecond digits are dropped."""
        return time(
            self.time.hour,
            self.time.minute,
            self.time.second,
            self.time.nanosecond // NANOS_PER_MICRO,
            tzinfo=self.offset.to_tzinfo(),
        )

    def __str__(self) -> str:
        return format_time_of_day(self.time) + format_offset(self.offset)

