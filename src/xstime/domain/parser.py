"""Lenient ``xs:time`` parser.

Grammar::

    time     := hh ':' mm ':' ss [fraction] [offset]
    hh       := "00".."23", or "24" only as 24:00:00 (end-of-day midnight)
    mm, ss   := "00".."59"
    fraction := '.' 1*digit
    offset   := 'Z' | ('+' | '-') hh ':' mm        (at most 18:00)

Accepted deviations from the strict XML Schema grammar (and no others):

- the leading zero of the hour may be omitted (``9:00:00``);
- whitespace around the value is trimmed;
- a lowercase ``z`` is accepted for UTC.

Fraction digits beyond the ninth are discarded, never rounded. ``24:00:00``
parses to ``00:00:00``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from xstime.domain.errors import EndOfDayError, XsdTimeParseError
from xstime.domain.formatter import FRACTION_DIGITS
from xstime.domain.value_objects import (
    MAX_OFFSET_MINUTES,
    OffsetTimeOfDay,
    TimeOfDay,
    UtcOffset,
)

if TYPE_CHECKING:
    from xstime.interfaces.offset_resolver import OffsetResolver

EMPTY_INPUT = "empty input"  # pragma: no mutate
DIGITS = frozenset("0123456789")
END_OF_DAY_HOUR = 24
HOUR_RANGE = "must be 00-23 (or 24:00:00)"


@dataclass(frozen=True)
class ScannedTime:
    """The result of scanning ``xs:time`` text, before offset resolution."""

    time: TimeOfDay
    offset: UtcOffset | None


class _Cursor:
    """Left-to-right reader over the trimmed input."""

    def __init__(self, text: str | None, trimmed: str) -> None:
        self.text = text
        self.trimmed = trimmed
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.trimmed)

    def peek(self) -> str:
        return "" if self.at_end() else self.trimmed[self.pos]

    def fail(
        self, field: str, value: str, reason: str, position: int
    ) -> XsdTimeParseError:
        return XsdTimeParseError(
            self.text, reason, field=field, value=value, position=position
        )

    def digits(self) -> str:
        """Consume and return the (possibly empty) run of ASCII digits."""
        start = self.pos
        while not self.at_end() and self.trimmed[self.pos] in DIGITS:
            self.pos += 1
        return self.trimmed[start : self.pos]

    def number(  # pylint: disable=too-many-arguments
        self,
        field: str,
        min_width: int,
        max_width: int,
        high: int,
        range_reason: str | None = None,
    ) -> int:
        """Read a run of ASCII digits and check its width and range."""
        start = self.pos
        raw = self.digits()
        if not raw:
            raise self.fail(field, self.peek(), "expected digits", start)
        if not min_width <= len(raw) <= max_width:
            width = (
                f"{max_width} digits"
                if min_width == max_width
                else f"{min_width} to {max_width} digits"
            )
            raise self.fail(field, raw, f"expected {width}", start)
        if (value := int(raw)) > high:
            reason = range_reason or f"must be 00-{high:02d}"
            raise self.fail(field, raw, reason, start)
        return value

    def expect(self, char: str, field: str) -> None:
        if self.peek() != char:
            raise self.fail(field, self.peek(), f"expected {char!r}", self.pos)
        self.pos += 1


def scan_xsd_time(text: str | None) -> ScannedTime:
    """Tokenize ``xs:time`` text into a time of day and an optional offset.

    Args:
        text: The raw text, possibly surrounded by whitespace.

    Returns:
        The parsed time of day and the offset, or ``None`` if the text has no
        offset.

    Raises:
        XsdTimeParseError: If the text is empty or malformed.
        EndOfDayError: If hour 24 is combined with a nonzero remainder.
    """
    if text is None or not (trimmed := text.strip()):
        raise XsdTimeParseError(text, EMPTY_INPUT)

    cursor = _Cursor(text, trimmed)
    hour = cursor.number("hour", 1, 2, END_OF_DAY_HOUR, HOUR_RANGE)
    cursor.expect(":", "separator")
    minute = cursor.number("minute", 2, 2, 59)
    cursor.expect(":", "separator")
    second = cursor.number("second", 2, 2, 59)
    nanosecond = _scan_fraction(cursor)

    if hour == END_OF_DAY_HOUR:
        if minute or second or nanosecond:
            raise EndOfDayError(text, trimmed[: cursor.pos])
        hour = 0

    offset = _scan_offset(cursor)
    if not cursor.at_end():
        raise cursor.fail(
            "input",
            trimmed[cursor.pos :],
            "unexpected trailing characters",
            cursor.pos,
        )
    return ScannedTime(TimeOfDay(hour, minute, second, nanosecond), offset)


def parse_xsd_time(text: str | None, resolver: OffsetResolver) -> OffsetTimeOfDay:
    """Parse ``xs:time`` text, asking ``resolver`` for a missing offset.

    The resolver is called at most once, and only when the text carries no
    offset. Its errors propagate unchanged.
    """
    scanned = scan_xsd_time(text)
    offset = scanned.offset
    if offset is None:
        offset = resolver.resolve(scanned.time)
    return OffsetTimeOfDay(scanned.time, offset)


def parse_offset(text: str | None) -> UtcOffset:
    """Parse a standalone offset such as ``Z``, ``+02:00`` or ``-05:30``.

    Raises:
        XsdTimeParseError: If the text is empty or not a single offset.
    """
    if text is None or not (trimmed := text.strip()):
        raise XsdTimeParseError(text, EMPTY_INPUT)
    cursor = _Cursor(text, trimmed)
    offset = _scan_offset(cursor)
    if offset is None or not cursor.at_end():
        raise cursor.fail(
            "input",
            trimmed[cursor.pos :],
            "unexpected trailing characters",
            cursor.pos,
        )
    return offset


def _scan_fraction(cursor: _Cursor) -> int:
    if cursor.peek() != ".":
        return 0
    cursor.pos += 1
    start = cursor.pos
    raw = cursor.digits()
    if not raw:
        raise cursor.fail(
            "fraction", cursor.peek(), "expected at least one digit after '.'", start
        )
    # truncate, do not round
    return int(raw[:FRACTION_DIGITS].ljust(FRACTION_DIGITS, "0"))


def _scan_offset(cursor: _Cursor) -> UtcOffset | None:
    if cursor.at_end():
        return None
    start = cursor.pos
    sign = cursor.peek()
    if sign in ("Z", "z"):
        cursor.pos += 1
        return UtcOffset.UTC
    if sign not in ("+", "-"):
        raise cursor.fail("offset", sign, "expected 'Z', '+' or '-'", start)
    cursor.pos += 1
    hours = cursor.number("offset hour", 2, 2, MAX_OFFSET_MINUTES // 60)
    cursor.expect(":", "offset separator")
    minutes = cursor.number("offset minute", 2, 2, 59)
    total = hours * 60 + minutes
    if total > MAX_OFFSET_MINUTES:
        raise cursor.fail(
            "offset", cursor.trimmed[start : cursor.pos], "must be within 18:00", start
        )
    return UtcOffset(-total if sign == "-" else total)
