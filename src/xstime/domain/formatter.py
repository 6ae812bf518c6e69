"""Canonical ``xs:time`` formatting.

Output is always strictly conformant to the XML Schema lexical grammar, so it
validates against strict schema processors regardless of how lenient the
parser was with the original input:

- hour, minute and second are always two zero-padded digits;
- the fraction appears only when nonzero, without trailing zeros;
- the zero offset is written ``Z``, any other offset as ``+hh:mm``/``-hh:mm``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xstime.domain.value_objects import OffsetTimeOfDay, TimeOfDay, UtcOffset

FRACTION_DIGITS = 9


def format_time_of_day(value: TimeOfDay) -> str:
    """Format the local part, e.g. ``13:05:00`` or ``13:05:00.5``."""
    text = f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    if value.nanosecond:
        text += "." + f"{value.nanosecond:0{FRACTION_DIGITS}d}".rstrip("0")
    return text


def format_offset(value: UtcOffset) -> str:
    """Format an offset as ``Z`` or ``±hh:mm``."""
    if value.is_utc:
        return "Z"
    sign = "-" if value.total_minutes < 0 else "+"
    return f"{sign}{value.hours:02d}:{value.minutes:02d}"


def format_xsd_time(value: OffsetTimeOfDay | None) -> str | None:
    """Format an offset time in canonical ``xs:time`` form.

    Args:
        value: The value to format. ``None`` stands for an absent value.

    Returns:
        The canonical text, or ``None`` when ``value`` is ``None``.
    """
    if value is None:
        return None
    return format_time_of_day(value.time) + format_offset(value.offset)
