"""Public parse/format entry points for ``xs:time``.

Wires the domain parser to an offset resolver. When a caller supplies no
resolver, the default policy (`SystemZoneOffsetResolver` over the system zone
clock) is used; it reads the current date and zone on every call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from xstime.adapters.offset_resolvers import default_offset_resolver
from xstime.domain.formatter import format_xsd_time
from xstime.domain.parser import parse_xsd_time

if TYPE_CHECKING:
    from xstime.domain.value_objects import OffsetTimeOfDay
    from xstime.interfaces.offset_resolver import OffsetResolver


def parse_time(
    text: str | None, resolver: OffsetResolver | None = None
) -> OffsetTimeOfDay:
    """Parse lenient ``xs:time`` text into an `OffsetTimeOfDay`.

    Args:
        text: The serialized value.
        resolver: Supplies the offset when ``text`` has none. Defaults to the
            system-zone policy.

    Raises:
        XsdTimeParseError: If ``text`` is empty or malformed.
        UnresolvableOffsetError: If ``text`` has no offset and the resolver
            cannot determine one.
    """
    return parse_xsd_time(
        text, resolver if resolver is not None else default_offset_resolver()
    )


def format_time(value: OffsetTimeOfDay | None) -> str | None:
    """Format ``value`` in canonical ``xs:time`` form; ``None`` passes through."""
    return format_xsd_time(value)


class XsdTimeCodec:
    """A parser/formatter pair with the offset resolver bound at construction."""

    def __init__(self, resolver: OffsetResolver | None = None) -> None:
        self._resolver = resolver

    @property
    def resolver(self) -> OffsetResolver | None:
        return self._resolver

    def parse(self, text: str | None) -> OffsetTimeOfDay:
        return parse_time(text, self._resolver)

    def format(self, value: OffsetTimeOfDay | None) -> str | None:
        return format_time(value)
