"""Custom SQLAlchemy types for xstime.

These types let mapped columns hold `OffsetTimeOfDay` values while storing
their canonical ``xs:time`` text, so stored values stay readable and validate
against strict XML Schema processors.
"""

from __future__ import annotations

from datetime import time
from typing import TYPE_CHECKING, Any

from sqlalchemy.types import String, TypeDecorator

from xstime.codec import format_time, parse_time
from xstime.domain.value_objects import OffsetTimeOfDay

if TYPE_CHECKING:
    from sqlalchemy.engine.interfaces import Dialect

    from xstime.interfaces.offset_resolver import OffsetResolver

__all__ = ["XsdTime"]

#: Longest canonical form is "hh:mm:ss.fffffffff+hh:mm" (24 chars).
XSD_TIME_LENGTH = 32


class XsdTime(TypeDecorator[OffsetTimeOfDay]):  # pylint: disable=too-many-ancestors
    """Offset time of day stored as canonical ``xs:time`` text.

    Bound values may be `OffsetTimeOfDay` or aware ``datetime.time``. Stored
    text without an offset (e.g. written by another application) is completed
    with ``resolver``, or the system-zone policy when none is given.
    """

    impl = String(XSD_TIME_LENGTH)
    cache_ok = True

    def __init__(self, resolver: OffsetResolver | None = None) -> None:
        super().__init__()
        self.resolver = resolver

    def process_bind_param(
        self, value: OffsetTimeOfDay | time | None, dialect: Dialect
    ) -> Any:
        if value is None:
            return None
        if isinstance(value, time):
            value = OffsetTimeOfDay.from_time(value)
        return format_time(value)

    def process_result_value(
        self, value: Any, dialect: Dialect
    ) -> OffsetTimeOfDay | None:
        if value is None:
            return None
        return parse_time(value, self.resolver)

    # make pylint happy

    def process_literal_param(
        self, value: OffsetTimeOfDay | time | None, dialect: Dialect
    ) -> Any:
        # just reuse bind logic for literal rendering
        return self.process_bind_param(value, dialect)

    @property
    def python_type(self) -> type[OffsetTimeOfDay]:
        return OffsetTimeOfDay
