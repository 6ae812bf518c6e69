"""Interface for zone-aware clocks."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date, datetime


class ZoneClock(abc.ABC):
    """Contract for "today's date and the zone rules that apply to it".

    Implementations must not cache: every call reflects the current state so
    that long-running processes follow daylight-saving transitions.
    """

    @abc.abstractmethod
    def today(self) -> date:
        """Return the current calendar date in the clock's zone."""

    @abc.abstractmethod
    def localize(self, naive: datetime) -> datetime:
        """Attach the clock's zone rules to a naive local datetime.

        The returned datetime must be aware, with ``utcoffset()`` reflecting
        the zone's rules at that local instant. ``naive.fold`` selects between
        the two candidates of an ambiguous local time.

        Raises:
            UnresolvableOffsetError: If the zone cannot be determined.
        """

    def snapshot(self) -> ZoneClock:
        """Return a clock whose ``today()`` and ``localize()`` agree on one zone.

        Resolvers take one snapshot per resolution, so a configuration change
        between the two calls cannot pair one zone's date with another zone's
        rules. Clocks bound to a single zone return themselves.

        Raises:
            UnresolvableOffsetError: If the zone cannot be determined.
        """
        return self
