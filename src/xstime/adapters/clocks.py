"""Zone clocks for xstime."""

from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from xstime import config
from xstime.domain.errors import UnresolvableOffsetError
from xstime.interfaces.clock import ZoneClock

logger = logging.getLogger(__name__)


def load_zone(name: str) -> ZoneInfo:
    """Load IANA zone rules by name.

    Raises:
        UnresolvableOffsetError: If the zone is unknown or the key is invalid.
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise UnresolvableOffsetError(f"Unknown time zone {name!r}.") from e


class SystemZoneClock(ZoneClock):
    """The process's own notion of "today" and local zone rules.

    When `XSTIME_TZ` is set, its IANA rules are used; otherwise the operating
    system's local time rules apply. Configuration is re-read on every call;
    `snapshot` reads it once and pins the result.
    """

    def snapshot(self) -> ZoneClock:
        if (name := config.get_zone_name()) is None:
            return self
        logger.debug("Pinned configured zone %s", name)
        return FixedZoneClock(load_zone(name))

    def today(self) -> date:
        if (name := config.get_zone_name()) is not None:
            return datetime.now(load_zone(name)).date()
        return date.today()

    def localize(self, naive: datetime) -> datetime:
        if (name := config.get_zone_name()) is not None:
            logger.debug("Localizing %s with configured zone %s", naive, name)
            return naive.replace(tzinfo=load_zone(name))
        try:
            # astimezone() on a naive value applies the platform's local rules;
            # it may shift a skipped wall time, so only its offset is kept
            zone = naive.astimezone().tzinfo
        except (OverflowError, OSError) as e:
            raise UnresolvableOffsetError(
                f"System local time zone cannot resolve {naive.isoformat()}."
            ) from e
        local = naive.replace(tzinfo=zone)
        logger.debug("Localizing %s with system local zone %s", naive, local.tzname())
        return local


class FixedZoneClock(ZoneClock):
    """A clock pinned to a zone and, optionally, a calendar date.

    Suitable for tests and for callers that bind a known zone. Without a
    fixed date, ``today()`` reports the current date in ``zone``.
    """

    def __init__(self, zone: tzinfo, today: date | None = None) -> None:
        self._zone = zone
        self._today = today

    def today(self) -> date:
        if self._today is not None:
            return self._today
        return datetime.now(self._zone).date()

    def localize(self, naive: datetime) -> datetime:
        return naive.replace(tzinfo=self._zone)
