"""Interface for UTC offset resolvers."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xstime.domain.value_objects import TimeOfDay, UtcOffset

# pylint: disable=too-few-public-methods


class OffsetResolver(abc.ABC):
    """Contract for supplying a UTC offset to an ``xs:time`` value that has none.

    Only called while parsing, and only when the input text carries no offset.
    """

    @abc.abstractmethod
    def resolve(self, time_of_day: TimeOfDay) -> UtcOffset:
        """Return the offset to attach to ``time_of_day``; never ``None``.

        Raises:
            UnresolvableOffsetError: If no offset can be determined.
        """
