"""xstime

Parse and format XML Schema ``xs:time`` values as offset-aware times of day,
with a pluggable policy for values that omit their UTC offset.
"""

from xstime.codec import XsdTimeCodec, format_time, parse_time
from xstime.domain.value_objects import OffsetTimeOfDay, TimeOfDay, UtcOffset

__all__ = [
    "__version__",
    "OffsetTimeOfDay",
    "TimeOfDay",
    "UtcOffset",
    "XsdTimeCodec",
    "format_time",
    "parse_time",
]
__version__ = "0.1.0"
