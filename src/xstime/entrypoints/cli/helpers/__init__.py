"""CLI helpers for xstime.

Utilities used by the command-line interface: logger-level option parsing,
offset option parsing, and message emitters that write to stderr with
emoji→ASCII fallbacks.
"""

from .log_level_parser import parse_log_level
from .messages import error
from .offset_option import parse_offset_option

__all__ = ["error", "parse_log_level", "parse_offset_option"]
