"""Click callback for ``-L NAME=LEVEL`` logger overrides.

Values may be repeated on the command line or given as one comma/space
separated string (from `XSTIME_LOGGER_LEVELS`). Levels are standard logging
names, matched case-insensitively, or plain integers.
"""

import logging
import re

import click

DEFAULT_LIB_LEVELS = {"sqlalchemy": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _split_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _to_level(text: str) -> int | None:
    text = text.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else None


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Parse NAME=LEVEL pairs into a name->level mapping.

    Starts from DEFAULT_LIB_LEVELS; later pairs override earlier ones.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or LEVEL is unknown.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _split_items(value or ()):
        name, sep, level_text = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        if (level := _to_level(level_text)) is None:
            raise click.BadParameter(f"Invalid log level: {level_text}")
        levels[name.strip()] = level
    return levels
