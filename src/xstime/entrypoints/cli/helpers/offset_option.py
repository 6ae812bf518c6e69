"""Click callback turning an ``--offset`` value into a `UtcOffset`."""

import click

from xstime.domain.errors import XsdTimeParseError
from xstime.domain.parser import parse_offset
from xstime.domain.value_objects import UtcOffset


def parse_offset_option(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | None,
) -> UtcOffset | None:
    """Parse ``Z``/``±hh:mm`` option text; ``None`` when the option is absent.

    Raises:
        click.BadParameter: If the text is not a valid offset.
    """
    if value is None:
        return None
    try:
        return parse_offset(value)
    except XsdTimeParseError as e:
        raise click.BadParameter(str(e)) from e
