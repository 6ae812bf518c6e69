"""xstime parse/normalize commands.

Both commands accept one or more ``xs:time`` values. Results go to stdout,
one line per value; failures go to stderr and make the command exit with
status 1 after all values have been processed.

Offset policy for values without an offset (mutually exclusive options):
- default: local zone rules (or ``XSTIME_TZ``) on today's date;
- ``--offset ±hh:mm``: a fixed offset;
- ``--zone NAME``: the rules of an IANA zone on today's date;
- ``--require-offset``: reject such values.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from xstime.adapters.clocks import FixedZoneClock, load_zone
from xstime.adapters.offset_resolvers import (
    FixedOffsetResolver,
    RejectingOffsetResolver,
    SystemZoneOffsetResolver,
)
from xstime.codec import XsdTimeCodec
from xstime.domain.errors import UnresolvableOffsetError, XsTimeError
from xstime.domain.parser import scan_xsd_time

from .helpers import error, parse_offset_option

if TYPE_CHECKING:
    from collections.abc import Callable

    from xstime.domain.value_objects import OffsetTimeOfDay, UtcOffset
    from xstime.interfaces.offset_resolver import OffsetResolver

logger = logging.getLogger(__name__)


def _build_resolver(
    offset: UtcOffset | None, zone: str | None, require_offset: bool
) -> OffsetResolver | None:
    chosen = [
        name
        for name, given in (
            ("--offset", offset is not None),
            ("--zone", zone is not None),
            ("--require-offset", require_offset),
        )
        if given
    ]
    if len(chosen) > 1:
        raise click.UsageError(
            f"Options {' and '.join(chosen)} are mutually exclusive."
        )
    if offset is not None:
        return FixedOffsetResolver(offset)
    if zone is not None:
        try:
            return SystemZoneOffsetResolver(FixedZoneClock(load_zone(zone)))
        except UnresolvableOffsetError as e:
            raise click.BadParameter(str(e), param_hint="--zone") from e
    if require_offset:
        return RejectingOffsetResolver()
    return None


def _resolver_options(func: Callable) -> Callable:
    func = click.option(
        "--require-offset",
        is_flag=True,
        default=False,
        help="Reject values that carry no UTC offset.",
    )(func)
    func = click.option(
        "--zone",
        metavar="NAME",
        default=None,
        help="IANA zone whose rules complete values without an offset.",
    )(func)
    func = click.option(
        "--offset",
        metavar="±hh:mm",
        callback=parse_offset_option,
        default=None,
        help="Fixed offset (Z, +hh:mm or -hh:mm) for values without one.",
    )(func)
    return func


def _run(
    values: tuple[str, ...],
    resolver: OffsetResolver | None,
    render: Callable[[str, OffsetTimeOfDay], str],
) -> None:
    codec = XsdTimeCodec(resolver)
    failures = 0
    for text in values:
        try:
            value = codec.parse(text)
        except XsTimeError as e:
            logger.debug("Rejected %r: %s", text, e)
            error(str(e))
            failures += 1
            continue
        click.echo(render(text, value))
    if failures:
        raise click.exceptions.Exit(1)


def _describe(text: str, value: OffsetTimeOfDay) -> str:
    source = "input" if scan_xsd_time(text).offset is not None else "resolved"
    return (
        f"{value}\t"
        f"hour={value.time.hour} minute={value.time.minute} "
        f"second={value.time.second} nanosecond={value.time.nanosecond} "
        f"offset={value.offset} ({source})"
    )


@click.command()
@click.argument("values", nargs=-1, required=True)
@_resolver_options
def parse(
    values: tuple[str, ...],
    offset: UtcOffset | None,
    zone: str | None,
    require_offset: bool,
) -> None:
    """Parse xs:time VALUES and show their components."""
    _run(values, _build_resolver(offset, zone, require_offset), _describe)


@click.command()
@click.argument("values", nargs=-1, required=True)
@_resolver_options
def normalize(
    values: tuple[str, ...],
    offset: UtcOffset | None,
    zone: str | None,
    require_offset: bool,
) -> None:
    """Print the canonical xs:time form of VALUES."""
    _run(
        values,
        _build_resolver(offset, zone, require_offset),
        lambda _text, value: str(value),
    )
