"""xstime CLI entry point.

Defines the top-level ``xstime`` command (via Click-Extra), configures
console logging, and registers the subcommands.

Currently available commands
- ``xstime parse``: parse values and show their components.
- ``xstime normalize``: print the canonical form of values.

Examples
    $ xstime parse "9:00:00z" "13:05:00.500+02:00"
    $ XSTIME_TZ=Europe/Copenhagen xstime normalize 12:00:00
"""

import logging
from typing import TYPE_CHECKING

import click
import click_extra as clickx

from xstime import __version__, config
from xstime.logging import config_console_handler, log_startup

from .helpers import parse_log_level
from .time_cmds import normalize, parse

if TYPE_CHECKING:
    from logging import Handler

logger = logging.getLogger(__name__)


HELP = """xstime command-line interface.

    Parse and format XML Schema xs:time values. Values without a UTC offset
    are completed from the local time zone (or XSTIME_TZ) on today's date,
    unless --offset, --zone or --require-offset says otherwise.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (DEBUG level with logger names and source paths).",
    default=False,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    envvar=config.LOGGER_LEVELS_ENV_VAR,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Repeatable "
        "(e.g. -L sqlalchemy=INFO) or via XSTIME_LOGGER_LEVELS (comma/space list)."
    ),
    default=("sqlalchemy=WARNING",),
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def xstime(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    logger_levels: dict[str, int],
) -> None:
    """xstime command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    use_color = ctx.color is not False  # None or True => allow color
    handlers: list[Handler] = [
        config_console_handler(level=level, debug_mode=debug, color=use_color)
    ]

    logging.basicConfig(
        level=logging.DEBUG,  # capture all levels; handlers filter
        handlers=handlers,
        force=True,
    )

    for name, lvl in logger_levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logger,
        app_version=__version__,
        level=level,
        handlers=handlers,
        logger_levels=logger_levels,
    )

    ctx.call_on_close(logging.shutdown)


xstime.add_command(parse)
xstime.add_command(normalize)
