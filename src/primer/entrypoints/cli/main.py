"""PRIMER CLI entry point.

Defines the top-level ``primer`` command (via Click-Extra) and registers the
subcommand groups exposed by the project.

Currently available groups
- ``primer selector`` — build CSS selectors from ``kind=value`` tokens.
- ``primer drill`` — run the arithmetic, text, geometry and grid drills.

Notes
- The CLI version is sourced from `primer.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Additional command groups should be registered here via ``primer.add_command(...)``.

Examples
    $ primer --version
    $ primer selector build element=a 'attr=href$=".png"' pseudo-class=focus
    $ primer drill luhn 79927398713
"""

import logging
from pathlib import Path

import click
import click_extra as clickx

from primer import __version__, config
from primer.logging import (
    DEFAULT_CAPACITY,
    LoggingSettings,
    configure,
    console_level,
    log_startup,
)

from .drill import drill as drill_group
from .helpers import see_also
from .helpers.log_level_parser import parse_log_level
from .selector import selector as selector_group

logger = logging.getLogger(__name__)


HELP = """PRIMER command-line interface.

    PRIMER is a collection of small programming exercises: an immutable CSS
    selector builder that enforces the order of selector parts, JSON helpers,
    and a set of classic drills such as FizzBuzz, the Luhn checksum and
    bracket balancing. Results go to stdout; diagnostics go to stderr.
    """


SELECTORS_URL = "https://developer.mozilla.org/en-US/docs/Web/CSS/CSS_selectors"
LUHN_URL = "https://en.wikipedia.org/wiki/Luhn_algorithm"

EPILOG = see_also(
    {
        "CSS selectors (MDN)": SELECTORS_URL,
        "Luhn algorithm (Wikipedia)": LUHN_URL,
    }
)


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
    epilog=EPILOG,
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
    help="Enable debug mode (enables extra developer diagnostics beyond -vv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file written by the flight recorder.",
    default=config.default_log_path,
    envvar=config.LOG_PATH_ENV,
    show_default="<user log dir>/latest.log",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=DEFAULT_CAPACITY,
    hidden=True,
    envvar="PRIMER_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "at DEBUG granularity (unaffected by -v/-q) and writes them to "
        "--log-path when a WARNING/ERROR occurs, or on clean exit if "
        "--force-flush is set. Use --no-flight-recorder to disable."
    ),
    default=True,
    envvar="PRIMER_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR."
    ),
    default=False,
    envvar="PRIMER_FORCE_FLUSH_FLIGHT_RECORDER",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight-recorder. Repeatable (e.g. -L primer.domain=INFO) "
        "or via PRIMER_LOGGER_LEVELS (comma/space list)."
    ),
    default=("click_extra=WARNING",),
    envvar="PRIMER_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def primer(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """PRIMER command-line interface."""
    settings = LoggingSettings(
        level=console_level(verbose_count, quiet_count),
        debug=debug,
        color=ctx.color is not False,  # None means "let Rich decide"
        log_path=log_path if flight_recorder else None,
        capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    handlers = configure(settings)
    log_startup(logger, settings, handlers, commands=sorted(ctx.command.commands))
    ctx.call_on_close(logging.shutdown)


primer.add_command(selector_group)
primer.add_command(drill_group)
