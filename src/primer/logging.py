"""Logging setup for the PRIMER CLI.

Two handlers hang off the root logger:

- a Rich console handler on stderr whose threshold follows ``-v``/``-q``;
- optionally, a flight recorder: a ``MemoryHandler`` that keeps recent
  records at DEBUG and dumps them to ``--log-path`` once something goes wrong.

:class:`LoggingSettings` collects the choices made on the command line,
:func:`configure` installs the handlers and :func:`log_startup` records what
was installed, together with PRIMER's own runtime settings.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from primer import __version__, config

PROJECT_LOGGER = "primer"

BASE_LEVEL = logging.WARNING
LEVEL_STEP = 10  # distance between adjacent stdlib levels
DEFAULT_CAPACITY = 2000

CONSOLE_FORMAT = "%(origin)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

REPORTED_DISTRIBUTIONS = ("click", "click-extra", "rich", "platformdirs")


def console_level(verbose: int = 0, quiet: int = 0) -> int:
    """Move WARNING one level down per ``-v`` and one up per ``-q``.

    The result is clamped to DEBUG..CRITICAL.
    """
    level = BASE_LEVEL + LEVEL_STEP * (quiet - verbose)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


@dataclass(frozen=True, slots=True)
class LoggingSettings:
    """Logging choices made on the ``primer`` command line.

    Attributes:
        level: Console threshold outside debug mode.
        debug: Console at DEBUG with timestamps, logger names and source paths.
        color: Allow colored console output.
        log_path: Flight-recorder file; None disables the recorder.
        capacity: Records the recorder buffers before writing anyway.
        force_flush: Write whatever is still buffered when logging shuts down.
        logger_levels: Per-logger minimum levels, e.g. ``{"click_extra": 30}``.
    """

    level: int = BASE_LEVEL
    debug: bool = False
    color: bool = True
    log_path: Path | None = None
    capacity: int = DEFAULT_CAPACITY
    force_flush: bool = False
    logger_levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def console_threshold(self) -> int:
        return logging.DEBUG if self.debug else self.level

    @property
    def flight_recorder(self) -> bool:
        return self.log_path is not None


class OriginFilter(logging.Filter):
    """Tag records from other libraries with their package, e.g. ``[click_extra]``.

    The tag lands in ``record.origin``; PRIMER's own records get an empty one.
    No record is ever dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.origin = "" if package == PROJECT_LOGGER else f"[{package}]"
        return True


def console_handler(settings: LoggingSettings) -> RichHandler:
    """Return the stderr handler for ``settings``."""
    console = Console(stderr=True, color_system="auto" if settings.color else None)
    handler = RichHandler(
        level=settings.console_threshold,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=settings.debug,
        enable_link_path=settings.debug,
    )
    if settings.debug:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(OriginFilter())
    return handler


def flight_recorder(
    path: Path, capacity: int = DEFAULT_CAPACITY, flush_on_close: bool = False
) -> MemoryHandler:
    """Return a recorder that writes its buffer to ``path`` from WARNING up.

    ``path`` is truncated when the recorder is created, so it only ever holds
    the latest run.
    """
    sink = logging.FileHandler(path, mode="w", encoding="utf-8")
    sink.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity,
        flushLevel=logging.WARNING,
        target=sink,
        flushOnClose=flush_on_close,
    )


def configure(settings: LoggingSettings) -> list[logging.Handler]:
    """Install PRIMER's handlers on the root logger and return them.

    The root logger lets everything through; each handler applies its own
    threshold. ``settings.logger_levels`` is applied last.
    """
    handlers: list[logging.Handler] = [console_handler(settings)]
    if settings.log_path is not None:
        handlers.append(
            flight_recorder(settings.log_path, settings.capacity, settings.force_flush)
        )
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in settings.logger_levels.items():
        logging.getLogger(name).setLevel(level)
    return handlers


def _distribution_versions() -> str:
    found = []
    for name in REPORTED_DISTRIBUTIONS:
        try:
            found.append(f"{name}={version(name)}")
        except PackageNotFoundError:  # pragma: no cover
            found.append(f"{name}=<not installed>")
    return ", ".join(found)


def log_startup(
    logger: logging.Logger,
    settings: LoggingSettings,
    handlers: Iterable[logging.Handler],
    commands: Iterable[str] = (),
) -> None:
    """Record the logging setup and the runtime PRIMER is running in.

    One INFO summary line is followed by DEBUG details: interpreter and
    process, library versions, handlers, flight recorder, logger levels, the
    JSON output style chosen by ``PRIMER_JSON_INDENT`` and the available
    commands. An unusable ``PRIMER_JSON_INDENT`` is reported as a warning.
    """
    logger.info(
        "PRIMER %s - console=%s, flight-recorder=%s",
        __version__,
        logging.getLevelName(settings.console_threshold),
        "ON" if settings.flight_recorder else "OFF",
    )
    logger.debug(
        "Runtime: Python %s on %s %s, pid %s, cwd %s",
        sys.version.split()[0],
        platform.system(),
        platform.release(),
        os.getpid(),
        Path.cwd(),
    )
    logger.debug("Libraries: %s", _distribution_versions())
    logger.debug("Handlers: %s", ", ".join(type(h).__name__ for h in handlers))
    if settings.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            settings.log_path,
            settings.capacity,
            settings.force_flush,
        )
    levels = {
        name: logging.getLevelName(level)
        for name, level in settings.logger_levels.items()
    }
    logger.debug("Logger levels: %s", levels or "<none>")
    try:
        indent = config.get_json_indent()
    except config.InvalidSettingError as e:
        logger.warning("%s; commands printing JSON will fail", e)
    else:
        logger.debug(
            "JSON output: %s", "compact" if indent is None else f"indent={indent}"
        )
    logger.debug("Commands: %s", ", ".join(commands) or "<none>")
