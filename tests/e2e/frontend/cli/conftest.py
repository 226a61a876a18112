"""Fixtures for end-to-end CLI logging tests.

Provides a test-only ``log-demo`` command that emits log records at every
level from a project logger and a third-party logger, plus a fixture that
registers it on the top-level ``primer`` group for one test.
"""

import logging

import click
import pytest

from primer.entrypoints.cli.main import primer


@click.command()
def log_demo():
    """Emit representative log messages for CLI and flight-recorder tests."""
    logger = logging.getLogger("primer.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Drop ``name`` from the group and from any help sections holding it."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register ``log-demo`` on ``primer`` for the duration of a test."""
    primer.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(primer, "log-demo")
