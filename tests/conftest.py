"""Global pytest fixtures for PRIMER."""

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner: CliRunner):  # pylint: disable=redefined-outer-name
    """Run the test inside an isolated filesystem.

    Keeps flight-recorder files written by the CLI out of the working tree.
    """
    with runner.isolated_filesystem():
        yield
