"""End-to-end tests for the options of the top-level ``primer`` command.

The ``log-demo`` command is run under different verbosity flags, logger-level
overrides, debug mode and flight-recorder settings; console output and the
flight-recorder file are checked for the records that should (not) appear.
"""

import re
from pathlib import Path

import pytest

from primer.entrypoints.cli.main import primer

# pylint: disable=unused-argument

LOG_PATH = "flight_recorder.log"


def assert_in_output(pattern: str, output: str) -> None:
    """Assert that the regex ``pattern`` occurs in ``output``."""
    if not re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' not found in output:\n{output}")


def assert_not_in_output(pattern: str, output: str) -> None:
    """Assert that the regex ``pattern`` does not occur in ``output``."""
    if re.search(pattern, output, re.MULTILINE):
        raise AssertionError(f"Pattern '{pattern}' found in output:\n{output}")


def read_log(path: str = LOG_PATH) -> str:
    return Path(path).read_text(encoding="utf-8")


# ============================================================================
#                               Console verbosity
# ============================================================================


@pytest.mark.parametrize(
    ("flags", "shown", "hidden"),
    [
        ([], "WARNING", "INFO"),
        (["-v"], "INFO", "DEBUG"),
        (["-q"], "ERROR", "WARNING"),
        (["-qq"], "CRITICAL", "ERROR"),
    ],
    ids=["default", "verbose", "quiet", "very-quiet"],
)
def test_verbosity(registered_log_demo, runner, fs, flags, shown, hidden):
    """-v and -q move the console threshold one level per repetition."""
    result = runner.invoke(primer, ["--log-path", LOG_PATH, *flags, "log-demo"])
    assert result.exit_code == 0
    assert_in_output(shown, result.output)
    assert_not_in_output(hidden, result.output)


def test_vv_shows_debug(registered_log_demo, runner, fs):
    """-vv enables DEBUG console output."""
    result = runner.invoke(primer, ["--log-path", LOG_PATH, "-vv", "log-demo"])
    assert result.exit_code == 0
    assert_in_output("DEBUG", result.output)


def test_third_party_records_are_prefixed(registered_log_demo, runner, fs):
    """Outside debug mode third-party records carry their package name."""
    result = runner.invoke(primer, ["--log-path", LOG_PATH, "log-demo"])
    assert result.exit_code == 0
    assert_in_output(
        r"\[some\] This is a warning-level third-party test message\.", result.output
    )


@pytest.mark.parametrize(
    ("env", "cli_args"),
    [
        ({}, ["-vv", "-L", "some.thirdparty=INFO"]),
        ({"PRIMER_LOGGER_LEVELS": "some.thirdparty=INFO"}, ["-vv"]),
    ],
    ids=["cli-flag", "env-var"],
)
def test_logger_level_silences_debug(registered_log_demo, runner, fs, env, cli_args):
    """Logger-level overrides silence third-party DEBUG while keeping INFO+."""
    result = runner.invoke(
        primer, ["--log-path", LOG_PATH, *cli_args, "log-demo"], env=env
    )
    assert result.exit_code == 0
    assert_not_in_output(
        "This is a debug-level third-party test message.", result.output
    )
    assert_in_output("This is an info-level third-party test message.", result.output)


def test_bad_logger_level_is_a_usage_error(runner, fs):
    """Malformed -L values are rejected before any command runs."""
    result = runner.invoke(primer, ["-L", "some.thirdparty=LOUD", "selector", "kinds"])
    assert result.exit_code == 2
    assert "Invalid log level: LOUD" in result.output


def test_debug_mode_shows_paths(registered_log_demo, runner, fs):
    """--debug adds source file and line to console records."""
    result = runner.invoke(primer, ["--log-path", LOG_PATH, "--debug", "log-demo"])
    assert result.exit_code == 0
    assert_in_output(r"conftest\.py:\d+\b", result.output)


def test_debug_mode_is_off_by_default(registered_log_demo, runner, fs):
    """Without --debug no source paths are shown."""
    result = runner.invoke(primer, ["--log-path", LOG_PATH, "log-demo"])
    assert result.exit_code == 0
    assert_not_in_output(r"conftest\.py:\d+\b", result.output)


# ============================================================================
#                               Flight recorder
# ============================================================================


def test_flight_recorder_flush_on_warning(registered_log_demo, runner, fs):
    """Buffered DEBUG records reach the file when a WARNING is logged."""
    result = runner.invoke(
        primer,
        ["--log-path", LOG_PATH, "-L", "some.thirdparty=INFO", "log-demo"],
    )
    assert result.exit_code == 0
    content = read_log()
    assert_in_output("This is a debug-level test message.", content)
    assert_not_in_output("This is a debug-level third-party test message.", content)
    assert_in_output("This is an info-level third-party test message.", content)
    assert_in_output("This is a warning-level test message.", content)
    assert_in_output("This is an error-level test message.", content)
    assert_in_output("This is a critical-level test message.", content)
    # logged after the last WARNING, so still buffered at exit
    assert_not_in_output("This is a final debug-level test message.", content)


@pytest.mark.parametrize(
    ("env", "cli_args"),
    [({}, ["--force-flush"]), ({"PRIMER_FORCE_FLUSH_FLIGHT_RECORDER": "true"}, [])],
    ids=["cli-flag", "env-var"],
)
def test_flight_recorder_force_flush(registered_log_demo, runner, fs, env, cli_args):
    """With force-flush the remaining buffer is written on exit."""
    result = runner.invoke(
        primer, ["--log-path", LOG_PATH, *cli_args, "log-demo"], env=env
    )
    assert result.exit_code == 0
    assert_in_output("This is a final debug-level test message.", read_log())


@pytest.mark.parametrize(
    ("env", "cli_args"),
    [({}, ["--no-flight-recorder"]), ({"PRIMER_FLIGHT_RECORDER": "0"}, [])],
    ids=["cli-flag", "env-var"],
)
def test_flight_recorder_can_be_disabled(
    registered_log_demo, runner, fs, env, cli_args
):
    """A disabled flight recorder writes no file."""
    result = runner.invoke(
        primer, ["--log-path", LOG_PATH, *cli_args, "log-demo"], env=env
    )
    assert result.exit_code == 0
    assert not Path(LOG_PATH).exists()


def test_log_path_from_environment(registered_log_demo, runner, fs):
    """PRIMER_LOG_PATH sets the flight-recorder file."""
    result = runner.invoke(primer, ["log-demo"], env={"PRIMER_LOG_PATH": "env.log"})
    assert result.exit_code == 0
    assert_in_output("This is a warning-level test message.", read_log("env.log"))


def test_flight_recorder_truncates_log(registered_log_demo, runner, fs):
    """Each run replaces the previous flight-recorder file."""
    sizes = []
    for _ in range(2):
        result = runner.invoke(primer, ["--log-path", LOG_PATH, "log-demo"])
        assert result.exit_code == 0
        sizes.append(len(read_log().splitlines()))
    assert sizes[0] == sizes[1]


def test_startup_logging(registered_log_demo, runner, fs):
    """The startup summary and diagnostics land in the flight recorder."""
    log_path = "startup.log"
    result = runner.invoke(
        primer,
        ["--log-path", log_path, "--flight-recorder", "--force-flush", "log-demo"],
        env={"PRIMER_LOGGER_LEVELS": "some.thirdparty=INFO", "PRIMER_JSON_INDENT": ""},
    )
    assert result.exit_code == 0
    content = read_log(log_path)
    assert_in_output(r"PRIMER \d+\.\d+\.\d+", content)
    assert_in_output(r"console=WARNING", content)
    assert_in_output(r"flight-recorder=ON", content)
    assert_in_output(r"Runtime: Python \d+\.\d+\.\d+ on .+, pid \d+, cwd .+", content)
    assert_in_output(
        r"Libraries: click=\S+, click-extra=\S+, rich=\S+, platformdirs=\S+", content
    )
    assert_in_output(r"Handlers: RichHandler, MemoryHandler$", content)
    assert_in_output(
        r"Flight recorder: path=startup\.log, capacity=2000, flush_on_close=True",
        content,
    )
    assert_in_output(
        r"Logger levels: \{'click_extra': 'WARNING', 'some.thirdparty': 'INFO'\}",
        content,
    )
    assert_in_output(r"JSON output: compact", content)
    assert_in_output(r"Commands: drill, log-demo, selector$", content)


@pytest.mark.parametrize(
    ("indent", "expected"),
    [
        ("2", r"DEBUG .*JSON output: indent=2"),
        ("wide", r"WARNING .*PRIMER_JSON_INDENT='wide' is invalid: expected an integer"),
    ],
)
def test_startup_reports_json_indent(registered_log_demo, runner, fs, indent, expected):
    """The JSON style from PRIMER_JSON_INDENT is part of the startup record."""
    result = runner.invoke(
        primer,
        ["--flight-recorder", "--force-flush", "--log-path", LOG_PATH, "log-demo"],
        env={"PRIMER_JSON_INDENT": indent},
    )
    assert result.exit_code == 0
    assert_in_output(expected, read_log())
