"""Configuration utilities for PRIMER.

This module centralizes the environment variables PRIMER reads and the small
helpers that resolve them into typed settings.
"""

import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "primer"

LOG_PATH_ENV = "PRIMER_LOG_PATH"  # pragma: no mutate
JSON_INDENT_ENV = "PRIMER_JSON_INDENT"  # pragma: no mutate


class InvalidSettingError(Exception):
    """Raised when a PRIMER environment variable holds an unusable value."""

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(f"{name}={value!r} is invalid: {reason}")
        self.name = name
        self.value = value


def default_log_path() -> Path:
    """Return ``latest.log`` inside the platform's user log directory.

    The directory is created if missing. ``PRIMER_LOG_PATH`` overrides this
    default through the CLI's ``--log-path`` option.
    """
    log_dir = user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)
    return Path(log_dir) / "latest.log"


def get_json_indent() -> int | None:
    """Get the default JSON indent for CLI output from the environment.

    Returns:
        The value of ``PRIMER_JSON_INDENT`` as an int, or None when the
        variable is unset or empty (compact output).

    Raises:
        InvalidSettingError: If the value is not a non-negative integer.
    """
    if not (raw := os.environ.get(JSON_INDENT_ENV, "").strip()):
        return None
    try:
        indent = int(raw)
    except ValueError as e:
        raise InvalidSettingError(JSON_INDENT_ENV, raw, "expected an integer") from e
    if indent < 0:
        raise InvalidSettingError(JSON_INDENT_ENV, raw, "must not be negative")
    return indent
