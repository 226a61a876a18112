"""Custom Click parameter types used by the drill commands."""

import json
from typing import Any

import click


class NumberParamType(click.ParamType):
    """Accept an int when possible, otherwise a float.

    Keeps ``3`` printed as ``3`` rather than ``3.0`` in drill output.
    """

    name = "number"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> int | float:
        if isinstance(value, (int, float)):
            return value
        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            self.fail(f"{value!r} is not a number", param, ctx)


class JsonParamType(click.ParamType):
    """Parse a JSON document given on the command line.

    Args:
        expected: Python type the decoded value must have (e.g. ``list``).
    """

    name = "json"

    def __init__(self, expected: type = object) -> None:
        self.expected = expected

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Any:
        if not isinstance(value, str):
            return value
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError as e:
            self.fail(f"invalid JSON ({e.msg})", param, ctx)
        if not isinstance(decoded, self.expected):
            self.fail(
                f"expected a JSON {self.expected.__name__}, "
                f"got {type(decoded).__name__}",
                param,
                ctx,
            )
        return decoded


NUMBER = NumberParamType()
