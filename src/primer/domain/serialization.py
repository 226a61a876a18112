"""JSON (de)serialization for plain values and dataclasses.

``to_json`` renders any JSON-able value, converting dataclass instances field
by field. ``from_json`` is its counterpart: it parses JSON text and rebuilds an
instance of a given dataclass type, recursing into nested dataclass fields.
"""

import json
import logging
from dataclasses import MISSING, asdict, fields, is_dataclass
from types import NoneType, UnionType
from typing import Any, TypeVar, Union, cast, get_args, get_origin, get_type_hints

from primer.domain.errors import SerializationError

logger = logging.getLogger(__name__)

D = TypeVar("D")

COMPACT_SEPARATORS = (",", ":")


def _encode_default(obj: Any) -> Any:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, indent: int | None = None) -> str:
    """Return the JSON representation of ``obj``.

    Args:
        obj: Any JSON-able value; dataclass instances may appear at any depth.
        indent: Pretty-print with this indent. When None the output is compact
            (``[1,2,3]``).

    Returns:
        The JSON text. Key order follows insertion / field order.

    Raises:
        SerializationError: If ``obj`` contains a value JSON cannot represent,
            NaN and infinities included.
    """
    separators = COMPACT_SEPARATORS if indent is None else None
    try:
        return json.dumps(
            obj,
            indent=indent,
            separators=separators,
            default=_encode_default,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e


def from_json(proto: type[D], text: str | bytes) -> D:
    """Build an instance of the dataclass type ``proto`` from JSON text.

    Args:
        proto: The dataclass type to build.
        text: JSON text whose top level is an object.

    Returns:
        An instance of ``proto`` populated from the parsed object.

    Raises:
        TypeError: If ``proto`` is not a dataclass type.
        SerializationError: If the text is not valid JSON, its top level is not
            an object, or a required field is missing.

    Note:
        - Keys that are not fields of ``proto`` are ignored.
        - Fields typed as a dataclass, ``SomeDataclass | None``, ``list[...]``
          or ``tuple[...]`` are rebuilt recursively.
    """
    if not (isinstance(proto, type) and is_dataclass(proto)):
        raise TypeError(f"{proto} is not a dataclass type")
    try:
        values = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    if not isinstance(values, dict):
        raise SerializationError(
            f"Expected a JSON object for {proto.__name__}, "
            f"got {type(values).__name__}"
        )
    return _build(proto, values)


def _build(dc_type: type[D], values: dict[str, Any]) -> D:
    type_hints = get_type_hints(dc_type)
    kwargs: dict[str, Any] = {}
    known: set[str] = set()
    for field in fields(cast(Any, dc_type)):
        known.add(field.name)
        if not field.init:
            continue
        if field.name in values:
            field_type = type_hints.get(field.name, field.type)
            kwargs[field.name] = _coerce(field_type, values[field.name])
        elif field.default is MISSING and field.default_factory is MISSING:
            raise SerializationError(
                f"Missing required field '{field.name}' for {dc_type.__name__}"
            )
    if unknown := sorted(set(values) - known):
        logger.debug("Ignoring unknown keys for %s: %s", dc_type.__name__, unknown)
    return dc_type(**kwargs)


def _coerce(field_type: Any, value: Any) -> Any:
    field_type = _strip_none(field_type)
    if isinstance(value, dict):
        if isinstance(field_type, type) and is_dataclass(field_type):
            return _build(field_type, value)
        return value
    if isinstance(value, list):
        origin = get_origin(field_type)
        args = get_args(field_type)
        if origin is list and args:
            return [_coerce(args[0], item) for item in value]
        if origin is tuple:
            if len(args) == 2 and args[1] is Ellipsis:
                return tuple(_coerce(args[0], item) for item in value)
            if len(args) == len(value):
                return tuple(_coerce(t, item) for t, item in zip(args, value))
            return tuple(value)
    return value


def _strip_none(field_type: Any) -> Any:
    """Reduce ``X | None`` (or ``Optional[X]``) to ``X``; other types pass through."""
    if get_origin(field_type) not in (Union, UnionType):
        return field_type
    args = [arg for arg in get_args(field_type) if arg is not NoneType]
    return args[0] if len(args) == 1 else field_type
