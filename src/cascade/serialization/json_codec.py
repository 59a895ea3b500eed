"""JSON helpers: serialize flat values and rebuild typed instances from JSON."""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from cascade.config import CascadeConfig
from cascade.errors import ParseError, SerializationError

__all__ = ["serialize", "deserialize"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

FieldMapping = Sequence[str] | Mapping[str, str]


def _to_plain(obj: Any) -> Any:
    """``json.dumps`` fallback for objects that are not dicts or lists."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if hasattr(obj, "__dict__") and not callable(obj):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize(value: Any, *, config: CascadeConfig | None = None) -> str:
    """Return the JSON text of *value*.

    Output matches ``JSON.stringify``: compact separators, keys in insertion
    order and non-ASCII characters left as-is. Dataclass instances and plain
    objects are written as their fields.

    Raises:
        SerializationError: *value* holds a cycle, NaN/infinity or a value
            with no JSON form.
    """
    config = config or CascadeConfig()
    separators = (",", ":") if config.json_indent is None else (",", ": ")
    try:
        text = json.dumps(
            value,
            default=_to_plain,
            ensure_ascii=False,
            allow_nan=False,
            indent=config.json_indent,
            sort_keys=config.json_sort_keys,
            separators=separators,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot serialize value: {exc}") from exc
    logger.debug("Serialized %s to %d characters", type(value).__name__, len(text))
    return text


def _parse(json_text: str | bytes) -> Any:
    try:
        return json.loads(json_text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})",
            line=exc.lineno,
            column=exc.colno,
        ) from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"Invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ParseError("Invalid JSON: nesting too deep") from exc


def _lookup(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        raise SerializationError(f"Missing field in JSON: {key!r}") from None


def deserialize(
    cls: type[T], json_text: str | bytes, *, fields: FieldMapping | None = None
) -> T:
    """Parse *json_text* and construct an instance of *cls* from it.

    Without *fields* the parsed values are passed positionally: an object's
    values in key order, an array's items in order, a scalar as the only
    argument. This relies on the JSON key order matching the constructor's
    parameter order.

    With *fields* the mapping is explicit. A sequence of keys passes those
    values positionally in the given order; a mapping of JSON key to
    parameter name passes them as keyword arguments.

    Raises:
        ParseError: *json_text* is not valid JSON.
        SerializationError: a mapped key is missing or *cls* rejects the
            arguments.
    """
    if isinstance(fields, str):
        raise SerializationError(
            f"fields must be a sequence or mapping of keys, not a string: {fields!r}"
        )
    data = _parse(json_text)

    args: list[Any] = []
    kwargs: dict[str, Any] = {}
    if fields is None:
        if isinstance(data, dict):
            args = list(data.values())
        elif isinstance(data, list):
            args = data
        else:
            args = [data]
    else:
        if not isinstance(data, dict):
            raise SerializationError(
                f"Field mapping requires a JSON object, got {type(data).__name__}"
            )
        if isinstance(fields, Mapping):
            kwargs = {param: _lookup(data, key) for key, param in fields.items()}
        else:
            args = [_lookup(data, key) for key in fields]

    try:
        instance = cls(*args, **kwargs)
    except TypeError as exc:
        raise SerializationError(
            f"Cannot construct {cls.__name__} from JSON: {exc}"
        ) from exc
    logger.debug("Deserialized %s with %d argument(s)", cls.__name__, len(args) + len(kwargs))
    return instance
