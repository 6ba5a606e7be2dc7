"""Classification and coercion of untyped (already-parsed JSON) values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def classify(value: Any) -> str:
    """Name the JSON kind of ``value`` as used in type-mismatch errors."""
    match value:
        case None:
            return "Null"
        case bool():
            return "Bool"
        case int():
            return "Int"
        case float():
            return "Float"
        case str():
            return "String"
        case list() | tuple():
            return "Array"
        case Mapping():
            return "Object"
        case _:
            return type(value).__name__


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_int(value: Any) -> bool:
    # bool is an int subclass in Python but a distinct kind in JSON
    return isinstance(value, int) and not isinstance(value, bool)


def is_float(value: Any) -> bool:
    return isinstance(value, float)


def is_bool(value: Any) -> bool:
    return isinstance(value, bool)


def is_null(value: Any) -> bool:
    return value is None


def as_sequence(value: Any) -> list[Any] | None:
    """Return ``value`` as a list if it is a JSON array, else ``None``."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return None


def as_mapping(value: Any) -> Mapping[str, Any] | None:
    """Return ``value`` if it is a JSON object, else ``None``."""
    if isinstance(value, Mapping):
        return value
    return None


def json_equal(left: Any, right: Any) -> bool:
    """Equality between JSON values: ``true`` never equals ``1``, ``1`` equals ``1.0``.

    Arrays and objects compare element-wise; anything else falls back to ``==``.
    """
    if is_bool(left) or is_bool(right):
        return is_bool(left) and is_bool(right) and left == right
    left_items, right_items = as_sequence(left), as_sequence(right)
    if left_items is not None or right_items is not None:
        if left_items is None or right_items is None or len(left_items) != len(right_items):
            return False
        return all(json_equal(a, b) for a, b in zip(left_items, right_items, strict=True))
    left_map, right_map = as_mapping(left), as_mapping(right)
    if left_map is not None or right_map is not None:
        if left_map is None or right_map is None or left_map.keys() != right_map.keys():
            return False
        return all(json_equal(left_map[key], right_map[key]) for key in left_map)
    return left == right
