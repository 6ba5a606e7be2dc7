"""Value transforms layered over an existing schema."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from duoschema.definition.nodes import ConstNode, meta_of
from duoschema.dynamic import json_equal
from duoschema.models.errors import (
    ConstMismatch,
    ConstraintError,
    CustomViolation,
    ValidationError,
    has_type_error,
)
from duoschema.models.options import Options
from duoschema.schema.core import Schema, constant

T = TypeVar("T")
U = TypeVar("U")


def map_(schema: Schema[T], transform: Callable[[T], U]) -> Schema[U]:
    """Apply ``transform`` to the decoded value, even when errors occurred.

    The definition is unchanged; errors pass through untouched.
    """
    inner = schema.decoder

    def decode(value: Any, options: Options) -> tuple[U, list[ValidationError]]:
        decoded, errors = inner(value, options)
        return transform(decoded), errors

    return Schema(schema.definition, decode, lambda: transform(schema.zero))


def try_map(schema: Schema[T], transform: Callable[[T], U], default: U) -> Schema[U]:
    """Apply a fallible ``transform``; a ``ValueError`` becomes a custom violation.

    Skipped (returning ``default``) when the inner decode already produced a
    type-class error. ``default`` is also the value substituted on failure.
    """
    inner = schema.decoder

    def decode(value: Any, options: Options) -> tuple[U, list[ValidationError]]:
        decoded, errors = inner(value, options)
        if has_type_error(errors):
            return default, errors
        try:
            return transform(decoded), errors
        except ValueError as exc:
            violation = CustomViolation(message=str(exc))
            return default, [*errors, ConstraintError(violation=violation)]

    return Schema(schema.definition, decode, constant(default))


def const_value(
    schema: Schema[T], value: T, to_json: Callable[[T], Any] | None = None
) -> Schema[T]:
    """Pin the decoded value to ``value``.

    The document becomes a bare ``const`` node (JSON Schema's ``const`` is
    exclusive with ``type``); the inner node's metadata is kept. ``to_json``
    converts ``value`` for the document and defaults to the identity.
    """
    inner = schema.decoder
    rendered = to_json(value) if to_json else value

    def decode(raw: Any, options: Options) -> tuple[T, list[ValidationError]]:
        decoded, errors = inner(raw, options)
        if has_type_error(errors):
            return decoded, errors
        if not json_equal(decoded, value):
            mismatch = ConstMismatch(expected=repr(value), actual=repr(decoded))
            return value, [*errors, mismatch]
        return decoded, errors

    definition = ConstNode(value=rendered, meta=meta_of(schema.definition))
    return Schema(definition, decode, constant(value))
