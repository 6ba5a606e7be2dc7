"""Annotation combinators. They touch only the definition's metadata."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from duoschema.definition.nodes import update_meta
from duoschema.schema.core import Schema

T = TypeVar("T")


def describe(schema: Schema[T], description: str) -> Schema[T]:
    return schema.with_definition(update_meta(schema.definition, description=description))


def title(schema: Schema[T], text: str) -> Schema[T]:
    return schema.with_definition(update_meta(schema.definition, title=text))


def examples(schema: Schema[T], values: Iterable[Any]) -> Schema[T]:
    """Set the ``examples`` list (JSON values), replacing any previous list."""
    return schema.with_definition(update_meta(schema.definition, examples=tuple(values)))


def default(schema: Schema[T], value: Any) -> Schema[T]:
    """Set the ``default`` annotation (a JSON value). Decoding is unaffected."""
    return schema.with_definition(update_meta(schema.definition, default=value))
