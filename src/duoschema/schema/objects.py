"""Object schemas built by continuation-style field chaining.

Each ``field`` call takes a continuation that receives the decoded field
value and returns the schema for the rest of the object::

    user = field("name", string(), lambda name:
           field("age", integer(), lambda age:
           success(User(name, age))))

To build the static definition there is no real data, so the continuation is
called with the field schema's zero value. Decoding calls it again with the
real decoded value. Schemas whose *shape* depends on earlier values therefore
document the shape produced by the zero values.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any, TypeVar

from duoschema import dynamic
from duoschema.definition.nodes import Definition, ObjectNode
from duoschema.models.errors import MissingField, TypeMismatch, ValidationError, prefix_errors
from duoschema.models.options import Options
from duoschema.schema.core import Schema, constant

T = TypeVar("T")
U = TypeVar("U")


def success(value: T) -> Schema[T]:
    """Terminal combinator: an empty object that always decodes to ``value``."""

    def decode(_: Any, options: Options) -> tuple[T, list[ValidationError]]:
        return value, []

    return Schema(ObjectNode(), decode, constant(value))


def _prepend_property(
    rest: Definition, name: str, definition: Definition, *, required: bool
) -> ObjectNode:
    if not isinstance(rest, ObjectNode):
        rest = ObjectNode()
    names = rest.required | {name} if required else rest.required
    return replace(rest, properties=((name, definition), *rest.properties), required=names)


def _not_an_object(value: Any) -> list[ValidationError]:
    return [TypeMismatch(expected="Object", found=dynamic.classify(value))]


def field(name: str, schema: Schema[T], next_: Callable[[T], Schema[U]]) -> Schema[U]:
    """A required property ``name`` followed by the rest of the object."""
    rest = next_(schema.zero)
    definition = _prepend_property(rest.definition, name, schema.definition, required=True)

    def decode(value: Any, options: Options) -> tuple[U, list[ValidationError]]:
        mapping = dynamic.as_mapping(value)
        if mapping is None:
            return next_(schema.zero).zero, _not_an_object(value)
        if name not in mapping:
            rest_value, rest_errors = next_(schema.zero).decoder(value, options)
            return rest_value, [MissingField(field=name), *rest_errors]
        field_value, field_errors = schema.decoder(mapping[name], options)
        rest_value, rest_errors = next_(field_value).decoder(value, options)
        return rest_value, [*prefix_errors(field_errors, name), *rest_errors]

    return Schema(definition, decode, lambda: next_(schema.zero).zero)


def optional_field(
    name: str, schema: Schema[T], next_: Callable[[T | None], Schema[U]]
) -> Schema[U]:
    """An optional property: absent or ``null`` passes ``None`` to the continuation."""
    rest = next_(None)
    definition = _prepend_property(rest.definition, name, schema.definition, required=False)

    def decode(value: Any, options: Options) -> tuple[U, list[ValidationError]]:
        mapping = dynamic.as_mapping(value)
        if mapping is None:
            return next_(None).zero, _not_an_object(value)
        raw = mapping.get(name)
        if raw is None:
            return next_(None).decoder(value, options)
        field_value, field_errors = schema.decoder(raw, options)
        rest_value, rest_errors = next_(field_value).decoder(value, options)
        return rest_value, [*prefix_errors(field_errors, name), *rest_errors]

    return Schema(definition, decode, lambda: next_(None).zero)


def additional_properties(schema: Schema[T], allow: bool) -> Schema[T]:
    """Set whether the emitted document permits undeclared keys.

    Only the document changes; decoding always tolerates extra keys.
    Non-object schemas are returned unchanged.
    """
    if not isinstance(schema.definition, ObjectNode):
        return schema
    return schema.with_definition(replace(schema.definition, allow_additional=allow))
