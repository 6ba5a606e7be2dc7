"""Compound combinators: arrays, tuples, dicts, nullables, enums and unions."""

from __future__ import annotations

from typing import Any, TypeVar

from duoschema import dynamic
from duoschema.definition.nodes import (
    AnyOfNode,
    ArrayNode,
    DictNode,
    EnumNode,
    NullableNode,
    OneOfNode,
    TupleNode,
)
from duoschema.models.errors import TypeMismatch, UnknownVariant, ValidationError, prefix_errors
from duoschema.models.options import Options
from duoschema.schema.core import Decoder, Schema, constant

T = TypeVar("T")


def array(item: Schema[T]) -> Schema[list[T]]:
    """A homogeneous JSON array decoded into a list."""

    def decode(value: Any, options: Options) -> tuple[list[T], list[ValidationError]]:
        elements = dynamic.as_sequence(value)
        if elements is None:
            return [], [TypeMismatch(expected="Array", found=dynamic.classify(value))]
        values: list[T] = []
        errors: list[ValidationError] = []
        for index, element in enumerate(elements):
            decoded, element_errors = item.decoder(element, options)
            values.append(decoded)
            errors.extend(prefix_errors(element_errors, str(index)))
        return values, errors

    return Schema(ArrayNode(items=item.definition), decode, list)


def tuple_(*items: Schema[Any]) -> Schema[tuple[Any, ...]]:
    """A fixed-length array whose positions each have their own schema.

    Input must have exactly ``len(items)`` elements; a length mismatch is a
    single type error citing the actual length.
    """
    if not items:
        raise ValueError("tuple_() needs at least one item schema")
    arity = len(items)
    expected = f"Tuple[{arity}]"

    def make_zero() -> tuple[Any, ...]:
        return tuple(s.zero for s in items)

    def decode(value: Any, options: Options) -> tuple[tuple[Any, ...], list[ValidationError]]:
        elements = dynamic.as_sequence(value)
        if elements is None:
            return make_zero(), [TypeMismatch(expected=expected, found=dynamic.classify(value))]
        if len(elements) != arity:
            found = f"Array[{len(elements)}]"
            return make_zero(), [TypeMismatch(expected=expected, found=found)]
        values: list[Any] = []
        errors: list[ValidationError] = []
        for index, (schema, element) in enumerate(zip(items, elements, strict=True)):
            decoded, element_errors = schema.decoder(element, options)
            values.append(decoded)
            errors.extend(prefix_errors(element_errors, str(index)))
        return tuple(values), errors

    definition = TupleNode(items=tuple(s.definition for s in items))
    return Schema(definition, decode, make_zero)


def dict_(values: Schema[T]) -> Schema[dict[str, T]]:
    """An object with arbitrary keys whose values all match ``values``."""

    def decode(value: Any, options: Options) -> tuple[dict[str, T], list[ValidationError]]:
        mapping = dynamic.as_mapping(value)
        if mapping is None:
            return {}, [TypeMismatch(expected="Object", found=dynamic.classify(value))]
        result: dict[str, T] = {}
        errors: list[ValidationError] = []
        for key, raw in mapping.items():
            decoded, value_errors = values.decoder(raw, options)
            result[key] = decoded
            errors.extend(prefix_errors(value_errors, str(key)))
        return result, errors

    return Schema(DictNode(values=values.definition), decode, dict)


def optional(inner: Schema[T]) -> Schema[T | None]:
    """Nullable wrapper: JSON ``null`` decodes to ``None``."""

    def decode(value: Any, options: Options) -> tuple[T | None, list[ValidationError]]:
        if value is None:
            return None, []
        return inner.decoder(value, options)

    return Schema(NullableNode(inner=inner.definition), decode, constant(None))


def enum_(first: tuple[str, T], *rest: tuple[str, T]) -> Schema[T]:
    """String literals mapped to values; the first pair is the fallback."""
    pairs = (first, *rest)
    literals = [literal for literal, _ in pairs]
    fallback = first[1]

    def decode(value: Any, options: Options) -> tuple[T, list[ValidationError]]:
        if not dynamic.is_string(value):
            return fallback, [TypeMismatch(expected="String", found=dynamic.classify(value))]
        for literal, mapped in pairs:
            if literal == value:
                return mapped, []
        return fallback, [UnknownVariant(actual=value, allowed=literals)]

    return Schema(EnumNode(values=tuple(literals)), decode, constant(fallback))


def _union(label: str, variants: tuple[Schema[Any], ...]) -> Decoder[Any]:
    def decode(value: Any, options: Options) -> tuple[Any, list[ValidationError]]:
        for variant in variants:
            decoded, errors = variant.decoder(value, options)
            if not errors:
                return decoded, []
        return variants[0].zero, [TypeMismatch(expected=label, found=dynamic.classify(value))]

    return decode


def one_of(first: Schema[T], *rest: Schema[Any]) -> Schema[Any]:
    """The first variant that decodes without errors wins."""
    variants = (first, *rest)
    definition = OneOfNode(variants=tuple(v.definition for v in variants))
    return Schema(definition, _union("OneOf", variants), first.make_zero)


def any_of(first: Schema[T], *rest: Schema[Any]) -> Schema[Any]:
    """Decodes exactly like ``one_of``; only the document keyword and error label differ."""
    variants = (first, *rest)
    definition = AnyOfNode(variants=tuple(v.definition for v in variants))
    return Schema(definition, _union("AnyOf", variants), first.make_zero)
