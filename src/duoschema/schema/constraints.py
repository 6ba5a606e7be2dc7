"""Constraint-attaching combinators.

Every constraint wraps the incoming decoder the same way: run it, skip the
check if a type-class error (``TypeMismatch`` / ``MissingField``) is already
present, otherwise append a ``ConstraintError`` when the predicate fails.
Several constraints on one value therefore all report, while a value of the
wrong kind reports exactly one error.

Each combinator also records its keyword on the matching definition node so
the emitted document carries it; on other node kinds only the check applies.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from duoschema.constraints import predicates
from duoschema.constraints.formats import FormatRegistry, StringFormat
from duoschema.definition.nodes import (
    ArrayNode,
    Definition,
    IntegerNode,
    NumberNode,
    StringNode,
    update_constraints,
)
from duoschema.models.errors import (
    ConstraintError,
    InvalidFormat,
    ValidationError,
    Violation,
    has_type_error,
)
from duoschema.models.options import Options
from duoschema.schema.core import Schema

logger = logging.getLogger("duoschema.formats")

T = TypeVar("T")

Check = Callable[[T, Options], "Violation | None"]


def constrain(schema: Schema[T], definition: Definition, check: Check[T]) -> Schema[T]:
    """Wrap ``schema``'s decoder with ``check`` under the type-error short-circuit rule."""
    inner = schema.decoder

    def decode(value: Any, options: Options) -> tuple[T, list[ValidationError]]:
        decoded, errors = inner(value, options)
        if has_type_error(errors):
            return decoded, errors
        violation = check(decoded, options)
        if violation is None:
            return decoded, errors
        return decoded, [*errors, ConstraintError(violation=violation)]

    return Schema(definition, decode, schema.make_zero)


def _non_negative(name: str, bound: int) -> None:
    if bound < 0:
        raise ValueError(f"{name} must be non-negative, got {bound}")


# --- Strings ---------------------------------------------------------------


def min_length(schema: Schema[str], length: int) -> Schema[str]:
    _non_negative("min_length", length)
    definition = update_constraints(schema.definition, StringNode, min_length=length)
    return constrain(schema, definition, lambda v, _: predicates.check_min_length(v, length))


def max_length(schema: Schema[str], length: int) -> Schema[str]:
    _non_negative("max_length", length)
    definition = update_constraints(schema.definition, StringNode, max_length=length)
    return constrain(schema, definition, lambda v, _: predicates.check_max_length(v, length))


def pattern(schema: Schema[str], regex: str) -> Schema[str]:
    """Require an (unanchored) regular-expression match.

    A pattern that fails to compile reports ``InvalidPattern`` on every
    decode instead of raising.
    """
    compiled = predicates.compile_pattern(regex)
    definition = update_constraints(schema.definition, StringNode, pattern=regex)
    return constrain(schema, definition, lambda v, _: predicates.check_pattern(v, compiled))


def format_(schema: Schema[str], fmt: StringFormat | str) -> Schema[str]:
    """Tag a string with a ``format``; asserted only when ``options.validate_formats``."""
    name = str(fmt)
    definition = update_constraints(schema.definition, StringNode, format=name)

    def check(value: str, options: Options) -> Violation | None:
        if not options.validate_formats:
            return None
        if not FormatRegistry.is_registered(name):
            logger.debug("no checker for format %r; treating as annotation", name)
            return None
        if FormatRegistry.get(name)(value):
            return None
        return InvalidFormat(format=name, value=value)

    return constrain(schema, definition, check)


# --- Integers --------------------------------------------------------------


def minimum(schema: Schema[int], bound: int) -> Schema[int]:
    definition = update_constraints(schema.definition, IntegerNode, minimum=bound)
    return constrain(schema, definition, lambda v, _: predicates.check_minimum(v, bound))


def maximum(schema: Schema[int], bound: int) -> Schema[int]:
    definition = update_constraints(schema.definition, IntegerNode, maximum=bound)
    return constrain(schema, definition, lambda v, _: predicates.check_maximum(v, bound))


def exclusive_minimum(schema: Schema[int], bound: int) -> Schema[int]:
    definition = update_constraints(schema.definition, IntegerNode, exclusive_minimum=bound)
    return constrain(
        schema, definition, lambda v, _: predicates.check_minimum(v, bound, exclusive=True)
    )


def exclusive_maximum(schema: Schema[int], bound: int) -> Schema[int]:
    definition = update_constraints(schema.definition, IntegerNode, exclusive_maximum=bound)
    return constrain(
        schema, definition, lambda v, _: predicates.check_maximum(v, bound, exclusive=True)
    )


def multiple_of(schema: Schema[int], multiple: int) -> Schema[int]:
    """Require ``value % multiple == 0``; a multiple of zero accepts everything."""
    definition = update_constraints(schema.definition, IntegerNode, multiple_of=multiple)
    return constrain(
        schema, definition, lambda v, _: predicates.check_int_multiple_of(v, multiple)
    )


# --- Floats ----------------------------------------------------------------


def float_minimum(schema: Schema[float], bound: float) -> Schema[float]:
    definition = update_constraints(schema.definition, NumberNode, minimum=bound)
    return constrain(schema, definition, lambda v, _: predicates.check_minimum(v, bound))


def float_maximum(schema: Schema[float], bound: float) -> Schema[float]:
    definition = update_constraints(schema.definition, NumberNode, maximum=bound)
    return constrain(schema, definition, lambda v, _: predicates.check_maximum(v, bound))


def float_exclusive_minimum(schema: Schema[float], bound: float) -> Schema[float]:
    definition = update_constraints(schema.definition, NumberNode, exclusive_minimum=bound)
    return constrain(
        schema, definition, lambda v, _: predicates.check_minimum(v, bound, exclusive=True)
    )


def float_exclusive_maximum(schema: Schema[float], bound: float) -> Schema[float]:
    definition = update_constraints(schema.definition, NumberNode, exclusive_maximum=bound)
    return constrain(
        schema, definition, lambda v, _: predicates.check_maximum(v, bound, exclusive=True)
    )


def float_multiple_of(schema: Schema[float], multiple: float) -> Schema[float]:
    """Multiple-of with a 1e-7 remainder tolerance; a multiple of zero accepts everything."""
    definition = update_constraints(schema.definition, NumberNode, multiple_of=multiple)
    return constrain(
        schema, definition, lambda v, _: predicates.check_float_multiple_of(v, multiple)
    )


# --- Arrays ----------------------------------------------------------------


def min_items(schema: Schema[Sequence[T]], count: int) -> Schema[Sequence[T]]:
    _non_negative("min_items", count)
    definition = update_constraints(schema.definition, ArrayNode, min_items=count)
    return constrain(schema, definition, lambda v, _: predicates.check_min_items(v, count))


def max_items(schema: Schema[Sequence[T]], count: int) -> Schema[Sequence[T]]:
    _non_negative("max_items", count)
    definition = update_constraints(schema.definition, ArrayNode, max_items=count)
    return constrain(schema, definition, lambda v, _: predicates.check_max_items(v, count))


def unique_items(schema: Schema[Sequence[T]]) -> Schema[Sequence[T]]:
    definition = update_constraints(schema.definition, ArrayNode, unique_items=True)
    return constrain(schema, definition, lambda v, _: predicates.check_unique_items(v))
