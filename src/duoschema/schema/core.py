"""The ``Schema`` value type and primitive constructors.

A ``Schema[T]`` pairs three things:

* ``definition``: the declarative node tree read by the document emitter;
* ``decoder``: ``(value, options) -> (T, errors)``, read by the runner;
* ``make_zero``: builds a placeholder ``T`` used to materialise
  continuation-built object shapes when no real input exists.

A decoder always returns a usable ``T``, substituting a zero or fallback on
failure; callers inspect the error list rather than trusting the value.
Every ``zero`` access builds a new placeholder, so mutating one returned
from a decode never leaks into later decodes.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from duoschema import dynamic
from duoschema.definition.nodes import (
    BooleanNode,
    Definition,
    IntegerNode,
    NullNode,
    NumberNode,
    StringNode,
)
from duoschema.models.errors import TypeMismatch, ValidationError
from duoschema.models.options import Options

T = TypeVar("T")
U = TypeVar("U")

Decoder = Callable[[Any, Options], tuple[T, list[ValidationError]]]

DEFAULT_OPTIONS = Options()


@dataclass(frozen=True)
class Schema(Generic[T]):
    """An immutable, shareable schema for values of type ``T``."""

    definition: Definition
    decoder: Decoder[T]
    make_zero: Callable[[], T]

    @property
    def zero(self) -> T:
        return self.make_zero()

    def decode(
        self, value: Any, options: Options = DEFAULT_OPTIONS
    ) -> tuple[T, list[ValidationError]]:
        """Decode ``value``, returning the value and every error found."""
        return self.decoder(value, options)

    def with_definition(self, definition: Definition) -> Schema[T]:
        return Schema(definition, self.decoder, self.make_zero)

    def with_decoder(self, decoder: Decoder[T]) -> Schema[T]:
        return Schema(self.definition, decoder, self.make_zero)


def constant(value: T) -> Callable[[], T]:
    """Zero factory for immutable placeholders."""
    return lambda: value


def _primitive(
    definition: Definition, expected: str, accepts: Callable[[Any], bool], zero: T
) -> Schema[T]:
    def decode(value: Any, options: Options) -> tuple[T, list[ValidationError]]:
        if not accepts(value):
            return zero, [TypeMismatch(expected=expected, found=dynamic.classify(value))]
        return value, []

    return Schema(definition, decode, constant(zero))


def string() -> Schema[str]:
    return _primitive(StringNode(), "String", dynamic.is_string, "")


def integer() -> Schema[int]:
    return _primitive(IntegerNode(), "Int", dynamic.is_int, 0)


def number() -> Schema[float]:
    """Floats; integer input is widened to ``float`` without error.

    Integers beyond the float range cannot be widened and are reported as a
    type mismatch.
    """

    def decode(value: Any, options: Options) -> tuple[float, list[ValidationError]]:
        if dynamic.is_float(value):
            return value, []
        if dynamic.is_int(value):
            try:
                return float(value), []
            except OverflowError:
                return 0.0, [TypeMismatch(expected="Float", found="Int")]
        return 0.0, [TypeMismatch(expected="Float", found=dynamic.classify(value))]

    return Schema(NumberNode(), decode, constant(0.0))


def boolean() -> Schema[bool]:
    return _primitive(BooleanNode(), "Bool", dynamic.is_bool, False)


def null() -> Schema[None]:
    return _primitive(NullNode(), "Null", dynamic.is_null, None)
