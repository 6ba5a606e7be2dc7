"""Structured validation errors with root-to-leaf path tracking.

Errors are plain data: decoders return them in ordered lists and never raise
them. Every model is frozen; path prefixing builds new instances.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Annotated, Literal

from pydantic import BaseModel, Field

# --- Constraint violations -------------------------------------------------


class StringTooShort(BaseModel):
    kind: Literal["string_too_short"] = "string_too_short"
    min_length: int
    actual: int

    model_config = {"frozen": True}


class StringTooLong(BaseModel):
    kind: Literal["string_too_long"] = "string_too_long"
    max_length: int
    actual: int

    model_config = {"frozen": True}


class PatternMismatch(BaseModel):
    kind: Literal["pattern_mismatch"] = "pattern_mismatch"
    pattern: str
    value: str

    model_config = {"frozen": True}


class InvalidPattern(BaseModel):
    """The pattern text itself failed to compile."""

    kind: Literal["invalid_pattern"] = "invalid_pattern"
    pattern: str
    reason: str

    model_config = {"frozen": True}


class InvalidFormat(BaseModel):
    kind: Literal["invalid_format"] = "invalid_format"
    format: str
    value: str

    model_config = {"frozen": True}


class NumberTooSmall(BaseModel):
    """Bounds are float-normalised for both integer and number schemas."""

    kind: Literal["number_too_small"] = "number_too_small"
    minimum: float
    exclusive: bool = False
    actual: float

    model_config = {"frozen": True}


class NumberTooLarge(BaseModel):
    kind: Literal["number_too_large"] = "number_too_large"
    maximum: float
    exclusive: bool = False
    actual: float

    model_config = {"frozen": True}


class NotMultipleOf(BaseModel):
    kind: Literal["not_multiple_of"] = "not_multiple_of"
    multiple: float
    actual: float

    model_config = {"frozen": True}


class ArrayTooShort(BaseModel):
    kind: Literal["array_too_short"] = "array_too_short"
    min_items: int
    actual: int

    model_config = {"frozen": True}


class ArrayTooLong(BaseModel):
    kind: Literal["array_too_long"] = "array_too_long"
    max_items: int
    actual: int

    model_config = {"frozen": True}


class ArrayNotUnique(BaseModel):
    kind: Literal["array_not_unique"] = "array_not_unique"

    model_config = {"frozen": True}


class CustomViolation(BaseModel):
    """Raised by user transforms (see ``try_map``)."""

    kind: Literal["custom"] = "custom"
    message: str

    model_config = {"frozen": True}


Violation = Annotated[
    StringTooShort
    | StringTooLong
    | PatternMismatch
    | InvalidPattern
    | InvalidFormat
    | NumberTooSmall
    | NumberTooLarge
    | NotMultipleOf
    | ArrayTooShort
    | ArrayTooLong
    | ArrayNotUnique
    | CustomViolation,
    Field(discriminator="kind"),
]


# --- Validation errors -----------------------------------------------------


class TypeMismatch(BaseModel):
    """Input had the wrong JSON kind (e.g. ``Int`` where ``String`` was expected)."""

    kind: Literal["type_mismatch"] = "type_mismatch"
    expected: str
    found: str
    path: list[str] = []

    model_config = {"frozen": True}


class ConstraintError(BaseModel):
    """Input had the right kind but violated a constraint."""

    kind: Literal["constraint"] = "constraint"
    violation: Violation
    path: list[str] = []

    model_config = {"frozen": True}


class MissingField(BaseModel):
    kind: Literal["missing_field"] = "missing_field"
    field: str
    path: list[str] = []

    model_config = {"frozen": True}


class UnknownVariant(BaseModel):
    kind: Literal["unknown_variant"] = "unknown_variant"
    actual: str
    allowed: list[str]
    path: list[str] = []

    model_config = {"frozen": True}


class ConstMismatch(BaseModel):
    """Decoded value differs from the pinned constant; both sides rendered with ``repr``."""

    kind: Literal["const_mismatch"] = "const_mismatch"
    expected: str
    actual: str
    path: list[str] = []

    model_config = {"frozen": True}


ValidationError = Annotated[
    TypeMismatch | ConstraintError | MissingField | UnknownVariant | ConstMismatch,
    Field(discriminator="kind"),
]


def prefix_errors(errors: Iterable[ValidationError], segment: str) -> list[ValidationError]:
    """Prepend ``segment`` to the path of every error."""
    return [e.model_copy(update={"path": [segment, *e.path]}) for e in errors]


def has_type_error(errors: Iterable[ValidationError]) -> bool:
    """True if any error is type-class (``TypeMismatch`` or ``MissingField``)."""
    return any(isinstance(e, (TypeMismatch, MissingField)) for e in errors)
