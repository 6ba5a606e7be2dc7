"""Error and option models for duoschema."""

from duoschema.models.errors import (
    ArrayNotUnique,
    ArrayTooLong,
    ArrayTooShort,
    ConstMismatch,
    ConstraintError,
    CustomViolation,
    InvalidFormat,
    InvalidPattern,
    MissingField,
    NotMultipleOf,
    NumberTooLarge,
    NumberTooSmall,
    PatternMismatch,
    StringTooLong,
    StringTooShort,
    TypeMismatch,
    UnknownVariant,
    ValidationError,
    Violation,
    has_type_error,
    prefix_errors,
)
from duoschema.models.options import Options

__all__ = [
    "ArrayNotUnique",
    "ArrayTooLong",
    "ArrayTooShort",
    "ConstMismatch",
    "ConstraintError",
    "CustomViolation",
    "InvalidFormat",
    "InvalidPattern",
    "MissingField",
    "NotMultipleOf",
    "NumberTooLarge",
    "NumberTooSmall",
    "Options",
    "PatternMismatch",
    "StringTooLong",
    "StringTooShort",
    "TypeMismatch",
    "UnknownVariant",
    "ValidationError",
    "Violation",
    "has_type_error",
    "prefix_errors",
]
