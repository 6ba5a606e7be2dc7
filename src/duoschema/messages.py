"""Human-readable rendering of validation errors."""

from __future__ import annotations

from collections.abc import Iterable

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
)


def format_path(path: list[str]) -> str:
    """Dotted path from the root; the root itself is ``$``."""
    return ".".join(path) if path else "$"


def describe_violation(violation: Violation) -> str:
    match violation:
        case StringTooShort(min_length=n, actual=actual):
            return f"string length {actual} is shorter than minimum {n}"
        case StringTooLong(max_length=n, actual=actual):
            return f"string length {actual} is longer than maximum {n}"
        case PatternMismatch(pattern=p, value=v):
            return f"{v!r} does not match pattern {p!r}"
        case InvalidPattern(pattern=p, reason=reason):
            return f"pattern {p!r} is not a valid regular expression: {reason}"
        case InvalidFormat(format=fmt, value=v):
            return f"{v!r} is not a valid {fmt}"
        case NumberTooSmall(minimum=bound, exclusive=True, actual=actual):
            return f"{actual:g} must be greater than {bound:g}"
        case NumberTooSmall(minimum=bound, actual=actual):
            return f"{actual:g} is less than minimum {bound:g}"
        case NumberTooLarge(maximum=bound, exclusive=True, actual=actual):
            return f"{actual:g} must be less than {bound:g}"
        case NumberTooLarge(maximum=bound, actual=actual):
            return f"{actual:g} is greater than maximum {bound:g}"
        case NotMultipleOf(multiple=m, actual=actual):
            return f"{actual:g} is not a multiple of {m:g}"
        case ArrayTooShort(min_items=n, actual=actual):
            return f"array has {actual} items, fewer than minimum {n}"
        case ArrayTooLong(max_items=n, actual=actual):
            return f"array has {actual} items, more than maximum {n}"
        case ArrayNotUnique():
            return "array items are not unique"
        case CustomViolation(message=message):
            return message
        case _:
            raise TypeError(f"Unknown violation: {type(violation).__name__}")


def describe_error(error: ValidationError) -> str:
    match error:
        case TypeMismatch(expected=expected, found=found):
            return f"expected {expected}, found {found}"
        case ConstraintError(violation=violation):
            return describe_violation(violation)
        case MissingField(field=name):
            return f"missing required field {name!r}"
        case UnknownVariant(actual=actual, allowed=allowed):
            return f"unknown variant {actual!r}, expected one of: {', '.join(allowed)}"
        case ConstMismatch(expected=expected, actual=actual):
            return f"expected constant {expected}, got {actual}"
        case _:
            raise TypeError(f"Unknown validation error: {type(error).__name__}")


def format_error(error: ValidationError) -> str:
    """Render one error as ``<path>: <description>``."""
    return f"{format_path(error.path)}: {describe_error(error)}"


def format_errors(errors: Iterable[ValidationError]) -> str:
    """Render errors one per line, in order."""
    return "\n".join(format_error(e) for e in errors)
