"""Constraint predicates and string format checkers."""

from duoschema.constraints.formats import (
    FormatChecker,
    FormatRegistry,
    StringFormat,
    UnsupportedFormatError,
    parse_rfc3339,
)

__all__ = [
    "FormatChecker",
    "FormatRegistry",
    "StringFormat",
    "UnsupportedFormatError",
    "parse_rfc3339",
]
