"""Pure constraint predicates.

Each predicate evaluates one constraint against an already-typed value and
returns the violation, or ``None`` when the value satisfies it.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence
from typing import Any

from duoschema.dynamic import json_equal
from duoschema.models.errors import (
    ArrayNotUnique,
    ArrayTooLong,
    ArrayTooShort,
    InvalidPattern,
    NotMultipleOf,
    NumberTooLarge,
    NumberTooSmall,
    PatternMismatch,
    StringTooLong,
    StringTooShort,
    Violation,
)

FLOAT_MULTIPLE_TOLERANCE = 1e-7


def as_bound(value: float) -> float:
    """Float-normalise a violation number; ints past the float range clamp to infinity."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


# --- Strings ---------------------------------------------------------------


def check_min_length(value: str, min_length: int) -> Violation | None:
    if len(value) < min_length:
        return StringTooShort(min_length=min_length, actual=len(value))
    return None


def check_max_length(value: str, max_length: int) -> Violation | None:
    if len(value) > max_length:
        return StringTooLong(max_length=max_length, actual=len(value))
    return None


def compile_pattern(pattern: str) -> re.Pattern[str] | InvalidPattern:
    """Compile ``pattern``; a bad pattern becomes a violation instead of an exception."""
    try:
        return re.compile(pattern)
    except re.error as exc:
        return InvalidPattern(pattern=pattern, reason=str(exc))


def check_pattern(value: str, compiled: re.Pattern[str] | InvalidPattern) -> Violation | None:
    """Unanchored search, matching JSON Schema's ``pattern`` semantics."""
    if isinstance(compiled, InvalidPattern):
        return compiled
    if compiled.search(value) is None:
        return PatternMismatch(pattern=compiled.pattern, value=value)
    return None


# --- Numbers ---------------------------------------------------------------


def check_minimum(value: float, minimum: float, *, exclusive: bool = False) -> Violation | None:
    too_small = value <= minimum if exclusive else value < minimum
    if too_small:
        return NumberTooSmall(
            minimum=as_bound(minimum), exclusive=exclusive, actual=as_bound(value)
        )
    return None


def check_maximum(value: float, maximum: float, *, exclusive: bool = False) -> Violation | None:
    too_large = value >= maximum if exclusive else value > maximum
    if too_large:
        return NumberTooLarge(
            maximum=as_bound(maximum), exclusive=exclusive, actual=as_bound(value)
        )
    return None


def check_int_multiple_of(value: int, multiple: int) -> Violation | None:
    # Everything is a multiple of zero.
    if multiple == 0 or value % multiple == 0:
        return None
    return NotMultipleOf(multiple=as_bound(multiple), actual=as_bound(value))


def check_float_multiple_of(value: float, multiple: float) -> Violation | None:
    """Multiple-of check with a 1e-7 tolerance around the remainder.

    The remainder can land near ``multiple`` rather than 0
    (``math.fmod(0.3, 0.1) == 0.09999999999999998``), so both ends count. Infinity and NaN are never multiples.
    """
    if multiple == 0:
        return None
    if not math.isfinite(as_bound(value)):
        return NotMultipleOf(multiple=as_bound(multiple), actual=as_bound(value))
    remainder = math.fmod(value, multiple)
    if (
        abs(remainder) <= FLOAT_MULTIPLE_TOLERANCE
        or abs(abs(remainder) - abs(multiple)) <= FLOAT_MULTIPLE_TOLERANCE
    ):
        return None
    return NotMultipleOf(multiple=as_bound(multiple), actual=as_bound(value))


# --- Arrays ----------------------------------------------------------------


def check_min_items(items: Sequence[Any], min_items: int) -> Violation | None:
    if len(items) < min_items:
        return ArrayTooShort(min_items=min_items, actual=len(items))
    return None


def check_max_items(items: Sequence[Any], max_items: int) -> Violation | None:
    if len(items) > max_items:
        return ArrayTooLong(max_items=max_items, actual=len(items))
    return None


def check_unique_items(items: Sequence[Any]) -> Violation | None:
    # Pairwise JSON equality: items may be unhashable, and true != 1.
    for i, item in enumerate(items):
        for other in items[i + 1 :]:
            if json_equal(item, other):
                return ArrayNotUnique()
    return None
