"""Typed string leaves: strings that also parse into a richer Python value."""

from __future__ import annotations

import uuid as _uuid
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any, TypeVar
from urllib.parse import SplitResult, urlsplit

from duoschema import dynamic
from duoschema.constraints.formats import StringFormat, is_uri, is_uuid, parse_rfc3339
from duoschema.definition.nodes import StringConstraints, StringNode
from duoschema.models.errors import ConstraintError, InvalidFormat, TypeMismatch, ValidationError
from duoschema.models.options import Options
from duoschema.schema.core import Schema, constant

T = TypeVar("T")

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def _parsed_leaf(fmt: StringFormat, parse: Callable[[str], T | None], zero: T) -> Schema[T]:
    definition = StringNode(constraints=StringConstraints(format=fmt.value))

    def decode(value: Any, options: Options) -> tuple[T, list[ValidationError]]:
        if not dynamic.is_string(value):
            return zero, [TypeMismatch(expected="String", found=dynamic.classify(value))]
        parsed = parse(value)
        if parsed is None:
            violation = InvalidFormat(format=fmt.value, value=value)
            return zero, [ConstraintError(violation=violation)]
        return parsed, []

    return Schema(definition, decode, constant(zero))


def _parse_uuid(text: str) -> _uuid.UUID | None:
    # uuid.UUID also accepts braces, URNs and unhyphenated hex; require canonical form.
    if not is_uuid(text):
        return None
    return _uuid.UUID(text)


def _parse_uri(text: str) -> SplitResult | None:
    if not is_uri(text):
        return None
    return urlsplit(text)


def uuid() -> Schema[_uuid.UUID]:
    """A UUID string decoded into ``uuid.UUID``; the placeholder is a fresh ``uuid4()``."""
    return _parsed_leaf(StringFormat.UUID, _parse_uuid, _uuid.uuid4())


def timestamp() -> Schema[datetime]:
    """An RFC 3339 date-time decoded into an aware ``datetime``; the placeholder is the epoch."""
    return _parsed_leaf(StringFormat.DATE_TIME, parse_rfc3339, EPOCH)


def uri() -> Schema[SplitResult]:
    """An absolute URI decoded with ``urlsplit``; the placeholder is an empty URI."""
    return _parsed_leaf(StringFormat.URI, _parse_uri, urlsplit(""))
