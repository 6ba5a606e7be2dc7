"""Validation entry points: run a schema's decoder and wrap the outcome."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Generic, NoReturn, TypeVar

from duoschema.messages import format_errors
from duoschema.models.errors import ValidationError
from duoschema.models.options import Options
from duoschema.schema.core import Schema

logger = logging.getLogger("duoschema.runner")

T = TypeVar("T")


class SchemaValidationFailed(Exception):
    """Raised by ``Err.unwrap()``; carries every accumulated error."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = errors
        super().__init__(
            f"Validation failed with {len(errors)} error(s):\n{format_errors(errors)}"
        )


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful decode."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed decode with the complete ordered error list."""

    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise SchemaValidationFailed(self.errors)


Result = Ok[T] | Err


def run(value: Any, schema: Schema[T]) -> Ok[T] | Err:
    """Decode ``value`` with default options (formats are annotations only)."""
    return run_with_options(value, schema, Options())


def run_with_options(value: Any, schema: Schema[T], options: Options) -> Ok[T] | Err:
    """Decode ``value``; success iff no errors accumulated."""
    decoded, errors = schema.decoder(value, options)
    if errors:
        logger.debug("validation failed with %d error(s)", len(errors))
        return Err(errors)
    logger.debug("validation succeeded")
    return Ok(decoded)
