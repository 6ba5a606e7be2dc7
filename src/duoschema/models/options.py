"""Decode-time options."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from duoschema.settings import Settings


@dataclass(frozen=True)
class Options:
    """Flags consulted by decoders.

    ``validate_formats`` turns ``format`` from a pure annotation into an
    assertion, as JSON Schema 2020-12 allows implementations to opt into.
    """

    validate_formats: bool = False

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> Options:
        """Build options from environment-driven settings."""
        if settings is None:
            from duoschema.settings import Settings

            settings = Settings()
        return cls(validate_formats=settings.validate_formats)
