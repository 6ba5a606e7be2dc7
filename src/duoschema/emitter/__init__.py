"""JSON Schema document generation."""

from duoschema.emitter.document import DRAFT_2020_12, DocumentEmitter, to_document, to_json

__all__ = [
    "DRAFT_2020_12",
    "DocumentEmitter",
    "to_document",
    "to_json",
]
