"""Definition tree → JSON Schema (draft 2020-12) document."""

from __future__ import annotations

import json
from typing import Any

from duoschema.definition.nodes import (
    AnyOfNode,
    ArrayConstraints,
    ArrayNode,
    BooleanNode,
    ConstNode,
    Definition,
    DictNode,
    EnumNode,
    FloatConstraints,
    IntConstraints,
    IntegerNode,
    Metadata,
    NullableNode,
    NullNode,
    NumberNode,
    ObjectNode,
    OneOfNode,
    StringConstraints,
    StringNode,
    TupleNode,
)
from duoschema.schema.core import Schema

DRAFT_2020_12 = "https://json-schema.org/draft/2020-12/schema"


class DocumentEmitter:
    """Renders definition nodes as ordered ``dict`` trees.

    Key order per node: constraint keywords, ``type``, structural keywords,
    then annotations (``title``, ``description``, ``examples``, ``default``).
    """

    def document(self, definition: Definition) -> dict[str, Any]:
        """Render a root node, adding the ``$schema`` dialect marker."""
        return {"$schema": DRAFT_2020_12, **self.emit(definition)}

    def emit(self, definition: Definition) -> dict[str, Any]:
        """Render any node, including its metadata."""
        return {**self.emit_body(definition), **self.emit_meta(definition.meta)}

    def emit_body(self, definition: Definition) -> dict[str, Any]:
        match definition:
            case StringNode(constraints=c):
                return {**self.emit_string_constraints(c), "type": "string"}
            case IntegerNode(constraints=c):
                return {**self.emit_numeric_constraints(c), "type": "integer"}
            case NumberNode(constraints=c):
                return {**self.emit_numeric_constraints(c), "type": "number"}
            case BooleanNode():
                return {"type": "boolean"}
            case NullNode():
                return {"type": "null"}
            case ArrayNode(items=items, constraints=c):
                return {
                    **self.emit_array_constraints(c),
                    "type": "array",
                    "items": self.emit(items),
                }
            case ObjectNode():
                return self.emit_object(definition)
            case DictNode(values=values):
                return {"type": "object", "additionalProperties": self.emit(values)}
            case NullableNode(inner=inner):
                return {"oneOf": [{"type": "null"}, self.emit(inner)]}
            case OneOfNode(variants=variants):
                return {"oneOf": [self.emit(v) for v in variants]}
            case AnyOfNode(variants=variants):
                return {"anyOf": [self.emit(v) for v in variants]}
            case EnumNode(values=values):
                return {"type": "string", "enum": list(values)}
            case ConstNode(value=value):
                return {"const": value}
            case TupleNode(items=items):
                return {
                    "type": "array",
                    "prefixItems": [self.emit(i) for i in items],
                    "items": False,
                    "minItems": len(items),
                    "maxItems": len(items),
                }
            case _:
                raise TypeError(f"Unknown definition node: {type(definition).__name__}")

    def emit_object(self, node: ObjectNode) -> dict[str, Any]:
        result: dict[str, Any] = {
            "type": "object",
            "properties": {name: self.emit(d) for name, d in node.properties},
        }
        required = [name for name in node.property_names if name in node.required]
        if required:
            result["required"] = required
        # Allowed additional properties are expressed by omission, never ``true``.
        if not node.allow_additional:
            result["additionalProperties"] = False
        return result

    def emit_string_constraints(self, c: StringConstraints) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if c.min_length is not None:
            result["minLength"] = c.min_length
        if c.max_length is not None:
            result["maxLength"] = c.max_length
        if c.pattern is not None:
            result["pattern"] = c.pattern
        if c.format is not None:
            result["format"] = c.format
        return result

    def emit_numeric_constraints(self, c: IntConstraints | FloatConstraints) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if c.minimum is not None:
            result["minimum"] = c.minimum
        if c.maximum is not None:
            result["maximum"] = c.maximum
        if c.exclusive_minimum is not None:
            result["exclusiveMinimum"] = c.exclusive_minimum
        if c.exclusive_maximum is not None:
            result["exclusiveMaximum"] = c.exclusive_maximum
        if c.multiple_of is not None:
            result["multipleOf"] = c.multiple_of
        return result

    def emit_array_constraints(self, c: ArrayConstraints) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if c.min_items is not None:
            result["minItems"] = c.min_items
        if c.max_items is not None:
            result["maxItems"] = c.max_items
        if c.unique_items:
            result["uniqueItems"] = True
        return result

    def emit_meta(self, meta: Metadata) -> dict[str, Any]:
        result: dict[str, Any] = {}
        if meta.title is not None:
            result["title"] = meta.title
        if meta.description is not None:
            result["description"] = meta.description
        if meta.examples:
            result["examples"] = list(meta.examples)
        if meta.has_default:
            result["default"] = meta.default
        return result


_emitter = DocumentEmitter()


def to_document(schema: Schema[Any]) -> dict[str, Any]:
    """Return the JSON Schema document for ``schema`` as a ``dict``."""
    return _emitter.document(schema.definition)


def to_json(schema: Schema[Any], indent: int | None = 2) -> str:
    """Return the JSON Schema document for ``schema`` serialised as text."""
    return json.dumps(to_document(schema), indent=indent)
