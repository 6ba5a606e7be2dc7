"""Declarative schema definition tree."""

from duoschema.definition.nodes import (
    UNSET,
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
    meta_of,
    with_meta,
)

__all__ = [
    "UNSET",
    "AnyOfNode",
    "ArrayConstraints",
    "ArrayNode",
    "BooleanNode",
    "ConstNode",
    "Definition",
    "DictNode",
    "EnumNode",
    "FloatConstraints",
    "IntConstraints",
    "IntegerNode",
    "Metadata",
    "NullNode",
    "NullableNode",
    "NumberNode",
    "ObjectNode",
    "OneOfNode",
    "StringConstraints",
    "StringNode",
    "TupleNode",
    "meta_of",
    "with_meta",
]
