"""Schema combinators: constructors, composition, constraints and transforms."""

from duoschema.schema.compound import any_of, array, dict_, enum_, one_of, optional, tuple_
from duoschema.schema.constraints import (
    constrain,
    exclusive_maximum,
    exclusive_minimum,
    float_exclusive_maximum,
    float_exclusive_minimum,
    float_maximum,
    float_minimum,
    float_multiple_of,
    format_,
    max_items,
    max_length,
    maximum,
    min_items,
    min_length,
    minimum,
    multiple_of,
    pattern,
    unique_items,
)
from duoschema.schema.core import Decoder, Schema, boolean, integer, null, number, string
from duoschema.schema.leaves import timestamp, uri, uuid
from duoschema.schema.metadata import default, describe, examples, title
from duoschema.schema.objects import additional_properties, field, optional_field, success
from duoschema.schema.transforms import const_value, map_, try_map

__all__ = [
    "Decoder",
    "Schema",
    "additional_properties",
    "any_of",
    "array",
    "boolean",
    "const_value",
    "constrain",
    "default",
    "describe",
    "dict_",
    "enum_",
    "examples",
    "exclusive_maximum",
    "exclusive_minimum",
    "field",
    "float_exclusive_maximum",
    "float_exclusive_minimum",
    "float_maximum",
    "float_minimum",
    "float_multiple_of",
    "format_",
    "integer",
    "map_",
    "max_items",
    "max_length",
    "maximum",
    "min_items",
    "min_length",
    "minimum",
    "multiple_of",
    "null",
    "number",
    "one_of",
    "optional",
    "optional_field",
    "pattern",
    "string",
    "success",
    "timestamp",
    "title",
    "try_map",
    "tuple_",
    "unique_items",
    "uri",
    "uuid",
]
