"""duoschema: one schema value for JSON Schema generation and typed decoding."""

from duoschema.constraints.formats import FormatRegistry, StringFormat, UnsupportedFormatError
from duoschema.emitter.document import to_document, to_json
from duoschema.messages import format_error, format_errors
from duoschema.models.errors import (
    ConstMismatch,
    ConstraintError,
    MissingField,
    TypeMismatch,
    UnknownVariant,
    ValidationError,
)
from duoschema.models.options import Options
from duoschema.runner import Err, Ok, SchemaValidationFailed, run, run_with_options
from duoschema.schema import (
    Schema,
    additional_properties,
    any_of,
    array,
    boolean,
    const_value,
    default,
    describe,
    dict_,
    enum_,
    examples,
    exclusive_maximum,
    exclusive_minimum,
    field,
    float_exclusive_maximum,
    float_exclusive_minimum,
    float_maximum,
    float_minimum,
    float_multiple_of,
    format_,
    integer,
    map_,
    max_items,
    max_length,
    maximum,
    min_items,
    min_length,
    minimum,
    multiple_of,
    null,
    number,
    one_of,
    optional,
    optional_field,
    pattern,
    string,
    success,
    timestamp,
    title,
    try_map,
    tuple_,
    unique_items,
    uri,
    uuid,
)

__version__ = "0.1.0"

__all__ = [
    "ConstMismatch",
    "ConstraintError",
    "Err",
    "FormatRegistry",
    "MissingField",
    "Ok",
    "Options",
    "Schema",
    "SchemaValidationFailed",
    "StringFormat",
    "TypeMismatch",
    "UnknownVariant",
    "UnsupportedFormatError",
    "ValidationError",
    "additional_properties",
    "any_of",
    "array",
    "boolean",
    "const_value",
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
    "format_error",
    "format_errors",
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
    "run",
    "run_with_options",
    "string",
    "success",
    "timestamp",
    "title",
    "to_document",
    "to_json",
    "try_map",
    "tuple_",
    "unique_items",
    "uri",
    "uuid",
]
