"""End-to-end: one schema value drives both the document and decoding."""

from __future__ import annotations

import json
import uuid as std_uuid
from dataclasses import dataclass
from datetime import UTC, datetime

from duoschema import (
    ConstMismatch,
    ConstraintError,
    Err,
    MissingField,
    Ok,
    Options,
    Schema,
    TypeMismatch,
    UnknownVariant,
    array,
    const_value,
    describe,
    dict_,
    field,
    format_,
    format_errors,
    integer,
    min_items,
    number,
    one_of,
    optional,
    optional_field,
    run,
    run_with_options,
    string,
    success,
    timestamp,
    title,
    to_document,
    to_json,
    tuple_,
    uuid,
)
from duoschema.emitter.document import DRAFT_2020_12
from duoschema.models.errors import ArrayTooShort, InvalidFormat, NumberTooSmall, StringTooShort
from tests.conftest import Role, User

ORDER_ID = "6f1c2a9e-3b7d-4c1e-9a55-0d2e8f4b7c31"


@dataclass(frozen=True)
class Order:
    version: str
    id: std_uuid.UUID
    placed_at: datetime
    customer_email: str
    location: tuple[float, float]
    lines: list[tuple[str, int]]
    attributes: dict[str, str]
    note: str | None


def build_order_schema() -> Schema[Order]:
    line = tuple_(string(), integer())
    return title(
        field(
            "version",
            const_value(string(), "v2"),
            lambda version: field(
                "id",
                uuid(),
                lambda id_: field(
                    "placed_at",
                    timestamp(),
                    lambda placed_at: field(
                        "customer_email",
                        format_(string(), "email"),
                        lambda email: field(
                            "location",
                            tuple_(number(), number()),
                            lambda location: field(
                                "lines",
                                min_items(array(line), 1),
                                lambda lines: field(
                                    "attributes",
                                    dict_(string()),
                                    lambda attributes: optional_field(
                                        "note",
                                        describe(string(), "Free-form note"),
                                        lambda note: success(
                                            Order(
                                                version,
                                                id_,
                                                placed_at,
                                                email,
                                                location,
                                                lines,
                                                attributes,
                                                note,
                                            )
                                        ),
                                    ),
                                ),
                            ),
                        ),
                    ),
                ),
            ),
        ),
        "Order",
    )


def valid_order() -> dict:
    return {
        "version": "v2",
        "id": ORDER_ID,
        "placed_at": "2024-05-01T09:30:00Z",
        "customer_email": "buyer@example.com",
        "location": [52.52, 13.405],
        "lines": [["widget", 2], ["gadget", 1]],
        "attributes": {"channel": "web"},
    }


class TestUserSchema:
    def test_golden_document(self, user_schema) -> None:
        assert to_document(user_schema) == {
            "$schema": DRAFT_2020_12,
            "type": "object",
            "properties": {
                "name": {"minLength": 1, "maxLength": 50, "type": "string"},
                "age": {"minimum": 0, "type": "integer"},
                "role": {"type": "string", "enum": ["admin", "member", "guest"]},
                "tags": {"type": "array", "items": {"type": "string"}},
                "nickname": {"type": "string"},
            },
            "required": ["name", "age", "role", "tags"],
            "additionalProperties": False,
        }

    def test_valid_input(self, user_schema, valid_user) -> None:
        result = run({**valid_user, "nickname": "Countess"}, user_schema)
        assert result == Ok(User("Ada", 36, Role.ADMIN, ["math", "engines"], "Countess"))

    def test_every_error_in_one_pass(self, user_schema) -> None:
        result = run({"name": "", "age": -3, "role": "owner", "tags": ["ok", 7]}, user_schema)
        assert result == Err(
            [
                ConstraintError(violation=StringTooShort(min_length=1, actual=0), path=["name"]),
                ConstraintError(violation=NumberTooSmall(minimum=0, actual=-3), path=["age"]),
                UnknownVariant(actual="owner", allowed=["admin", "member", "guest"], path=["role"]),
                TypeMismatch(expected="String", found="Int", path=["tags", "1"]),
            ]
        )

    def test_error_report(self, user_schema) -> None:
        result = run({"age": "old", "role": "guest", "tags": []}, user_schema)
        assert isinstance(result, Err)
        assert format_errors(result.errors) == (
            "$: missing required field 'name'\nage: expected Int, found String"
        )


class TestDeepNesting:
    def _schema(self) -> Schema[int]:
        level3 = field("value", integer(), success)
        level2 = field("level3", level3, success)
        level1 = field("level2", level2, success)
        return field("level1", level1, success)

    def test_path_from_root(self) -> None:
        raw = {"level1": {"level2": {"level3": {"value": "deep"}}}}
        assert run(raw, self._schema()) == Err(
            [
                TypeMismatch(
                    expected="Int",
                    found="String",
                    path=["level1", "level2", "level3", "value"],
                )
            ]
        )

    def test_missing_leaf(self) -> None:
        result = run({"level1": {"level2": {"level3": {}}}}, self._schema())
        assert result == Err([MissingField(field="value", path=["level1", "level2", "level3"])])

    def test_valid(self) -> None:
        assert run({"level1": {"level2": {"level3": {"value": 7}}}}, self._schema()) == Ok(7)

    def test_document_nests_objects(self) -> None:
        doc = to_document(self._schema())
        leaf = doc["properties"]["level1"]["properties"]["level2"]["properties"]["level3"]
        assert leaf["properties"]["value"] == {"type": "integer"}
        assert leaf["required"] == ["value"]


class TestOrderSchema:
    def test_decodes_typed_values(self) -> None:
        order = run(valid_order(), build_order_schema()).unwrap()
        assert order.id == std_uuid.UUID(ORDER_ID)
        assert order.placed_at == datetime(2024, 5, 1, 9, 30, tzinfo=UTC)
        assert order.location == (52.52, 13.405)
        assert order.lines == [("widget", 2), ("gadget", 1)]
        assert order.attributes == {"channel": "web"}
        assert order.note is None

    def test_document(self) -> None:
        doc = to_document(build_order_schema())
        assert doc["title"] == "Order"
        props = doc["properties"]
        assert props["version"] == {"const": "v2"}
        assert props["id"] == {"format": "uuid", "type": "string"}
        assert props["placed_at"] == {"format": "date-time", "type": "string"}
        assert props["lines"]["minItems"] == 1
        assert props["lines"]["items"]["prefixItems"] == [{"type": "string"}, {"type": "integer"}]
        assert props["attributes"] == {"type": "object", "additionalProperties": {"type": "string"}}
        assert props["note"] == {"type": "string", "description": "Free-form note"}
        assert "note" not in doc["required"]
        assert json.loads(to_json(build_order_schema())) == doc

    def test_accumulates_across_kinds(self) -> None:
        raw = {
            **valid_order(),
            "version": "v1",
            "id": "not-a-uuid",
            "location": [1.0],
            "lines": [],
            "attributes": {"channel": 3},
            "note": 5,
        }
        result = run(raw, build_order_schema())
        assert result == Err(
            [
                ConstMismatch(expected="'v2'", actual="'v1'", path=["version"]),
                ConstraintError(
                    violation=InvalidFormat(format="uuid", value="not-a-uuid"), path=["id"]
                ),
                TypeMismatch(expected="Tuple[2]", found="Array[1]", path=["location"]),
                ConstraintError(violation=ArrayTooShort(min_items=1, actual=0), path=["lines"]),
                TypeMismatch(expected="String", found="Int", path=["attributes", "channel"]),
                TypeMismatch(expected="String", found="Int", path=["note"]),
            ]
        )

    def test_format_assertion_opt_in(self) -> None:
        raw = {**valid_order(), "customer_email": "nobody"}
        schema = build_order_schema()
        assert run(raw, schema).is_ok
        result = run_with_options(raw, schema, Options(validate_formats=True))
        assert result == Err(
            [
                ConstraintError(
                    violation=InvalidFormat(format="email", value="nobody"),
                    path=["customer_email"],
                )
            ]
        )

    def test_non_object_root(self) -> None:
        assert run([valid_order()], build_order_schema()) == Err(
            [TypeMismatch(expected="Object", found="Array")]
        )


class TestUnionsEndToEnd:
    def test_nullable_union_of_objects(self) -> None:
        point = field("x", integer(), lambda x: field("y", integer(), lambda y: success((x, y))))
        label = field("label", string(), success)
        schema = optional(one_of(point, label))
        assert run(None, schema) == Ok(None)
        assert run({"x": 1, "y": 2}, schema) == Ok((1, 2))
        assert run({"label": "origin"}, schema) == Ok("origin")
        assert run({"z": 0}, schema) == Err([TypeMismatch(expected="OneOf", found="Object")])
        assert to_document(schema)["oneOf"][0] == {"type": "null"}
