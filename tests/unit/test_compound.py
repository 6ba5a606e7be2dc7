"""Tests for arrays, tuples, dicts, nullables, enums and unions."""

from __future__ import annotations

import pytest

from duoschema import (
    Err,
    Ok,
    TypeMismatch,
    UnknownVariant,
    any_of,
    array,
    boolean,
    dict_,
    field,
    integer,
    map_,
    min_length,
    one_of,
    optional,
    run,
    string,
    success,
    tuple_,
)
from duoschema.definition.nodes import (
    AnyOfNode,
    ArrayNode,
    DictNode,
    EnumNode,
    NullableNode,
    OneOfNode,
    StringNode,
    TupleNode,
)
from tests.conftest import Role, role_schema


class TestArray:
    def test_decodes_list(self) -> None:
        assert run([1, 2, 3], array(integer())) == Ok([1, 2, 3])

    def test_accepts_tuple_input(self) -> None:
        assert run(("a", "b"), array(string())) == Ok(["a", "b"])

    def test_item_errors_prefixed_with_index(self) -> None:
        result = run([1, "two", 3, None], array(integer()))
        assert result == Err(
            [
                TypeMismatch(expected="Int", found="String", path=["1"]),
                TypeMismatch(expected="Int", found="Null", path=["3"]),
            ]
        )

    def test_non_array(self) -> None:
        value, errors = array(integer()).decode({"0": 1})
        assert value == []
        assert errors == [TypeMismatch(expected="Array", found="Object")]

    def test_string_is_not_an_array(self) -> None:
        _, errors = array(string()).decode("abc")
        assert errors == [TypeMismatch(expected="Array", found="String")]

    def test_nested_array_paths(self) -> None:
        _, errors = array(array(integer())).decode([[1], [2, "x"]])
        assert errors == [TypeMismatch(expected="Int", found="String", path=["1", "1"])]

    def test_definition(self) -> None:
        assert array(string()).definition == ArrayNode(items=StringNode())


class TestTuple:
    def _pair(self):
        return tuple_(string(), integer())

    def test_decodes_pair(self) -> None:
        assert run(["hello", 42], self._pair()) == Ok(("hello", 42))

    @pytest.mark.parametrize(
        ("value", "length"),
        [(["hello"], 1), (["hello", 42, True], 3), ([], 0)],
    )
    def test_wrong_length_is_single_type_error(self, value: list, length: int) -> None:
        decoded, errors = self._pair().decode(value)
        assert decoded == ("", 0)
        assert errors == [TypeMismatch(expected="Tuple[2]", found=f"Array[{length}]")]

    def test_position_error_uses_index_path(self) -> None:
        result = run(["hello", "world"], self._pair())
        assert result == Err([TypeMismatch(expected="Int", found="String", path=["1"])])

    def test_non_sequence(self) -> None:
        _, errors = self._pair().decode("hello")
        assert errors == [TypeMismatch(expected="Tuple[2]", found="String")]

    @pytest.mark.parametrize("arity", [2, 3, 4, 5, 6, 7])
    def test_arbitrary_arity(self, arity: int) -> None:
        schema = tuple_(*[integer()] * arity)
        assert run(list(range(arity)), schema) == Ok(tuple(range(arity)))
        _, errors = schema.decode([0] * (arity + 1))
        assert errors == [TypeMismatch(expected=f"Tuple[{arity}]", found=f"Array[{arity + 1}]")]

    def test_requires_items(self) -> None:
        with pytest.raises(ValueError):
            tuple_()

    def test_definition(self) -> None:
        definition = self._pair().definition
        assert isinstance(definition, TupleNode)
        assert len(definition.items) == 2


class TestDict:
    def test_decodes_values(self) -> None:
        assert run({"a": 1, "b": 2}, dict_(integer())) == Ok({"a": 1, "b": 2})

    def test_value_errors_prefixed_with_key(self) -> None:
        result = run({"a": 1, "b": "x"}, dict_(integer()))
        assert result == Err([TypeMismatch(expected="Int", found="String", path=["b"])])

    def test_non_mapping(self) -> None:
        value, errors = dict_(integer()).decode([("a", 1)])
        assert value == {}
        assert errors == [TypeMismatch(expected="Object", found="Array")]

    def test_definition(self) -> None:
        assert dict_(string()).definition == DictNode(values=StringNode())


class TestFreshZeros:
    def test_array_zero_is_new_each_time(self) -> None:
        schema = array(string())
        schema.zero.append("leak")
        assert schema.zero == []
        assert schema.zero is not schema.zero

    def test_dict_zero_is_new_each_time(self) -> None:
        schema = dict_(integer())
        schema.zero["leak"] = 1
        assert schema.zero == {}

    def test_missing_field_value_can_be_mutated_safely(self) -> None:
        schema = field("tags", array(string()), success)
        first, errors = schema.decode({})
        assert errors
        first.append("leak")
        second, _ = schema.decode({})
        assert second == []
        assert schema.zero == []

    def test_tuple_zero_holds_fresh_containers(self) -> None:
        schema = tuple_(array(integer()), dict_(integer()))
        value, _ = schema.decode("not a tuple")
        value[0].append(1)
        assert schema.zero == ([], {})
        assert schema.decode(None)[0] == ([], {})


class TestOptional:
    def test_null_is_none(self) -> None:
        assert run(None, optional(string())) == Ok(None)

    def test_value_passes_through(self) -> None:
        assert run("x", optional(string())) == Ok("x")

    def test_inner_errors_reported(self) -> None:
        result = run(3, optional(min_length(string(), 2)))
        assert result == Err([TypeMismatch(expected="String", found="Int")])

    def test_definition_and_zero(self) -> None:
        schema = optional(string())
        assert schema.definition == NullableNode(inner=StringNode())
        assert schema.zero is None


class TestEnum:
    def test_known_literal(self) -> None:
        assert run("member", role_schema()) == Ok(Role.MEMBER)

    def test_unknown_literal(self) -> None:
        result = run("superuser", role_schema())
        assert result == Err(
            [UnknownVariant(actual="superuser", allowed=["admin", "member", "guest"], path=[])]
        )

    def test_unknown_literal_falls_back_to_first_value(self) -> None:
        value, _ = role_schema().decode("superuser")
        assert value is Role.ADMIN

    def test_non_string(self) -> None:
        _, errors = role_schema().decode(1)
        assert errors == [TypeMismatch(expected="String", found="Int")]

    def test_match_is_case_sensitive(self) -> None:
        _, errors = role_schema().decode("Admin")
        assert len(errors) == 1

    def test_definition(self) -> None:
        assert role_schema().definition == EnumNode(values=("admin", "member", "guest"))


class TestUnions:
    def _variants(self):
        return (
            map_(integer(), lambda n: ("int", n)),
            map_(string(), lambda s: ("str", s)),
        )

    @pytest.mark.parametrize("combinator", [one_of, any_of])
    def test_first_matching_variant_wins(self, combinator) -> None:
        schema = combinator(*self._variants())
        assert run(5, schema) == Ok(("int", 5))
        assert run("5", schema) == Ok(("str", "5"))

    def test_no_match_labels_differ(self) -> None:
        one, errors_one = one_of(*self._variants()).decode(True)
        any_, errors_any = any_of(*self._variants()).decode(True)
        assert errors_one == [TypeMismatch(expected="OneOf", found="Bool")]
        assert errors_any == [TypeMismatch(expected="AnyOf", found="Bool")]
        assert one == any_ == ("int", 0)

    def test_partial_success_is_not_merged(self) -> None:
        schema = one_of(min_length(string(), 5), string())
        assert run("abc", schema) == Ok("abc")

    def test_definitions(self) -> None:
        assert isinstance(one_of(string(), boolean()).definition, OneOfNode)
        assert isinstance(any_of(string(), boolean()).definition, AnyOfNode)
        assert len(any_of(string(), boolean()).definition.variants) == 2
