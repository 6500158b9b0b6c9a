"""Tests for argument validation, attribute classification and sample params."""

from __future__ import annotations

import pytest

from crudgen.errors import InvalidArguments
from crudgen.resource import (
    ResourceDescriptor,
    TypeTag,
    classify,
    params_literal,
    parse_attrs,
    sample_params,
    validate_args,
)


class TestValidateArgs:
    def test_valid_arguments(self) -> None:
        singular, plural, tokens = validate_args(["User", "users", "name:string"])

        assert singular == "User"
        assert plural == "users"
        assert tokens == ["name:string"]

    def test_attributes_are_optional(self) -> None:
        assert validate_args(["User", "users"]) == ("User", "users", [])

    @pytest.mark.parametrize("args", [[], ["User"]])
    def test_too_few_arguments(self, args: list[str]) -> None:
        with pytest.raises(InvalidArguments, match="expects both singular and plural names"):
            validate_args(args)

    @pytest.mark.parametrize("plural", ["name:string", "users:", "a:b:c"])
    def test_plural_with_type_separator(self, plural: str) -> None:
        with pytest.raises(InvalidArguments, match="expects both singular and plural names"):
            validate_args(["User", plural])

    @pytest.mark.parametrize("plural", ["Users", "blogPosts", "Admin.Users"])
    def test_plural_not_snake_case(self, plural: str) -> None:
        with pytest.raises(InvalidArguments, match="snake_case"):
            validate_args(["User", plural])

    @pytest.mark.parametrize("singular", ["1User", "User Name", "Admin..User", ""])
    def test_invalid_singular(self, singular: str) -> None:
        with pytest.raises(InvalidArguments, match="valid module name"):
            validate_args([singular, "users"])

    def test_command_name_appears_in_help(self) -> None:
        with pytest.raises(InvalidArguments, match="crudgen model User users name:string"):
            validate_args([], command="crudgen model")


class TestClassify:
    @pytest.mark.parametrize(
        "token, tag",
        [
            ("name:string", TypeTag.STRING),
            ("age:integer", TypeTag.INTEGER),
            ("price:float", TypeTag.FLOAT),
            ("total:decimal", TypeTag.DECIMAL),
            ("active:boolean", TypeTag.BOOLEAN),
            ("bio:text", TypeTag.TEXT),
            ("born_on:date", TypeTag.DATE),
            ("alarm:time", TypeTag.TIME),
            ("published_at:datetime", TypeTag.DATETIME),
            ("token:uuid", TypeTag.OTHER),
            ("title", TypeTag.OTHER),
        ],
    )
    def test_scalar_types(self, token: str, tag: TypeTag) -> None:
        assert classify(token).type == tag

    def test_missing_type_keeps_string_raw_type(self) -> None:
        attr = classify("title")

        assert attr.name == "title"
        assert attr.raw_type == "string"
        assert attr.subtype is None

    def test_unknown_type_keeps_raw_type(self) -> None:
        assert classify("token:uuid").raw_type == "uuid"

    def test_array_with_subtype(self) -> None:
        attr = classify("tags:array:string")

        assert attr.type == TypeTag.ARRAY
        assert attr.subtype == "string"
        assert attr.is_relational

    def test_array_subtype_defaults_to_string(self) -> None:
        assert classify("tags:array").subtype == "string"

    def test_references_with_table(self) -> None:
        attr = classify("post_id:references:posts")

        assert attr.type == TypeTag.REFERENCES
        assert attr.subtype == "posts"
        assert attr.assoc_name == "post"

    def test_reference_alias_and_derived_table(self) -> None:
        attr = classify("category_id:reference")

        assert attr.type == TypeTag.REFERENCES
        assert attr.subtype == "categories"

    def test_empty_name(self) -> None:
        with pytest.raises(InvalidArguments, match="to have a name"):
            classify(":string")


def test_parse_attrs_keeps_order() -> None:
    attrs = parse_attrs(["z:string", "a:integer", "m:text"])
    assert [a.name for a in attrs] == ["z", "a", "m"]


def test_descriptor_from_args() -> None:
    resource = ResourceDescriptor.from_args(["User", "users", "name:string", "age:integer"])

    assert resource.singular == "User"
    assert resource.plural == "users"
    assert [(a.name, a.type) for a in resource.attributes] == [
        ("name", TypeTag.STRING),
        ("age", TypeTag.INTEGER),
    ]


class TestSampleParams:
    def test_values_per_type(self) -> None:
        attrs = parse_attrs(["name:string", "age:integer", "price:decimal", "tags:array:string", "token:uuid"])

        assert sample_params(attrs) == {
            "name": '"some content"',
            "age": "42",
            "price": '"120.5"',
            "tags": "[]",
            "token": '"7488a646-e31f-11e4-aace-600308960662"',
        }

    def test_references_are_left_out(self) -> None:
        attrs = parse_attrs(["body:text", "post_id:references:posts"])
        assert list(sample_params(attrs)) == ["body"]

    def test_params_literal(self) -> None:
        assert params_literal({"age": "42", "name": '"some content"'}) == '%{age: 42, name: "some content"}'
        assert params_literal({}) == "%{}"
