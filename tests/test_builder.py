"""Tests for the fluent field builder and field definitions."""

import dataclasses
import re

import pytest

from fieldcheck import (
    BooleanFieldDefinition,
    FieldBuilder,
    FieldType,
    NumberFieldDefinition,
    StringFieldDefinition,
    boolean,
    boolean_field,
    number,
    number_field,
    string,
    string_field,
)


class TestConstructors:
    """Test the type constructors."""

    @pytest.mark.parametrize(
        "constructor,field_type,definition_cls",
        [
            (string_field, FieldType.STRING, StringFieldDefinition),
            (number_field, FieldType.NUMBER, NumberFieldDefinition),
            (boolean_field, FieldType.BOOLEAN, BooleanFieldDefinition),
        ],
    )
    def test_new_builder_has_no_constraints(self, constructor, field_type, definition_cls):
        """Test that a new builder carries only its type."""
        builder = constructor()
        definition = builder.finalize()

        assert builder.field_type is field_type
        assert isinstance(definition, definition_cls)
        assert definition.field_type is field_type
        assert definition.required is False
        assert definition.predicate is None

    def test_short_names(self):
        """Test the short DSL aliases."""
        assert string is string_field
        assert number is number_field
        assert boolean is boolean_field

    def test_constructors_return_new_builders(self):
        """Test that each call creates an independent builder."""
        first = string().required()
        second = string()
        assert first is not second
        assert second.finalize().required is False

    def test_type_from_name(self):
        """Test constructing a builder from a type name."""
        assert FieldBuilder("Number").field_type is FieldType.NUMBER
        with pytest.raises(ValueError, match="Invalid field type"):
            FieldBuilder("date")


class TestChaining:
    """Test the fluent API."""

    def test_methods_return_same_builder(self):
        """Test every constraint method returns self."""
        builder = string()
        assert builder.required() is builder
        assert builder.validate(bool) is builder
        assert builder.min(1) is builder
        assert builder.max(5) is builder
        assert builder.pattern(r"\w+") is builder

    def test_string_constraints(self):
        """Test min/max map to length bounds on strings."""
        definition = string().min(2).max(20).pattern(r"^\w+$").required().finalize()

        assert definition == StringFieldDefinition(
            required=True,
            pattern=re.compile(r"^\w+$"),
            min_length=2,
            max_length=20,
        )

    def test_number_constraints(self):
        """Test min/max map to value bounds on numbers."""
        definition = number().min(18).max(99).finalize()

        assert definition.min == 18
        assert definition.max == 99
        assert definition.required is False

    def test_required_is_idempotent(self):
        """Test calling required() twice."""
        assert boolean().required().required().finalize().required is True

    def test_validate_overwrites_predicate(self):
        """Test that the last predicate wins."""
        def first(value):
            return True

        def second(value):
            return False

        assert string().validate(first).validate(second).finalize().predicate is second

    def test_later_bound_overwrites(self):
        """Test that setting a bound twice keeps the last value."""
        assert number().min(1).min(5).finalize().min == 5


class TestIncompatibleConstraints:
    """Test that constraints for other types are silently ignored."""

    def test_bounds_on_boolean(self):
        """Test min/max on a boolean field."""
        definition = boolean().min(1).max(2).finalize()
        assert definition == BooleanFieldDefinition()
        assert not hasattr(definition, "min")

    def test_pattern_on_number(self):
        """Test pattern on a number field."""
        definition = number().pattern(r"\d+").finalize()
        assert definition == NumberFieldDefinition()

    def test_pattern_on_boolean(self):
        """Test pattern on a boolean field."""
        assert boolean().pattern("x").finalize() == BooleanFieldDefinition()


class TestFinalize:
    """Test definition snapshots."""

    def test_finalize_is_idempotent(self):
        """Test that repeated finalize calls give equal definitions."""
        builder = string().min(2).max(5).pattern("a").validate(bool).required()
        assert builder.finalize() == builder.finalize()
        assert builder.build() == builder.finalize()

    def test_definition_is_immutable(self):
        """Test that definitions are frozen."""
        definition = number().min(1).finalize()
        with pytest.raises(dataclasses.FrozenInstanceError):
            definition.min = 10

    def test_snapshot_not_affected_by_later_changes(self):
        """Test that a definition does not follow later builder mutations."""
        builder = number().min(1)
        snapshot = builder.finalize()
        builder.min(10).required()

        assert snapshot.min == 1
        assert snapshot.required is False
        assert builder.finalize().min == 10

    def test_to_dict(self):
        """Test the plain-data description of definitions."""
        assert string().min(2).pattern(r"^a").required().finalize().to_dict() == {
            "type": "string",
            "required": True,
            "has_predicate": False,
            "pattern": "^a",
            "min_length": 2,
        }
        assert number().max(9).validate(bool).finalize().to_dict() == {
            "type": "number",
            "required": False,
            "has_predicate": True,
            "max": 9,
        }
        assert boolean().finalize().to_dict() == {
            "type": "boolean",
            "required": False,
            "has_predicate": False,
        }

    def test_repr(self):
        """Test the builder repr shows type and constraints."""
        text = repr(number().min(3))
        assert "number" in text
        assert "'min': 3" in text
