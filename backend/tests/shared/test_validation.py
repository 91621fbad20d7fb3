"""Tests for shared/validation.py."""

from pydantic import BaseModel, Field

from shared.validation import (
    ValidationResult,
    describe_error,
    format_errors,
    validate_payload,
)


class Item(BaseModel):
    title: str = Field(..., min_length=1, max_length=10)
    quantity: int = Field(..., ge=0)


class TestValidationResult:
    def test_ok_without_errors(self):
        assert ValidationResult(data=None).ok is True

    def test_not_ok_with_errors(self):
        result = ValidationResult(errors={"title": ["The title field is required."]})
        assert result.ok is False


class TestValidatePayload:
    def test_valid_payload(self):
        result = validate_payload(Item, {"title": "Pen", "quantity": 2})
        assert result.ok
        assert result.data == Item(title="Pen", quantity=2)

    def test_none_is_empty_object(self):
        """A missing body reports every required field."""
        result = validate_payload(Item, None)
        assert not result.ok
        assert result.errors == {
            "title": ["The title field is required."],
            "quantity": ["The quantity field is required."],
        }

    def test_non_object_payload(self):
        result = validate_payload(Item, ["Pen", 2])
        assert result.errors == {"body": ["The body must be a JSON object."]}
        assert result.data is None

    def test_empty_string_is_required(self):
        result = validate_payload(Item, {"title": "", "quantity": 1})
        assert result.errors == {"title": ["The title field is required."]}

    def test_too_long(self):
        result = validate_payload(Item, {"title": "x" * 11, "quantity": 1})
        assert result.errors == {
            "title": ["The title field must not be greater than 10 characters."]
        }

    def test_below_minimum(self):
        result = validate_payload(Item, {"title": "Pen", "quantity": -1})
        assert result.errors == {"quantity": ["The quantity field must be at least 0."]}

    def test_wrong_type(self):
        result = validate_payload(Item, {"title": "Pen", "quantity": "many"})
        assert result.errors == {"quantity": ["The quantity field must be an integer."]}


class TestFormatErrors:
    def test_strips_location_prefix(self):
        errors = [{"type": "int_parsing", "loc": ("path", "product_id"), "msg": "", "input": "abc"}]
        assert format_errors(errors) == {
            "product_id": ["The product id field must be an integer."]
        }

    def test_invalid_json_maps_to_body(self):
        errors = [{"type": "json_invalid", "loc": ("body", 1), "msg": "JSON decode error", "input": {}}]
        assert format_errors(errors) == {"body": ["The body must be valid JSON."]}

    def test_groups_messages_per_field(self):
        errors = [
            {"type": "missing", "loc": ("body", "name"), "msg": "", "input": {}},
            {"type": "string_type", "loc": ("body", "name"), "msg": "", "input": 5},
        ]
        assert format_errors(errors) == {
            "name": ["The name field is required.", "The name field must be a string."]
        }


class TestDescribeError:
    def test_falls_back_to_pydantic_message(self):
        error = {"type": "something_new", "msg": "Value is odd", "input": 3}
        assert describe_error("quantity", error) == "Value is odd"

    def test_null_input_is_required(self):
        error = {"type": "string_type", "msg": "", "input": None}
        assert describe_error("name", error) == "The name field is required."
