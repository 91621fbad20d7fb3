"""
Request payload validation helpers.

Payloads are validated against Pydantic models, but failures are returned
as a ValidationResult instead of being raised. Callers check ``result.ok``
before touching storage and send ``result.errors`` back to the client.

Error messages are keyed by field name and phrased so that a client can
tell a missing or malformed field ("is required", "must be an integer")
apart from a value outside the allowed range ("must be at least 0").
"""

from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Optional, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

M = TypeVar("M", bound=BaseModel)

# Location prefixes FastAPI adds to request validation errors
_LOCATION_PREFIXES = {"body", "path", "query", "header"}

_TYPE_MESSAGES = {
    "string_type": "The {field} field must be a string.",
    "int_type": "The {field} field must be an integer.",
    "int_parsing": "The {field} field must be an integer.",
    "int_from_float": "The {field} field must be an integer.",
    "float_type": "The {field} field must be a number.",
    "float_parsing": "The {field} field must be a number.",
    "finite_number": "The {field} field must be a number.",
    "dict_type": "The {field} must be a JSON object.",
    "model_attributes_type": "The {field} must be a JSON object.",
}


@dataclass
class ValidationResult(Generic[M]):
    """Outcome of validating one payload."""

    data: Optional[M] = None
    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_payload(model: type[M], payload: Any) -> ValidationResult[M]:
    """
    Validate a decoded JSON payload against a Pydantic model.

    Args:
        model: Model class describing the accepted fields and rules.
        payload: Decoded request body. ``None`` is treated as an empty object.

    Returns:
        ValidationResult with ``data`` set on success, ``errors`` otherwise.
    """
    if payload is None:
        payload = {}

    if not isinstance(payload, dict):
        return ValidationResult(errors={"body": ["The body must be a JSON object."]})

    try:
        return ValidationResult(data=model.model_validate(payload))
    except PydanticValidationError as e:
        return ValidationResult(errors=format_errors(e.errors()))


def format_errors(errors: Iterable[dict[str, Any]]) -> dict[str, list[str]]:
    """Convert Pydantic error dicts to a field -> messages mapping."""
    formatted: dict[str, list[str]] = {}
    for error in errors:
        if error.get("type") == "json_invalid":
            name = "body"
        else:
            name = _field_name(error.get("loc", ()))
        formatted.setdefault(name, []).append(describe_error(name, error))
    return formatted


def describe_error(name: str, error: dict[str, Any]) -> str:
    """Build a human readable message for a single Pydantic error."""
    label = name.replace("_", " ")
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if error_type == "missing" or error.get("input", "") is None:
        return f"The {label} field is required."

    if error_type == "string_too_short" and ctx.get("min_length") == 1:
        return f"The {label} field is required."

    if error_type == "string_too_long":
        return f"The {label} field must not be greater than {ctx['max_length']} characters."

    if error_type == "greater_than_equal":
        return f"The {label} field must be at least {ctx['ge']}."

    if error_type == "greater_than":
        return f"The {label} field must be greater than {ctx['gt']}."

    if error_type == "json_invalid":
        return "The body must be valid JSON."

    template = _TYPE_MESSAGES.get(error_type)
    if template:
        return template.format(field=label)

    return error.get("msg", f"The {label} field is invalid.")


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "body"
