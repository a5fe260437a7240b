"""Schema validation for request and response payloads."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from wafeqpy.exceptions import WafeqValidationError

T = TypeVar("T", bound=BaseModel)


class Constraint(str, Enum):
    """Kind of constraint a field violated."""

    REQUIRED = "required"
    TYPE = "type"
    FORMAT = "format"
    RANGE = "range"
    ARRAY_LENGTH = "array_length"
    ENUM = "enum"


# pydantic error types mapped to constraint kinds, anything else is TYPE
_CONSTRAINTS = {
    "missing": Constraint.REQUIRED,
    "string_too_short": Constraint.REQUIRED,
    "string_pattern_mismatch": Constraint.FORMAT,
    "value_error": Constraint.FORMAT,
    "greater_than": Constraint.RANGE,
    "greater_than_equal": Constraint.RANGE,
    "less_than": Constraint.RANGE,
    "less_than_equal": Constraint.RANGE,
    "too_short": Constraint.ARRAY_LENGTH,
    "too_long": Constraint.ARRAY_LENGTH,
    "enum": Constraint.ENUM,
    "literal_error": Constraint.ENUM,
}


class FieldError(BaseModel):
    """A single field-level validation failure."""

    path: str
    constraint: Constraint
    message: str

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: {self.message}"


class ValidationResult(BaseModel, Generic[T]):
    """Outcome of validating a payload against a schema.

    On success ``value`` holds the typed payload and ``errors`` is empty.
    """

    value: T | None = None
    errors: list[FieldError] = []

    @property
    def ok(self) -> bool:
        return not self.errors


def field_errors(error: ValidationError) -> list[FieldError]:
    """Convert a pydantic ValidationError into field errors."""
    return [
        FieldError(
            path=".".join(str(part) for part in detail["loc"]),
            constraint=_CONSTRAINTS.get(detail["type"], Constraint.TYPE),
            message=detail["msg"],
        )
        for detail in error.errors()
    ]


def describe(errors: Sequence[FieldError]) -> str:
    """Render field errors as one line."""
    return "; ".join(str(error) for error in errors)


def validate(schema: type[T], value: Any) -> ValidationResult[T]:
    """Validate a value against a schema.

    The input is never modified. Mappings are parsed into a new model and
    model instances are re-validated.

    Args:
        schema: Pydantic model class describing the payload
        value: Mapping or model instance to check

    Returns:
        ValidationResult with either the typed value or the field errors
    """
    try:
        model = schema.model_validate(value)
    except ValidationError as e:
        return ValidationResult[schema](errors=field_errors(e))  # type: ignore[valid-type]
    # model is already validated
    return ValidationResult[schema].model_construct(value=model)  # type: ignore[valid-type]


def require_valid(schema: type[T], value: Any) -> T:
    """Validate a value and return the typed model.

    Raises:
        WafeqValidationError: If the value does not match the schema
    """
    result = validate(schema, value)
    if result.value is None:
        raise WafeqValidationError(
            f"{schema.__name__}: {describe(result.errors)}", result.errors
        )
    return result.value
