"""Object validation against a schema of field declarations.

Each check is a small function returning the error message for the first
constraint it finds violated, or None. Evaluation stops at the first message
across the whole schema.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from decimal import Decimal
from numbers import Real
from typing import Any, Union

from .builder import FieldBuilder
from .fields import (
    FieldDefinition,
    FieldType,
    NumberFieldDefinition,
    StringFieldDefinition,
)
from .result import ValidationResult
from .settings import ValidatorSettings
from .violations import Violation

logger = logging.getLogger(__name__)

Schema = Mapping[str, Union[FieldBuilder, FieldDefinition]]


class _Missing:
    """Marker for a key that is absent from the input."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def validate_object(
    schema: Schema,
    obj: Any,
    settings: ValidatorSettings | None = None,
) -> ValidationResult:
    """Validate an object against a schema.

    Fields are checked in schema order. Within a field the order is:
    required, type, type-specific constraints (pattern, then min length,
    then max length for strings; min, then max for numbers), custom
    predicate. The first violation ends the evaluation.

    Args:
        schema: Mapping of field name to FieldBuilder (or finalized FieldDefinition)
        obj: Candidate object, normally a mapping
        settings: Evaluation settings (default: ``ValidatorSettings.from_env()``)

    Returns:
        ValidationResult carrying exactly the schema's fields on success, or
        the first error message on failure
    """
    settings = settings or ValidatorSettings.from_env()

    if not isinstance(obj, Mapping):
        return _fail(settings, Violation.INVALID_INPUT.format(actual=type(obj).__name__))

    validated: dict[str, Any] = {}

    for field_name, declaration in schema.items():
        definition = _finalize(declaration)
        value = obj.get(field_name, MISSING)

        error = check_field(field_name, definition, value, settings)
        if error is not None:
            return _fail(settings, error, field_name)

        if value is not MISSING:
            validated[field_name] = value

    return ValidationResult.success(validated)


def validate_many(
    schema: Schema,
    objects: Iterable[Any],
    settings: ValidatorSettings | None = None,
    stop_on_error: bool = False,
) -> list[ValidationResult]:
    """Validate several objects against the same schema.

    Builders are finalized once up front rather than per object.

    Args:
        schema: Mapping of field name to FieldBuilder (or FieldDefinition)
        objects: Objects to validate
        settings: Evaluation settings
        stop_on_error: If True, stop after the first failed object

    Returns:
        One ValidationResult per object validated
    """
    settings = settings or ValidatorSettings.from_env()
    definitions = {name: _finalize(declaration) for name, declaration in schema.items()}
    results = []

    for obj in objects:
        result = validate_object(definitions, obj, settings)
        results.append(result)

        if not result.valid and stop_on_error:
            break

    return results


def check_field(
    field_name: str,
    definition: FieldDefinition,
    value: Any,
    settings: ValidatorSettings | None = None,
) -> str | None:
    """Run every check for one field.

    Args:
        field_name: Name used in error messages
        definition: Finalized field definition
        value: Field value, or ``MISSING`` if the key is absent
        settings: Evaluation settings (default: ``ValidatorSettings.from_env()``)

    Returns:
        Error message for the first violated constraint, or None
    """
    settings = settings or ValidatorSettings.from_env()

    if value is MISSING:
        if definition.required:
            return Violation.MISSING_REQUIRED.format(field_name)
        if settings.skip_missing_optional:
            return None

    if not _matches_type(definition.field_type, value):
        return Violation.TYPE_MISMATCH.format(field_name, expected=definition.field_type.value)

    if isinstance(definition, StringFieldDefinition):
        error = _check_string(field_name, definition, value)
    elif isinstance(definition, NumberFieldDefinition):
        error = _check_number(field_name, definition, value)
    else:
        error = None

    if error is None and definition.predicate is not None:
        error = _check_predicate(field_name, definition.predicate, value)

    return error


def _check_string(field_name: str, definition: StringFieldDefinition, value: str) -> str | None:
    if definition.pattern is not None and definition.pattern.search(value) is None:
        return Violation.PATTERN_MISMATCH.format(field_name)

    if definition.min_length is not None and len(value) < definition.min_length:
        return Violation.LENGTH_TOO_SHORT.format(field_name, limit=definition.min_length)

    if definition.max_length is not None and len(value) > definition.max_length:
        return Violation.LENGTH_TOO_LONG.format(field_name, limit=definition.max_length)

    return None


def _check_number(field_name: str, definition: NumberFieldDefinition, value: Any) -> str | None:
    if _is_nan(value):
        return None

    if definition.min is not None and value < definition.min:
        return Violation.VALUE_TOO_SMALL.format(field_name, limit=definition.min)

    if definition.max is not None and value > definition.max:
        return Violation.VALUE_TOO_LARGE.format(field_name, limit=definition.max)

    return None


def _check_predicate(field_name: str, predicate: Callable[[Any], Any], value: Any) -> str | None:
    try:
        passed = predicate(value)
    except Exception as e:
        logger.warning("Custom validator for '%s' raised %s: %s", field_name, type(e).__name__, e)
        return Violation.CUSTOM_VALIDATION_ERROR.format(field_name, error=e)

    if not passed:
        return Violation.CUSTOM_VALIDATION_FAILED.format(field_name)
    return None


def _is_nan(value: Any) -> bool:
    # NaN has no order, so it passes both bounds
    if isinstance(value, Decimal):
        return value.is_nan()
    return value != value


def _matches_type(field_type: FieldType, value: Any) -> bool:
    if field_type is FieldType.STRING:
        return isinstance(value, str)
    if field_type is FieldType.NUMBER:
        return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)
    return isinstance(value, bool)


def _finalize(declaration: FieldBuilder | FieldDefinition) -> FieldDefinition:
    if isinstance(declaration, FieldDefinition):
        return declaration
    return declaration.finalize()


def _fail(settings: ValidatorSettings, error: str, field_name: str | None = None) -> ValidationResult:
    if settings.log_failures:
        logger.debug("Validation failed: %s", error)
    return ValidationResult.failure(error, field_name=field_name)


__all__ = [
    "MISSING",
    "Schema",
    "check_field",
    "validate_object",
    "validate_many",
]
