"""Exception hierarchy for the fieldcheck package.

Validation of *data* never raises: ``validate_object`` always returns a
``ValidationResult``. The exceptions here cover misuse of the API and
invalid schema configuration.

Example:
    ```python
    from fieldcheck.exceptions import FieldcheckError, SchemaConfigError

    try:
        schema = load_schema("schemas/user.yaml")
    except FieldcheckError as e:
        logger.error(f"Error: {e}")
        if e.context:
            logger.error(f"Context: {e.context}")
    ```
"""

from __future__ import annotations

from typing import Any


class FieldcheckError(Exception):
    """Base exception for the fieldcheck package.

    Attributes:
        context: Dictionary containing contextual information about the error
        details: Alias for context

    Args:
        message: Human-readable error message
        context: Optional dictionary with error context (field names, paths, etc.)
        details: Alternative to context (takes precedence if both are given)
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.context = details or context or {}
        self.details = self.context


class ValidationError(FieldcheckError):
    """Raised when validated data is requested from a failed validation."""

    pass


class ConfigurationError(FieldcheckError):
    """Raised when configuration is invalid or missing."""

    pass


class SchemaValidationError(ValidationError):
    """Raised by ``ValidationResult.unwrap()`` for a failed result."""

    def __init__(self, message: str, field_name: str | None = None):
        self.field_name = field_name
        super().__init__(message, context={"field_name": field_name} if field_name else None)


class SchemaConfigError(ConfigurationError):
    """Raised when a schema configuration cannot be turned into field builders."""

    def __init__(self, message: str, field_name: str | None = None):
        self.field_name = field_name
        if field_name:
            message = f"Field '{field_name}': {message}"
        super().__init__(message, context={"field_name": field_name} if field_name else None)


class SchemaFileError(ConfigurationError):
    """Raised when a schema file is missing, unreadable or of an unsupported format."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Schema file '{path}': {message}", context={"path": path})


__all__ = [
    "FieldcheckError",
    "ValidationError",
    "ConfigurationError",
    "SchemaValidationError",
    "SchemaConfigError",
    "SchemaFileError",
]
