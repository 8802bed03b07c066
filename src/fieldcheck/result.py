"""Validation result type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .exceptions import SchemaValidationError


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one object against a schema.

    Exactly one branch is populated: a successful result carries the
    accepted ``value`` and no ``error``; a failed result carries the first
    ``error`` message and no value.
    """

    value: dict[str, Any] | None = None
    error: str | None = None
    field_name: str | None = None

    def __post_init__(self) -> None:
        if self.error is not None and self.value is not None:
            raise ValueError("A validation result cannot carry both a value and an error")
        if self.error is None and self.value is None:
            raise ValueError("A validation result needs either a value or an error")

    @property
    def valid(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        """Allow 'if result:' usage to check validity."""
        return self.valid

    def to_dict(self) -> dict[str, Any]:
        """Return ``{"value": ...}`` or ``{"error": ...}``."""
        if self.valid:
            return {"value": self.value}
        return {"error": self.error}

    def unwrap(self) -> dict[str, Any]:
        """Return the accepted value, raising if validation failed.

        Returns:
            The accepted object

        Raises:
            SchemaValidationError: If this result is a failure
        """
        if self.value is None:
            raise SchemaValidationError(str(self.error), field_name=self.field_name)
        return self.value

    @classmethod
    def success(cls, value: dict[str, Any]) -> ValidationResult:
        """Create a successful validation result.

        Args:
            value: The accepted object

        Returns:
            Successful ValidationResult
        """
        return cls(value=value)

    @classmethod
    def failure(cls, error: str, field_name: str | None = None) -> ValidationResult:
        """Create a failed validation result.

        Args:
            error: Message describing the first violated constraint
            field_name: Field the message refers to, if any

        Returns:
            Failed ValidationResult
        """
        return cls(error=error, field_name=field_name)


__all__ = ["ValidationResult"]
