"""Kinds of validation failure and the messages reported for them."""

from __future__ import annotations

from enum import Enum
from typing import Any


class Violation(Enum):
    """A violated constraint, valued by its message template.

    Templates use ``{field}`` for the field name plus whatever parameters
    the constraint needs.
    """

    MISSING_REQUIRED = "'{field}' is required."
    TYPE_MISMATCH = "'{field}' must be of type '{expected}'."
    PATTERN_MISMATCH = "'{field}' does not match the pattern."
    LENGTH_TOO_SHORT = "'{field}' must be at least {limit} characters."
    LENGTH_TOO_LONG = "'{field}' must be at most {limit} characters."
    VALUE_TOO_SMALL = "'{field}' must be at least {limit}."
    VALUE_TOO_LARGE = "'{field}' must be at most {limit}."
    CUSTOM_VALIDATION_FAILED = "Custom validation for '{field}' did not pass."
    CUSTOM_VALIDATION_ERROR = "Custom validation for '{field}' raised an error: {error}"
    INVALID_INPUT = "Input must be a mapping, got {actual}."

    def format(self, field: str | None = None, **params: Any) -> str:
        """Render the error message for this violation.

        Args:
            field: Name of the offending field
            **params: Template parameters (``expected``, ``limit``, ``error``, ``actual``)

        Returns:
            Human-readable error message
        """
        if "limit" in params:
            params["limit"] = _format_limit(params["limit"])
        return self.value.format(field=field, **params)


def _format_limit(limit: Any) -> Any:
    # 18.0 reads as 18
    if isinstance(limit, float) and limit.is_integer():
        return int(limit)
    return limit


__all__ = ["Violation"]
