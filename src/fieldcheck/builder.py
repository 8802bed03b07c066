"""Fluent field declarations.

Example:
    ```python
    from fieldcheck import boolean, number, string, validate_object

    schema = {
        "name": string().min(2).max(20).required(),
        "age": number().min(18).max(99),
        "is_student": boolean().required(),
    }
    result = validate_object(schema, {"name": "John", "age": 25, "is_student": True})
    ```
"""

from __future__ import annotations

import logging
import re
from re import Pattern
from typing import TYPE_CHECKING, Any

from .fields import (
    BooleanFieldDefinition,
    FieldDefinition,
    FieldType,
    NumberFieldDefinition,
    StringFieldDefinition,
)

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class FieldBuilder:
    """Accumulates the constraints for one field of a declared type.

    Every constraint method mutates the builder and returns it, so calls can
    be chained. Constraints that do not apply to the declared type (``min``
    on a boolean, ``pattern`` on a number) are accepted and ignored.
    """

    def __init__(self, field_type: FieldType | str):
        """Initialize the builder.

        Args:
            field_type: Declared type, fixed for the lifetime of the builder
        """
        self._field_type = FieldType.parse(field_type)
        self._required = False
        self._predicate: Callable[[Any], Any] | None = None
        self._min: Any = None
        self._max: Any = None
        self._pattern: Pattern[str] | None = None

    @property
    def field_type(self) -> FieldType:
        return self._field_type

    def required(self) -> FieldBuilder:
        """Mark the field as mandatory (fluent API).

        Returns:
            Self for chaining
        """
        self._required = True
        return self

    def validate(self, predicate: Callable[[Any], Any]) -> FieldBuilder:
        """Attach a custom predicate, replacing any previous one (fluent API).

        Args:
            predicate: Callable receiving the field value; a falsy return fails validation

        Returns:
            Self for chaining
        """
        self._predicate = predicate
        return self

    def min(self, value: Any) -> FieldBuilder:
        """Set the minimum length (strings) or minimum value (numbers).

        Args:
            value: Inclusive lower bound

        Returns:
            Self for chaining
        """
        if self._supports_bounds("min"):
            self._min = value
        return self

    def max(self, value: Any) -> FieldBuilder:
        """Set the maximum length (strings) or maximum value (numbers).

        Args:
            value: Inclusive upper bound

        Returns:
            Self for chaining
        """
        if self._supports_bounds("max"):
            self._max = value
        return self

    def pattern(self, regex: str | Pattern[str]) -> FieldBuilder:
        """Require string values to match a regular expression.

        The pattern is searched for anywhere in the value; anchor it with
        ``^``/``$`` to match the whole string.

        Args:
            regex: Pattern source or compiled pattern

        Returns:
            Self for chaining
        """
        if self._field_type is not FieldType.STRING:
            logger.debug("Ignoring pattern constraint on %s field", self._field_type.value)
            return self
        self._pattern = re.compile(regex) if isinstance(regex, str) else regex
        return self

    def finalize(self) -> FieldDefinition:
        """Snapshot the accumulated constraints into an immutable definition.

        Reads the builder state without changing it, so repeated calls
        return equal definitions.

        Returns:
            Definition matching the declared type
        """
        if self._field_type is FieldType.STRING:
            return StringFieldDefinition(
                required=self._required,
                predicate=self._predicate,
                pattern=self._pattern,
                min_length=self._min,
                max_length=self._max,
            )
        if self._field_type is FieldType.NUMBER:
            return NumberFieldDefinition(
                required=self._required,
                predicate=self._predicate,
                min=self._min,
                max=self._max,
            )
        return BooleanFieldDefinition(required=self._required, predicate=self._predicate)

    build = finalize

    def _supports_bounds(self, name: str) -> bool:
        if self._field_type is FieldType.BOOLEAN:
            logger.debug("Ignoring %s constraint on boolean field", name)
            return False
        return True

    def __repr__(self) -> str:
        return f"FieldBuilder({self._field_type.value!r}, {self.finalize().to_dict()!r})"


def string_field() -> FieldBuilder:
    """Create a builder for a string field."""
    return FieldBuilder(FieldType.STRING)


def number_field() -> FieldBuilder:
    """Create a builder for a number field."""
    return FieldBuilder(FieldType.NUMBER)


def boolean_field() -> FieldBuilder:
    """Create a builder for a boolean field."""
    return FieldBuilder(FieldType.BOOLEAN)


# Short names for schema declarations
string = string_field
number = number_field
boolean = boolean_field


__all__ = [
    "FieldBuilder",
    "string_field",
    "number_field",
    "boolean_field",
    "string",
    "number",
    "boolean",
]
