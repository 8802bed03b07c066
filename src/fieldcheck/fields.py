"""Field types and immutable field definitions.

A ``FieldBuilder`` accumulates constraints while a schema is being declared;
``FieldBuilder.finalize()`` snapshots them into one of the frozen definition
classes below. The validator dispatches on the concrete definition class, so
each type only ever sees the constraints that apply to it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from re import Pattern
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


class FieldType(Enum):
    """Enumeration of the primitive types a field can declare.

    The values double as the type names used in error messages and in
    schema configuration files.

    Attributes:
        STRING: Text values (``str``)
        NUMBER: Real numbers (``int``, ``float``, ``Decimal``, ``Fraction``), never ``bool``
        BOOLEAN: ``True``/``False``
    """

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"

    @classmethod
    def parse(cls, name: FieldType | str) -> FieldType:
        """Resolve a type from an enum member or a case-insensitive name.

        Args:
            name: FieldType member or type name such as ``"string"``

        Returns:
            Matching FieldType

        Raises:
            ValueError: If the name is not a known type
        """
        if isinstance(name, FieldType):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError as e:
            valid = ", ".join(t.value for t in cls)
            raise ValueError(f"Invalid field type: {name!r} (valid types: {valid})") from e


@dataclass(frozen=True)
class FieldDefinition(ABC):
    """Base for the finalized, read-only view of a field's constraints."""

    required: bool = False
    predicate: Callable[[Any], Any] | None = None

    @property
    @abstractmethod
    def field_type(self) -> FieldType:
        """Type tag the validator dispatches on."""

    def to_dict(self) -> dict[str, Any]:
        """Describe this definition as plain data.

        The predicate itself is not serializable, so only its presence is
        reported.

        Returns:
            Dictionary with the type name, flags and any constraints that are set
        """
        data: dict[str, Any] = {
            "type": self.field_type.value,
            "required": self.required,
            "has_predicate": self.predicate is not None,
        }
        data.update(self._constraints())
        return data

    def _constraints(self) -> dict[str, Any]:
        return {}


@dataclass(frozen=True)
class StringFieldDefinition(FieldDefinition):
    """String field: optional regex pattern and length bounds."""

    pattern: Pattern[str] | None = None
    min_length: int | None = None
    max_length: int | None = None

    @property
    def field_type(self) -> FieldType:
        return FieldType.STRING

    def _constraints(self) -> dict[str, Any]:
        constraints: dict[str, Any] = {}
        if self.pattern is not None:
            constraints["pattern"] = self.pattern.pattern
        if self.min_length is not None:
            constraints["min_length"] = self.min_length
        if self.max_length is not None:
            constraints["max_length"] = self.max_length
        return constraints


@dataclass(frozen=True)
class NumberFieldDefinition(FieldDefinition):
    """Number field: optional inclusive value bounds."""

    min: Any = None
    max: Any = None

    @property
    def field_type(self) -> FieldType:
        return FieldType.NUMBER

    def _constraints(self) -> dict[str, Any]:
        constraints: dict[str, Any] = {}
        if self.min is not None:
            constraints["min"] = self.min
        if self.max is not None:
            constraints["max"] = self.max
        return constraints


@dataclass(frozen=True)
class BooleanFieldDefinition(FieldDefinition):
    """Boolean field: no constraints beyond required and predicate."""

    @property
    def field_type(self) -> FieldType:
        return FieldType.BOOLEAN


__all__ = [
    "FieldType",
    "FieldDefinition",
    "StringFieldDefinition",
    "NumberFieldDefinition",
    "BooleanFieldDefinition",
]
