"""Declarative object validation.

Declare a schema as a mapping of field name to a fluent field builder,
then check objects against it. Validation reports the first violated
constraint as a human-readable message:

    ```python
    from fieldcheck import boolean, number, string, validate_object

    schema = {
        "name": string().min(2).max(20).required(),
        "age": number().min(18).max(99),
        "is_student": boolean().required(),
    }

    result = validate_object(schema, {"age": 25, "is_student": True})
    result.error  # "'name' is required."
    ```
"""

from .builder import (
    FieldBuilder,
    boolean,
    boolean_field,
    number,
    number_field,
    string,
    string_field,
)
from .exceptions import (
    ConfigurationError,
    FieldcheckError,
    SchemaConfigError,
    SchemaFileError,
    SchemaValidationError,
    ValidationError,
)
from .factory import SchemaFactory, load_schema, schema_factory
from .fields import (
    BooleanFieldDefinition,
    FieldDefinition,
    FieldType,
    NumberFieldDefinition,
    StringFieldDefinition,
)
from .result import ValidationResult
from .settings import ValidatorSettings
from .validator import MISSING, Schema, check_field, validate_many, validate_object
from .violations import Violation

__version__ = "1.0.0"

__all__ = [
    # Version
    "__version__",
    # Builders
    "FieldBuilder",
    "string_field",
    "number_field",
    "boolean_field",
    "string",
    "number",
    "boolean",
    # Definitions
    "FieldType",
    "FieldDefinition",
    "StringFieldDefinition",
    "NumberFieldDefinition",
    "BooleanFieldDefinition",
    # Validation
    "Schema",
    "MISSING",
    "validate_object",
    "validate_many",
    "check_field",
    "ValidationResult",
    "Violation",
    "ValidatorSettings",
    # Configuration
    "SchemaFactory",
    "schema_factory",
    "load_schema",
    # Exceptions
    "FieldcheckError",
    "ValidationError",
    "ConfigurationError",
    "SchemaValidationError",
    "SchemaConfigError",
    "SchemaFileError",
]
