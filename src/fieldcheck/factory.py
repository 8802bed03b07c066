"""Schema construction from configuration data and files."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Mapping
from numbers import Real
from pathlib import Path
from typing import TYPE_CHECKING, Any

import yaml  # type: ignore[import-untyped]

from .builder import FieldBuilder
from .exceptions import SchemaConfigError, SchemaFileError
from .fields import FieldType

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

FIELD_KEYS = ("name", "type", "required", "min", "max", "pattern", "description")


class SchemaFactory:
    """Factory for creating schemas from configuration.

    Configuration Options:
        name (str): Schema name, used only for logging
        fields (list | dict): Field definitions, either a list of dicts with a
            ``name`` key or a mapping of field name to field definition

    Field Definition Options:
        name (str): Field name
        type (str): Field type (string, number, boolean), default string
        required (bool): Whether field is required (default: False)
        min (number): Minimum length (string) or value (number)
        max (number): Maximum length (string) or value (number)
        pattern (str): Regular expression for string fields
        description (str): Free text, ignored by validation

    Example Configuration:
        name: user_schema
        fields:
          - name: username
            type: string
            required: true
            min: 3
            max: 20
            pattern: "^[a-zA-Z0-9_]+$"
          - name: age
            type: number
            min: 13
            max: 120
    """

    def create(
        self,
        predicates: Mapping[str, Callable[[Any], Any]] | None = None,
        **config: Any,
    ) -> dict[str, FieldBuilder]:
        """Create a schema from configuration.

        Args:
            predicates: Optional custom predicates keyed by field name
            **config: Schema configuration

        Returns:
            Mapping of field name to FieldBuilder, in declaration order

        Raises:
            SchemaConfigError: If a field definition is invalid
        """
        name = config.get("name", "unnamed_schema")
        logger.info(f"Creating schema: {name}")

        schema: dict[str, FieldBuilder] = {}
        for field_name, field_config in self._iter_fields(config.get("fields") or []):
            schema[field_name] = self.create_field(field_name, field_config)

        for field_name, predicate in (predicates or {}).items():
            if field_name not in schema:
                logger.warning(f"Predicate given for unknown field '{field_name}', skipping")
                continue
            if not callable(predicate):
                raise SchemaConfigError("predicate must be callable", field_name=field_name)
            schema[field_name].validate(predicate)

        return schema

    def create_field(self, field_name: str, field_config: Mapping[str, Any]) -> FieldBuilder:
        """Build a single field from its configuration.

        Args:
            field_name: Field name, used in error messages
            field_config: Field configuration

        Returns:
            Configured FieldBuilder

        Raises:
            SchemaConfigError: If the type, bounds or pattern are invalid
        """
        unknown = sorted(set(field_config) - set(FIELD_KEYS))
        if unknown:
            logger.warning(f"Unknown keys for field '{field_name}': {', '.join(unknown)}")

        try:
            field_type = FieldType.parse(field_config.get("type", FieldType.STRING))
        except ValueError as e:
            raise SchemaConfigError(str(e), field_name=field_name) from e

        builder = FieldBuilder(field_type)

        required = field_config.get("required", False)
        if not isinstance(required, bool):
            raise SchemaConfigError("'required' must be a boolean", field_name=field_name)
        if required:
            builder.required()

        for bound in ("min", "max"):
            if field_config.get(bound) is not None:
                value = self._check_bound(field_name, field_type, bound, field_config[bound])
                getattr(builder, bound)(value)

        pattern = field_config.get("pattern")
        if pattern is not None:
            builder.pattern(self._compile_pattern(field_name, pattern))

        return builder

    def _iter_fields(self, fields: Any):
        if isinstance(fields, Mapping):
            for field_name, field_config in fields.items():
                # Shorthand: "age: number"
                if isinstance(field_config, str):
                    field_config = {"type": field_config}
                elif not isinstance(field_config, Mapping):
                    field_config = field_config or {}
                if not isinstance(field_config, Mapping):
                    raise SchemaConfigError(
                        f"definition must be a mapping or type name, got {field_config!r}",
                        field_name=str(field_name),
                    )
                yield str(field_name), field_config
            return

        for field_config in fields:
            field_name = field_config.get("name") if isinstance(field_config, Mapping) else None
            if not field_name:
                logger.warning("Field configuration missing 'name', skipping")
                continue
            yield field_name, field_config

    def _check_bound(self, field_name: str, field_type: FieldType, bound: str, value: Any) -> Any:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise SchemaConfigError(f"'{bound}' must be a number, got {value!r}", field_name=field_name)
        if field_type is FieldType.STRING and (value < 0 or not float(value).is_integer()):
            raise SchemaConfigError(
                f"'{bound}' must be a non-negative integer length, got {value!r}",
                field_name=field_name,
            )
        if field_type is FieldType.STRING:
            return int(value)
        return value

    def _compile_pattern(self, field_name: str, pattern: Any) -> re.Pattern[str]:
        if not isinstance(pattern, str):
            raise SchemaConfigError(f"'pattern' must be a string, got {pattern!r}", field_name=field_name)
        try:
            return re.compile(pattern)
        except re.error as e:
            raise SchemaConfigError(
                f"Invalid regex pattern {pattern!r}: {e}", field_name=field_name
            ) from e


def load_schema(
    path: str | Path,
    predicates: Mapping[str, Callable[[Any], Any]] | None = None,
) -> dict[str, FieldBuilder]:
    """Load a schema from a YAML or JSON file.

    Args:
        path: Path to a ``.yaml``, ``.yml`` or ``.json`` file
        predicates: Optional custom predicates keyed by field name

    Returns:
        Mapping of field name to FieldBuilder

    Raises:
        SchemaFileError: If the file is missing, unreadable or not a mapping
        SchemaConfigError: If a field definition is invalid
    """
    path_obj = Path(path)
    if not path_obj.exists():
        raise SchemaFileError(str(path_obj), "file not found")

    suffix = path_obj.suffix.lower()
    try:
        with open(path_obj) as f:
            if suffix in [".yaml", ".yml"]:
                data = yaml.safe_load(f) or {}
            elif suffix == ".json":
                data = json.load(f)
            else:
                raise SchemaFileError(str(path_obj), f"unsupported file format: {suffix}")
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise SchemaFileError(str(path_obj), f"failed to parse: {e}") from e

    if not isinstance(data, Mapping):
        raise SchemaFileError(str(path_obj), "top level must be a mapping")

    logger.debug("Loaded schema configuration from %s", path_obj)
    config = {str(key): value for key, value in data.items() if key != "predicates"}
    return schema_factory.create(predicates=predicates, **config)


schema_factory = SchemaFactory()


__all__ = ["SchemaFactory", "schema_factory", "load_schema"]
