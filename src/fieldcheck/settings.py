"""Validator settings and environment overrides."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidatorSettings:
    """Settings controlling how ``validate_object`` evaluates a schema.

    Attributes:
        skip_missing_optional: If True (default), an absent field that is not
            required is skipped entirely. If False, an absent optional field
            still goes through the type check and therefore fails it.
        log_failures: If True, each failed validation is logged at DEBUG level.

    Environment variable format:
        FIELDCHECK_<SETTING>, e.g. FIELDCHECK_SKIP_MISSING_OPTIONAL=false
    """

    skip_missing_optional: bool = True
    log_failures: bool = True

    ENV_PREFIX = "FIELDCHECK_"

    @classmethod
    def setting_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ValidatorSettings:
        """Create settings from a dictionary.

        Args:
            data: Mapping of setting name to value

        Returns:
            ValidatorSettings instance

        Raises:
            ConfigurationError: If the mapping names an unknown setting or a
                value is not a boolean
        """
        known = cls.setting_names()
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigurationError(
                f"Unknown validator settings: {', '.join(unknown)} "
                f"(valid settings: {', '.join(known)})",
                context={"unknown": unknown},
            )
        values = {}
        for name, value in data.items():
            if isinstance(value, str):
                value = _parse_bool(name, value)
            elif not isinstance(value, bool):
                raise ConfigurationError(
                    f"Setting '{name}' must be a boolean, got {type(value).__name__}",
                    context={"setting": name, "value": value},
                )
            values[name] = value
        return cls(**values)

    @classmethod
    def from_env(
        cls,
        prefix: str | None = None,
        environ: Mapping[str, str] | None = None,
        base: ValidatorSettings | None = None,
    ) -> ValidatorSettings:
        """Create settings from environment variables.

        Only variables that start with the prefix and name a known setting
        are read; anything else is left alone.

        Args:
            prefix: Environment variable prefix (default: FIELDCHECK_)
            environ: Environment mapping to read (default: ``os.environ``)
            base: Settings to override (default: the built-in defaults)

        Returns:
            ValidatorSettings instance with overrides applied
        """
        prefix = prefix or cls.ENV_PREFIX
        environ = os.environ if environ is None else environ
        known = set(cls.setting_names())

        overrides = {}
        for key, value in environ.items():
            if not key.startswith(prefix):
                continue
            name = key[len(prefix):].lower()
            if name not in known:
                logger.debug("Ignoring unrecognized environment variable %s", key)
                continue
            overrides[name] = _parse_bool(key, value)

        return replace(base or cls(), **overrides)


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0"):
        return False
    raise ConfigurationError(
        f"Invalid boolean value for {name}: {value!r}",
        context={"setting": name, "value": value},
    )


__all__ = ["ValidatorSettings"]
