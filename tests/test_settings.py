"""Tests for ValidatorSettings."""

import pytest

from fieldcheck import ConfigurationError, ValidatorSettings


class TestValidatorSettings:
    """Test settings construction."""

    def test_defaults(self):
        """Test default settings."""
        settings = ValidatorSettings()
        assert settings.skip_missing_optional is True
        assert settings.log_failures is True

    def test_from_dict(self):
        """Test building settings from a dictionary."""
        settings = ValidatorSettings.from_dict({"skip_missing_optional": False, "log_failures": "no"})
        assert settings.skip_missing_optional is False
        assert settings.log_failures is False

    def test_from_dict_unknown_key(self):
        """Test that unknown settings are rejected with the valid names listed."""
        with pytest.raises(ConfigurationError) as exc_info:
            ValidatorSettings.from_dict({"skip_missing": False})

        message = str(exc_info.value)
        assert "skip_missing" in message
        assert "valid settings" in message
        assert exc_info.value.context == {"unknown": ["skip_missing"]}

    def test_from_dict_non_boolean(self):
        """Test that non-boolean values are rejected."""
        with pytest.raises(ConfigurationError, match="must be a boolean"):
            ValidatorSettings.from_dict({"log_failures": 1})


class TestEnvironmentOverrides:
    """Test FIELDCHECK_* environment variables."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("true", True), ("YES", True), ("1", True), ("false", False), ("No", False), ("0", False)],
    )
    def test_boolean_parsing(self, raw, expected):
        """Test accepted boolean spellings."""
        settings = ValidatorSettings.from_env(environ={"FIELDCHECK_SKIP_MISSING_OPTIONAL": raw})
        assert settings.skip_missing_optional is expected

    def test_reads_os_environ(self, monkeypatch):
        """Test reading the process environment."""
        monkeypatch.setenv("FIELDCHECK_LOG_FAILURES", "false")
        settings = ValidatorSettings.from_env()
        assert settings.log_failures is False
        assert settings.skip_missing_optional is True

    def test_custom_prefix_and_base(self):
        """Test a custom prefix layered over explicit base settings."""
        base = ValidatorSettings(log_failures=False)
        settings = ValidatorSettings.from_env(
            prefix="APP_",
            environ={"APP_SKIP_MISSING_OPTIONAL": "false", "FIELDCHECK_LOG_FAILURES": "true"},
            base=base,
        )
        assert settings.skip_missing_optional is False
        assert settings.log_failures is False

    def test_unrecognized_variables_ignored(self):
        """Test that unrelated variables with the prefix are skipped."""
        settings = ValidatorSettings.from_env(environ={"FIELDCHECK_COLOR": "blue"})
        assert settings == ValidatorSettings()

    def test_invalid_boolean(self):
        """Test that an unparseable value raises."""
        with pytest.raises(ConfigurationError, match="FIELDCHECK_LOG_FAILURES"):
            ValidatorSettings.from_env(environ={"FIELDCHECK_LOG_FAILURES": "maybe"})
