"""Pytest configuration for fieldcheck tests."""

import sys
from pathlib import Path

import pytest

# Add the package source to path for testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from fieldcheck import boolean, number, string  # noqa: E402

EMAIL_PATTERN = r"^[a-zA-Z0-9._-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,4}$"


@pytest.fixture
def person_schema():
    """Schema with one field of each type."""
    return {
        "name": string().min(2).max(20).required(),
        "age": number().min(18).max(99),
        "isStudent": boolean().required(),
    }


@pytest.fixture
def account_schema():
    """Schema relying on custom predicates."""
    return {
        "username": string().validate(lambda value: len(value) >= 5),
        "password": string().min(8),
        "hasSpecialChar": boolean().validate(lambda value: value),
    }


@pytest.fixture
def email_schema():
    """Schema with a single pattern-constrained field."""
    return {"email": string().pattern(EMAIL_PATTERN)}


@pytest.fixture(autouse=True)
def _clear_fieldcheck_env(monkeypatch):
    """Keep FIELDCHECK_* variables from the outer environment out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("FIELDCHECK_"):
            monkeypatch.delenv(key, raising=False)
    yield
