"""Shared fixtures for mimemap tests."""

import pytest

from src.mimemap import BuiltInTable


@pytest.fixture(autouse=True)
def reset_builtin_table():
    """Start and end every test without a cached built-in table."""
    BuiltInTable.reset()
    yield
    BuiltInTable.reset()


@pytest.fixture
def sample_mapping():
    """Small table with a shared MIME type."""
    return {
        "mimes": {
            "json": ["application/json"],
            "jpeg": ["image/jpeg"],
            "jpg": ["image/jpeg"],
        },
        "extensions": {
            "application/json": ["json"],
            "image/jpeg": ["jpeg", "jpg"],
        },
    }
