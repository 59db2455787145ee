"""Pytest configuration and fixtures."""

import os
from collections.abc import Generator

import pytest

# Set test environment before any engine code reads settings
os.environ["ENV"] = "test"
os.environ.pop("SCORING_WEIGHTS", None)


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Re-read settings for every test so env overrides do not leak."""
    from readiness.config import get_settings

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
