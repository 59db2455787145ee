"""Test fixtures for scoring tests."""

from tests.fixtures.generators import random_page, random_weights
from tests.fixtures.pages import (
    PAGE_URL,
    VALID_LLMS_TXT,
    VALID_META_DESCRIPTION,
    VALID_TITLE,
    make_extracted,
    make_page,
    make_site_context,
)

__all__ = [
    # Factories
    "PAGE_URL",
    "VALID_LLMS_TXT",
    "VALID_META_DESCRIPTION",
    "VALID_TITLE",
    "make_extracted",
    "make_page",
    "make_site_context",
    # Seeded generation
    "random_page",
    "random_weights",
]
