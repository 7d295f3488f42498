"""Root conftest — shared test configuration."""

import os

import pytest

# Human-readable logs in test output; never read a developer's .env level
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from people_api.services.person_resource import reset_person_resource  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_person_resource():
    """Every test starts with an empty process-wide store."""
    reset_person_resource()
    yield
    reset_person_resource()
