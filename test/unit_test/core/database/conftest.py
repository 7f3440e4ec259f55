"""Fixtures for the persistence-layer tests, backed by the in-memory database."""

from datetime import date

import pytest


@pytest.fixture
def day() -> date:
    return date(2025, 3, 15)
