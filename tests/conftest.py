"""
Shared test configuration and fixtures.
"""

import os

# config.Settings requires a password; never point tests at a real database
os.environ.setdefault("POSTGRES_PASSWORD", "test-password")
os.environ.setdefault("LOG_FORMAT", "text")

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from fakes import DEFAULT_TAXONOMY


@pytest.fixture
def mock_db_session():
    """Mock database session."""
    session = AsyncMock(spec=AsyncSession)
    return session


@pytest.fixture
def default_taxonomy():
    """Taxonomy where every default category is valid."""
    return dict(DEFAULT_TAXONOMY)
