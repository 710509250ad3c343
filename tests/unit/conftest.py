"""Shared fixtures for unit tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_store() -> MagicMock:
    """A connected store whose operations are AsyncMocks."""
    store = MagicMock()
    store.is_connected = True
    store.find_profile = AsyncMock(return_value=None)
    store.upsert_profile = AsyncMock(return_value=False)
    return store
