"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from dataclasses import replace
from pathlib import Path

# Disable rate limiting in tests
os.environ["RATE_LIMIT_ENABLED"] = "false"

import pytest
from httpx import ASGITransport, AsyncClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from core.exceptions import DatabaseUnavailableError
from domain.entities.profile import Profile


class FakeProfileStore:
    """In-memory stand-in for the MongoDB profile store."""

    def __init__(self, connected: bool = True) -> None:
        self.profile: Profile | None = None
        self.connected_on_start = connected
        self._connected = connected
        self.write_count = 0
        self.closed = False
        self.fail_writes = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    async def connect(self) -> bool:
        self._connected = self.connected_on_start
        return self._connected

    async def close(self) -> None:
        self.closed = True
        self._connected = False

    async def find_profile(self) -> Profile | None:
        return replace(self.profile) if self.profile else None

    async def upsert_profile(self, profile: Profile) -> bool:
        if self.fail_writes:
            raise DatabaseUnavailableError()
        self.write_count += 1
        existed = self.profile is not None
        self.profile = replace(profile)
        return existed


@pytest.fixture
def store() -> FakeProfileStore:
    """A connected, empty store."""
    return FakeProfileStore()


@pytest.fixture
def offline_store() -> FakeProfileStore:
    """A store whose startup connectivity check failed."""
    return FakeProfileStore(connected=False)


@pytest.fixture
async def client(store: FakeProfileStore) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client backed by the in-memory store."""
    from main import create_app

    app = create_app(store=store)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def offline_client(
    offline_store: FakeProfileStore,
) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client running in offline mode."""
    from main import create_app

    app = create_app(store=offline_store)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
