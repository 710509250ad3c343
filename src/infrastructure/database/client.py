"""MongoDB client construction."""

from typing import Any

from pymongo import AsyncMongoClient

from core.config import Settings, settings


def create_mongo_client(config: Settings = settings) -> AsyncMongoClient[dict[str, Any]]:
    """Create an async MongoDB client.

    Connects on first use. The server selection timeout bounds the startup ping.
    """
    return AsyncMongoClient(
        config.mongo_url,
        serverSelectionTimeoutMS=config.mongo_timeout_ms,
        tz_aware=True,
        connect=False,
    )
