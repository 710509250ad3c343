"""MongoDB implementation of the Profile store."""

from typing import Any

import structlog
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from core.exceptions import DatabaseUnavailableError
from domain.entities.profile import PROFILE_USER_ID, Profile

logger = structlog.get_logger()

REQUIRED_FIELDS = ("name", "email", "updatedAt")


class MongoProfileStore:
    """MongoDB implementation of IProfileStore."""

    def __init__(
        self,
        client: AsyncMongoClient[dict[str, Any]],
        database: str,
        collection: str,
    ) -> None:
        self._client = client
        self._collection: AsyncCollection[dict[str, Any]] = client[database][collection]
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    async def connect(self) -> bool:
        """Ping the server once; failures switch the store to offline mode."""
        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            logger.warning("database_ping_failed", error=str(e))
            self._connected = False
        else:
            self._connected = True
        return self._connected

    async def close(self) -> None:
        """Close the client and its connection pool."""
        await self._client.close()
        self._connected = False

    async def find_profile(self) -> Profile | None:
        """Get the profile stored under the fixed key."""
        try:
            document = await self._collection.find_one(
                {"userId": PROFILE_USER_ID},
                projection={"_id": False},
            )
        except PyMongoError as e:
            logger.error("profile_read_failed", error=str(e))
            raise DatabaseUnavailableError() from e
        return self._to_entity(document) if document else None

    async def upsert_profile(self, profile: Profile) -> bool:
        """Create or overwrite the profile under the fixed key."""
        try:
            result = await self._collection.update_one(
                {"userId": PROFILE_USER_ID},
                {"$set": self._to_document(profile)},
                upsert=True,
            )
        except PyMongoError as e:
            logger.error("profile_write_failed", error=str(e))
            raise DatabaseUnavailableError() from e
        return result.matched_count > 0

    def _to_entity(self, document: dict[str, Any]) -> Profile:
        """Convert a stored document to a domain entity."""
        missing = [key for key in REQUIRED_FIELDS if not document.get(key)]
        if missing:
            logger.error("profile_document_malformed", missing_fields=missing)
            raise DatabaseUnavailableError("Stored profile is unreadable")

        return Profile(
            user_id=document.get("userId", PROFILE_USER_ID),
            name=document["name"],
            email=document["email"],
            interests=document.get("interests") or "",
            updated_at=document["updatedAt"],
        )

    def _to_document(self, entity: Profile) -> dict[str, Any]:
        """Convert a domain entity to its stored document shape."""
        return {
            "userId": PROFILE_USER_ID,
            "name": entity.name,
            "email": entity.email,
            "interests": entity.interests,
            "updatedAt": entity.updated_at,
        }
