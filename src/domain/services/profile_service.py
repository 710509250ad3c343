"""Profile service layer with validation and persistence rules."""

from dataclasses import dataclass
from typing import Any

import structlog

from core.exceptions import (
    DatabaseUnavailableError,
    InvalidProfileInputError,
    ProfileNotFoundError,
)
from domain.entities.profile import (
    PROFILE_USER_ID,
    Profile,
    ProfileUpdateResult,
    utcnow,
)
from domain.repositories.profile_repository import IProfileStore

logger = structlog.get_logger()


@dataclass(frozen=True, slots=True)
class ProfileInput:
    """Validated and normalized profile fields."""

    name: str
    email: str
    interests: str


def validate_profile_input(name: Any, email: Any, interests: Any = None) -> ProfileInput:
    """Validate raw profile fields, checking name before email.

    Raises InvalidProfileInputError naming the first failing field.
    """
    if not isinstance(name, str) or not name.strip():
        raise InvalidProfileInputError("name", "Name is required")

    if not isinstance(email, str) or not email.strip() or "@" not in email:
        raise InvalidProfileInputError("email", "A valid email is required")

    if interests is not None and not isinstance(interests, str):
        raise InvalidProfileInputError("interests", "Interests must be text")

    if interests is None or not interests.strip():
        interests = ""

    return ProfileInput(name=name.strip(), email=email.strip(), interests=interests)


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, store: IProfileStore) -> None:
        self._store = store

    async def get_profile(self) -> Profile:
        """Get the stored profile."""
        self._require_connection()

        profile = await self._store.find_profile()
        if profile is None:
            raise ProfileNotFoundError()
        return profile

    async def update_profile(
        self,
        name: Any,
        email: Any,
        interests: Any = None,
    ) -> ProfileUpdateResult:
        """Validate input, then create or overwrite the stored profile."""
        data = validate_profile_input(name, email, interests)
        self._require_connection()

        profile = Profile(
            user_id=PROFILE_USER_ID,
            name=data.name,
            email=data.email,
            interests=data.interests,
            updated_at=utcnow(),
        )
        modified = await self._store.upsert_profile(profile)

        logger.info("profile_updated", user_id=profile.user_id, modified=modified)
        return ProfileUpdateResult(profile=profile, modified=modified)

    def _require_connection(self) -> None:
        """Fail fast in offline mode without touching the store."""
        if not self._store.is_connected:
            raise DatabaseUnavailableError()
