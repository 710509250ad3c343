"""Pydantic schemas for the Profile API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from domain.entities.profile import Profile


class ProfileUpdate(BaseModel):
    """Schema for updating the Profile.

    Fields are untyped here so that type, presence and blank checks all run
    in the service, in field order, with field-specific messages.
    """

    name: Any = None
    email: Any = None
    interests: Any = None


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "userId": "default-user",
                "name": "Ada",
                "email": "ada@example.com",
                "interests": "math",
                "updatedAt": "2026-01-28T10:00:00Z",
            }
        },
    )

    user_id: str
    name: str
    email: str
    interests: str
    updated_at: datetime

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            user_id=profile.user_id,
            name=profile.name,
            email=profile.email,
            interests=profile.interests,
            updated_at=profile.updated_at,
        )


class ProfileUpdateResponse(BaseModel):
    """Schema for the result of a Profile update."""

    success: bool = True
    data: ProfileResponse
    modified: bool
