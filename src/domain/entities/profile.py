"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

# Single-user deployment: every read and write targets this key.
PROFILE_USER_ID = "default-user"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Profile:
    """Domain entity for the one stored user profile."""

    name: str
    email: str
    interests: str = ""
    user_id: str = PROFILE_USER_ID
    updated_at: datetime = field(default_factory=utcnow)

    def __post_init__(self) -> None:
        """Never carry a null interests value."""
        if self.interests is None:
            self.interests = ""


@dataclass(frozen=True, slots=True)
class ProfileUpdateResult:
    """Read-only value object: the saved Profile and whether it pre-existed."""

    profile: Profile
    modified: bool
