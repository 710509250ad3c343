"""Profile store protocol."""

from typing import Protocol

from domain.entities.profile import Profile


class IProfileStore(Protocol):
    """Store interface for the single Profile document."""

    @property
    def is_connected(self) -> bool:
        """Whether the startup connectivity check succeeded."""
        ...

    async def connect(self) -> bool:
        """Check connectivity once and record the outcome."""
        ...

    async def close(self) -> None:
        """Release the underlying connection."""
        ...

    async def find_profile(self) -> Profile | None:
        """Get the stored profile, or None if none has been saved."""
        ...

    async def upsert_profile(self, profile: Profile) -> bool:
        """Write the profile; return True if an existing record was overwritten."""
        ...
