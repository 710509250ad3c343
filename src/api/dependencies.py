"""Dependency injection factories for the API."""

from fastapi import Depends, Request

from domain.repositories.profile_repository import IProfileStore
from domain.services.profile_service import ProfileService


def get_profile_store(request: Request) -> IProfileStore:
    """Get the store the application was constructed with."""
    return request.app.state.profile_store  # type: ignore[no-any-return]


def get_profile_service(
    store: IProfileStore = Depends(get_profile_store),
) -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(store)
