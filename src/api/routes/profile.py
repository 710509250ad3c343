"""Profile API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_profile_service
from api.schemas.common import ErrorResponse
from api.schemas.profile import ProfileResponse, ProfileUpdate, ProfileUpdateResponse
from core.rate_limit import limiter
from domain.services.profile_service import ProfileService

router = APIRouter(tags=["profile"])


@router.get(
    "/get-profile",
    response_model=ProfileResponse,
    summary="Get the profile",
    responses={
        404: {"model": ErrorResponse, "description": "No profile saved yet"},
        503: {"model": ErrorResponse, "description": "Database not available"},
    },
)
@limiter.limit("30/minute")  # type: ignore[untyped-decorator]
async def get_profile(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    """Return the stored profile in full."""
    profile = await service.get_profile()
    return ProfileResponse.from_entity(profile)


@router.post(
    "/update-profile",
    response_model=ProfileUpdateResponse,
    summary="Create or update the profile",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid name or email"},
        503: {"model": ErrorResponse, "description": "Database not available"},
    },
)
@limiter.limit("10/minute")  # type: ignore[untyped-decorator]
async def update_profile(
    request: Request,
    body: ProfileUpdate,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileUpdateResponse:
    """Validate and save the profile. `modified` is true when a profile already existed."""
    result = await service.update_profile(
        name=body.name,
        email=body.email,
        interests=body.interests,
    )
    return ProfileUpdateResponse(
        success=True,
        data=ProfileResponse.from_entity(result.profile),
        modified=result.modified,
    )
