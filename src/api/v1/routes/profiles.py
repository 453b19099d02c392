"""Profile API routes."""

from fastapi import APIRouter, Depends, Request

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_profile_service
from api.v1.schemas.common import NOT_FOUND, UNAUTHORIZED, VALIDATION
from api.v1.schemas.profile import (
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileResponse,
    ProfileUpsert,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.profile_service import ProfileService

router = APIRouter(prefix="/profile", tags=["profiles"])


@router.get(
    "/me",
    response_model=ProfileDetailResponse,
    summary="Get my profile",
    responses={**NOT_FOUND, **UNAUTHORIZED},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_my_profile(
    request: Request,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get the authenticated user's profile."""
    result = await service.get_mine(user.id)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(result))


@router.post(
    "",
    response_model=ProfileDetailResponse,
    summary="Create or update my profile",
    responses={**VALIDATION, **UNAUTHORIZED},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def upsert_profile(
    request: Request,
    body: ProfileUpsert,
    user: CurrentUser,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Create the caller's profile, or overwrite the fields that are sent."""
    result = await service.upsert(
        user_id=user.id,
        status=body.status,
        skills=body.skills,
        company=body.company,
        location=body.location,
        website=body.website,
        bio=body.bio,
        github_username=body.github_username,
        social=body.social_links(),
    )
    return ProfileDetailResponse(data=ProfileResponse.from_entity(result))


@router.get(
    "",
    response_model=ProfileListResponse,
    summary="List all profiles",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_profiles(
    request: Request,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileListResponse:
    """Get every profile. Public."""
    results = await service.list_all()
    return ProfileListResponse(data=[ProfileResponse.from_entity(r) for r in results])


@router.get(
    "/user/{user_id}",
    response_model=ProfileDetailResponse,
    summary="Get a profile by user ID",
    responses={**NOT_FOUND},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_profile_by_user(
    request: Request,
    user_id: str,
    service: ProfileService = Depends(get_profile_service),
) -> ProfileDetailResponse:
    """Get a user's profile. Public."""
    result = await service.get_by_user_id(user_id)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(result))
