"""Profile service layer with business logic."""

from collections.abc import Callable
from datetime import datetime
from typing import Optional
from uuid import UUID

import structlog

from core.exceptions import (
    MalformedIdentifierError,
    ProfileNotFoundError,
    ValidationFailedError,
)
from domain.entities.profile import Profile, ProfileWithUser, SocialLinks, parse_skills
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

# Optional scalar fields that an upsert overwrites only when provided.
_OPTIONAL_FIELDS = ("company", "location", "website", "bio", "github_username")


class ProfileService:
    """Service layer for Profile business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_mine(self, user_id: UUID) -> ProfileWithUser:
        """Get the requesting user's own profile."""
        async with self._uow_factory() as uow:
            result = await uow.profiles.get_with_user(user_id)
            if not result:
                raise ProfileNotFoundError(str(user_id))
            return result

    async def list_all(self) -> list[ProfileWithUser]:
        """Get every profile with its owner's public fields."""
        async with self._uow_factory() as uow:
            return await uow.profiles.list_with_users()  # type: ignore[no-any-return]

    async def get_by_user_id(self, user_id: str | UUID) -> ProfileWithUser:
        """Get a profile by its owner's user ID."""
        async with self._uow_factory() as uow:
            try:
                result = await uow.profiles.get_with_user(user_id)
            except MalformedIdentifierError:
                logger.info("malformed_user_id", user_id=str(user_id))
                result = None
            if not result:
                raise ProfileNotFoundError(str(user_id))
            return result

    async def upsert(
        self,
        user_id: UUID,
        status: str,
        skills: str,
        company: Optional[str] = None,
        location: Optional[str] = None,
        website: Optional[str] = None,
        bio: Optional[str] = None,
        github_username: Optional[str] = None,
        social: Optional[SocialLinks] = None,
    ) -> ProfileWithUser:
        """Create the user's profile, or overwrite the provided fields of it.

        ``skills`` is a comma-separated string. Optional fields left empty
        keep their stored value, and social links are merged one by one.
        """
        if not status or not status.strip():
            raise ValidationFailedError("status", "Status is required")
        skill_list = parse_skills(skills or "")
        if not skill_list:
            raise ValidationFailedError("skills", "Skills is required")

        provided = {
            "company": company,
            "location": location,
            "website": website,
            "bio": bio,
            "github_username": github_username,
        }

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user(user_id)

            if profile:
                profile.status = status
                profile.skills = skill_list
                for name in _OPTIONAL_FIELDS:
                    if provided[name]:
                        setattr(profile, name, provided[name])
                if social:
                    profile.social.merge(social)
                profile.updated_at = datetime.utcnow()
                await uow.profiles.update(profile)
                logger.info("profile_updated", user_id=str(user_id))
            else:
                profile = Profile(
                    user_id=user_id,
                    status=status,
                    skills=skill_list,
                    social=social or SocialLinks(),
                    **{name: value for name, value in provided.items() if value},
                )
                await uow.profiles.create(profile)
                logger.info("profile_created", user_id=str(user_id))

            await uow.commit()

            result = await uow.profiles.get_with_user(user_id)
            return result or ProfileWithUser(profile=profile)
