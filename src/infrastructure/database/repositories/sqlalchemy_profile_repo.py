"""SQLAlchemy implementation of Profile repository."""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.profile import Profile, ProfileWithUser, SocialLinks
from infrastructure.database.identifiers import to_uuid
from infrastructure.database.models import ProfileModel, UserModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_with_user(self, user_id: str | UUID) -> ProfileWithUser | None:
        """Get a user's profile joined with their name and avatar."""
        stmt = self._joined_select().where(ProfileModel.user_id == to_uuid(user_id))
        result = await self._session.execute(stmt)
        row = result.one_or_none()
        return self._to_joined(*row) if row else None

    async def list_with_users(self) -> list[ProfileWithUser]:
        """Get all profiles joined with their owners' name and avatar."""
        stmt = self._joined_select().order_by(ProfileModel.created_at)
        result = await self._session.execute(stmt)
        return [self._to_joined(*row) for row in result]

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = ProfileModel(
            id=profile.id,
            user_id=profile.user_id,
            created_at=profile.created_at,
            **self._columns(profile),
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Update an existing profile."""
        stmt = select(ProfileModel).where(ProfileModel.id == profile.id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            raise ValueError(f"Profile {profile.id} not found")

        for column, value in self._columns(profile).items():
            setattr(model, column, value)
        model.updated_at = profile.updated_at

        await self._session.flush()
        return self._to_entity(model)

    def _joined_select(self) -> Any:
        return select(ProfileModel, UserModel.name, UserModel.avatar).outerjoin(
            UserModel, UserModel.id == ProfileModel.user_id
        )

    def _columns(self, entity: Profile) -> dict[str, Any]:
        """Mutable columns of a profile."""
        return {
            "company": entity.company,
            "location": entity.location,
            "website": entity.website,
            "bio": entity.bio,
            "status": entity.status,
            "github_username": entity.github_username,
            "skills": list(entity.skills),
            "social": entity.social.as_dict(),
        }

    def _to_joined(
        self, model: ProfileModel, name: str | None, avatar: str | None
    ) -> ProfileWithUser:
        return ProfileWithUser(profile=self._to_entity(model), name=name, avatar=avatar)

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            company=model.company,
            location=model.location,
            website=model.website,
            bio=model.bio,
            status=model.status,
            github_username=model.github_username,
            skills=list(model.skills or []),
            social=SocialLinks(**(model.social or {})),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
