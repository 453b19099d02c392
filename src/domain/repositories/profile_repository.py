"""Profile repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.profile import Profile, ProfileWithUser


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def get_by_user(self, user_id: UUID) -> Profile | None:
        """Get the profile owned by a user."""
        ...

    async def get_with_user(self, user_id: str | UUID) -> ProfileWithUser | None:
        """Get a user's profile joined with their public identity fields.

        Raises ``MalformedIdentifierError`` for an invalid ``user_id``.
        """
        ...

    async def list_with_users(self) -> list[ProfileWithUser]:
        """Get all profiles joined with their owners' public fields."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Replace the stored fields of an existing profile."""
        ...
