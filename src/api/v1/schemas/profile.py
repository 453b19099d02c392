"""Pydantic schemas for Profile API."""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from domain.entities.profile import ProfileWithUser, SocialLinks


class ProfileUpsert(BaseModel):
    """Schema for creating or updating the caller's profile.

    ``skills`` is a comma-separated list, e.g. ``"python, sql, docker"``.
    """

    status: str = ""
    skills: str = ""
    company: str | None = None
    location: str | None = None
    website: str | None = None
    bio: str | None = None
    github_username: str | None = Field(
        default=None,
        validation_alias=AliasChoices("githubUserName", "githubusername", "github_username"),
    )
    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    instagram: str | None = None
    linkedin: str | None = None

    def social_links(self) -> SocialLinks:
        return SocialLinks(
            youtube=self.youtube,
            twitter=self.twitter,
            facebook=self.facebook,
            instagram=self.instagram,
            linkedin=self.linkedin,
        )


class ProfileUserResponse(BaseModel):
    """Public identity fields of the profile owner."""

    id: UUID
    name: str | None = None
    avatar: str | None = None


class ProfileResponse(BaseModel):
    """Schema for Profile response."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "789e4567-e89b-12d3-a456-426614174000",
                "user": {
                    "id": "456e4567-e89b-12d3-a456-426614174000",
                    "name": "Jane Doe",
                    "avatar": "//www.gravatar.com/avatar/abc",
                },
                "status": "Developer",
                "skills": ["python", "sql"],
                "social": {"twitter": "https://twitter.com/jane"},
                "created_at": "2026-01-28T10:00:00",
            }
        },
    )

    id: UUID
    user: ProfileUserResponse
    company: str | None = None
    location: str | None = None
    website: str | None = None
    bio: str | None = None
    status: str
    github_username: str | None = None
    skills: list[str]
    social: dict[str, str]
    created_at: datetime

    @classmethod
    def from_entity(cls, item: ProfileWithUser) -> "ProfileResponse":
        profile = item.profile
        return cls(
            id=profile.id,
            user=ProfileUserResponse(id=profile.user_id, name=item.name, avatar=item.avatar),
            company=profile.company,
            location=profile.location,
            website=profile.website,
            bio=profile.bio,
            status=profile.status,
            github_username=profile.github_username,
            skills=profile.skills,
            social=profile.social.as_dict(),
            created_at=profile.created_at,
        )


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse
