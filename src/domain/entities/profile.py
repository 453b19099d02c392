"""Profile domain entity."""

from dataclasses import dataclass, field, fields
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class SocialLinks:
    """Optional links to the user's social network accounts."""

    youtube: str | None = None
    twitter: str | None = None
    facebook: str | None = None
    instagram: str | None = None
    linkedin: str | None = None

    def as_dict(self) -> dict[str, str]:
        """Only the links that are set."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}

    def merge(self, other: "SocialLinks") -> None:
        """Overwrite each link that is set on ``other``."""
        for f in fields(other):
            value = getattr(other, f.name)
            if value:
                setattr(self, f.name, value)


@dataclass
class Profile:
    """Domain entity for a developer profile. One per user."""

    user_id: UUID
    status: str
    id: UUID = field(default_factory=uuid4)
    company: str | None = None
    location: str | None = None
    website: str | None = None
    bio: str | None = None
    github_username: str | None = None
    skills: list[str] = field(default_factory=list)
    social: SocialLinks = field(default_factory=SocialLinks)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at


@dataclass(frozen=True, slots=True)
class ProfileWithUser:
    """Read-only value object: a Profile bundled with its owner's public fields."""

    profile: Profile
    name: str | None = None
    avatar: str | None = None


def parse_skills(raw: str) -> list[str]:
    """Split a comma-separated skills string into trimmed, non-empty entries."""
    return [skill.strip() for skill in raw.split(",") if skill.strip()]
