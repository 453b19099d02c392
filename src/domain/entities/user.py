"""User identity record (owned by the account service, read-only here)."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4


@dataclass
class User:
    """Public identity fields of a registered user."""

    name: str
    id: UUID = field(default_factory=uuid4)
    email: str = ""
    avatar: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
