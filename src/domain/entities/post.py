"""Post domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4


@dataclass(frozen=True, slots=True)
class Like:
    """One user's like on a post. At most one per (post, user)."""

    user_id: UUID


@dataclass
class Comment:
    """A comment on a post.

    ``name`` and ``avatar`` are copied from the commenter's user record
    when the comment is written and are not kept in sync afterwards.
    """

    user_id: UUID
    text: str
    name: str
    id: UUID = field(default_factory=uuid4)
    avatar: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class Post:
    """Domain entity for a Post.

    Likes are kept oldest first; comments newest first.
    """

    user_id: UUID
    text: str
    name: str
    id: UUID = field(default_factory=uuid4)
    avatar: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    likes: list[Like] = field(default_factory=list)
    comments: list[Comment] = field(default_factory=list)
