"""Post repository protocol."""

from typing import Protocol
from uuid import UUID

from domain.entities.post import Comment, Like, Post


class IPostRepository(Protocol):
    """Repository interface for Post entities and their likes/comments.

    Lookups that take a raw ``str`` identifier raise
    ``MalformedIdentifierError`` when it is not a valid key and return
    ``None`` when no such record exists.
    """

    async def get(self, id: str | UUID) -> Post | None:
        """Get a post with its likes and comments."""
        ...

    async def list_all(self) -> list[Post]:
        """Get all posts, newest first."""
        ...

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        ...

    async def delete(self, id: UUID) -> bool:
        """Delete a post with its likes and comments."""
        ...

    async def add_like(self, post_id: UUID, user_id: UUID) -> bool:
        """Add a like unless the user already has one. Returns True if added."""
        ...

    async def remove_like(self, post_id: UUID, user_id: UUID) -> bool:
        """Remove the user's like if present. Returns True if removed."""
        ...

    async def get_likes(self, post_id: UUID) -> list[Like]:
        """Get the likes of a post, oldest first."""
        ...

    async def get_comment(self, post_id: UUID, comment_id: str | UUID) -> Comment | None:
        """Get a single comment of a post."""
        ...

    async def add_comment(self, post_id: UUID, comment: Comment) -> Comment:
        """Add a comment to a post."""
        ...

    async def delete_comment(self, post_id: UUID, comment_id: UUID) -> bool:
        """Delete a comment from a post."""
        ...

    async def get_comments(self, post_id: UUID) -> list[Comment]:
        """Get the comments of a post, newest first."""
        ...
