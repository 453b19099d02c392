"""Post service layer with business logic."""

from collections.abc import Callable
from uuid import UUID

import structlog

from core.exceptions import (
    AlreadyLikedError,
    CommentNotFoundError,
    MalformedIdentifierError,
    NotCommentAuthorError,
    NotLikedError,
    NotPostAuthorError,
    PostNotFoundError,
    UserNotFoundError,
    ValidationFailedError,
)
from domain.entities.post import Comment, Like, Post
from domain.entities.user import User
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class PostService:
    """Service layer for Post business logic.

    Author name and avatar are copied into posts and comments at write
    time. Later changes to the user record are not propagated.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(self, user_id: UUID, text: str) -> Post:
        """Create a post authored by ``user_id``."""
        _require_text(text)
        async with self._uow_factory() as uow:
            author = await self._get_user(uow, user_id)
            post = Post(
                user_id=user_id,
                text=text,
                name=author.name,
                avatar=author.avatar,
            )
            created = await uow.posts.create(post)
            await uow.commit()
            logger.info("post_created", post_id=str(created.id), user_id=str(user_id))
            return created

    async def list_all(self) -> list[Post]:
        """Get all posts, newest first."""
        async with self._uow_factory() as uow:
            return await uow.posts.list_all()  # type: ignore[no-any-return]

    async def get_by_id(self, post_id: str | UUID) -> Post:
        """Get a single post."""
        async with self._uow_factory() as uow:
            return await self._get_post(uow, post_id)

    async def delete(self, post_id: str | UUID, user_id: UUID) -> None:
        """Delete a post. Only its author may do so."""
        async with self._uow_factory() as uow:
            post = await self._get_post(uow, post_id)
            if post.user_id != user_id:
                raise NotPostAuthorError(str(post.id))

            await uow.posts.delete(post.id)
            await uow.commit()
            logger.info("post_deleted", post_id=str(post.id), user_id=str(user_id))

    async def like(self, post_id: str | UUID, user_id: UUID) -> list[Like]:
        """Like a post. Returns the updated likes."""
        async with self._uow_factory() as uow:
            post = await self._get_post(uow, post_id)
            if not await uow.posts.add_like(post.id, user_id):
                raise AlreadyLikedError(str(post.id))

            likes = await uow.posts.get_likes(post.id)
            await uow.commit()
            return likes  # type: ignore[no-any-return]

    async def unlike(self, post_id: str | UUID, user_id: UUID) -> list[Like]:
        """Remove the user's like from a post. Returns the updated likes."""
        async with self._uow_factory() as uow:
            post = await self._get_post(uow, post_id)
            if not await uow.posts.remove_like(post.id, user_id):
                raise NotLikedError(str(post.id))

            likes = await uow.posts.get_likes(post.id)
            await uow.commit()
            return likes  # type: ignore[no-any-return]

    async def add_comment(
        self, post_id: str | UUID, user_id: UUID, text: str
    ) -> list[Comment]:
        """Comment on a post. Returns the updated comments, newest first."""
        _require_text(text)
        async with self._uow_factory() as uow:
            post = await self._get_post(uow, post_id)
            author = await self._get_user(uow, user_id)

            comment = Comment(
                user_id=user_id,
                text=text,
                name=author.name,
                avatar=author.avatar,
            )
            await uow.posts.add_comment(post.id, comment)
            comments = await uow.posts.get_comments(post.id)
            await uow.commit()
            return comments  # type: ignore[no-any-return]

    async def delete_comment(
        self, post_id: str | UUID, comment_id: str | UUID, user_id: UUID
    ) -> list[Comment]:
        """Delete a comment. Only its author may do so."""
        async with self._uow_factory() as uow:
            post = await self._get_post(uow, post_id)

            try:
                comment = await uow.posts.get_comment(post.id, comment_id)
            except MalformedIdentifierError:
                logger.info("malformed_comment_id", comment_id=str(comment_id))
                comment = None
            if not comment:
                raise CommentNotFoundError(str(comment_id))

            if comment.user_id != user_id:
                raise NotCommentAuthorError(str(comment.id))

            await uow.posts.delete_comment(post.id, comment.id)
            comments = await uow.posts.get_comments(post.id)
            await uow.commit()
            return comments  # type: ignore[no-any-return]

    async def _get_post(self, uow: IUnitOfWork, post_id: str | UUID) -> Post:
        """Load a post, treating malformed ids as missing."""
        try:
            post = await uow.posts.get(post_id)
        except MalformedIdentifierError:
            logger.info("malformed_post_id", post_id=str(post_id))
            post = None
        if not post:
            raise PostNotFoundError(str(post_id))
        return post

    async def _get_user(self, uow: IUnitOfWork, user_id: UUID) -> User:
        user = await uow.users.get(user_id)
        if not user:
            raise UserNotFoundError(str(user_id))
        return user


def _require_text(text: str | None) -> None:
    if not text or not text.strip():
        raise ValidationFailedError("text", "Text is required")
