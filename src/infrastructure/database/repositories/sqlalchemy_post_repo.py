"""SQLAlchemy implementation of Post repository."""

from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities.post import Comment, Like, Post
from infrastructure.database.identifiers import to_uuid
from infrastructure.database.models import PostCommentModel, PostLikeModel, PostModel


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository.

    Likes and comments live in their own tables, so liking, unliking and
    commenting are single statements rather than a rewrite of the post.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str | UUID) -> Post | None:
        """Get a post with its likes and comments."""
        post_id = to_uuid(id)
        stmt = (
            select(PostModel)
            .where(PostModel.id == post_id)
            .options(selectinload(PostModel.likes), selectinload(PostModel.comments))
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_all(self) -> list[Post]:
        """Get all posts, newest first."""
        stmt = (
            select(PostModel)
            .options(selectinload(PostModel.likes), selectinload(PostModel.comments))
            .order_by(PostModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        model = PostModel(
            id=post.id,
            user_id=post.user_id,
            text=post.text,
            name=post.name,
            avatar=post.avatar,
            created_at=post.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            created_at=model.created_at,
        )

    async def delete(self, id: UUID) -> bool:
        """Delete a post together with its likes and comments."""
        await self._session.execute(delete(PostLikeModel).where(PostLikeModel.post_id == id))
        await self._session.execute(
            delete(PostCommentModel).where(PostCommentModel.post_id == id)
        )
        result = await self._session.execute(delete(PostModel).where(PostModel.id == id))
        await self._session.flush()
        return bool(result.rowcount)

    async def add_like(self, post_id: UUID, user_id: UUID) -> bool:
        """Insert a like unless the user already has one on this post.

        The unique (post_id, user_id) key decides between concurrent likes;
        the losing insert affects no rows.
        """
        stmt = (
            self._insert(PostLikeModel)
            .values(post_id=post_id, user_id=user_id, created_at=datetime.utcnow())
            .on_conflict_do_nothing(index_elements=["post_id", "user_id"])
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    async def remove_like(self, post_id: UUID, user_id: UUID) -> bool:
        """Delete the user's like if there is one."""
        stmt = delete(PostLikeModel).where(
            PostLikeModel.post_id == post_id,
            PostLikeModel.user_id == user_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    async def get_likes(self, post_id: UUID) -> list[Like]:
        """Get the likes of a post, oldest first."""
        stmt = (
            select(PostLikeModel.user_id)
            .where(PostLikeModel.post_id == post_id)
            .order_by(PostLikeModel.id)
        )
        result = await self._session.execute(stmt)
        return [Like(user_id=user_id) for user_id in result.scalars()]

    async def get_comment(self, post_id: UUID, comment_id: str | UUID) -> Comment | None:
        """Get a single comment of a post."""
        stmt = select(PostCommentModel).where(
            PostCommentModel.post_id == post_id,
            PostCommentModel.id == to_uuid(comment_id),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._comment_to_entity(model) if model else None

    async def add_comment(self, post_id: UUID, comment: Comment) -> Comment:
        """Add a comment to a post."""
        model = PostCommentModel(
            id=comment.id,
            post_id=post_id,
            user_id=comment.user_id,
            text=comment.text,
            name=comment.name,
            avatar=comment.avatar,
            created_at=comment.created_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._comment_to_entity(model)

    async def delete_comment(self, post_id: UUID, comment_id: UUID) -> bool:
        """Delete a comment from a post."""
        stmt = delete(PostCommentModel).where(
            PostCommentModel.post_id == post_id,
            PostCommentModel.id == comment_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)

    async def get_comments(self, post_id: UUID) -> list[Comment]:
        """Get the comments of a post, newest first."""
        stmt = (
            select(PostCommentModel)
            .where(PostCommentModel.post_id == post_id)
            .order_by(PostCommentModel.seq.desc())
        )
        result = await self._session.execute(stmt)
        return [self._comment_to_entity(model) for model in result.scalars()]

    def _insert(self, model: type[PostLikeModel]) -> Any:
        """INSERT construct with ON CONFLICT support for the bound dialect."""
        if self._session.get_bind().dialect.name == "sqlite":
            return sqlite.insert(model)
        return postgresql.insert(model)

    def _to_entity(self, model: PostModel) -> Post:
        """Convert ORM model (with loaded likes/comments) to domain entity."""
        return Post(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            created_at=model.created_at,
            likes=[Like(user_id=like.user_id) for like in model.likes],
            comments=[self._comment_to_entity(c) for c in model.comments],
        )

    def _comment_to_entity(self, model: PostCommentModel) -> Comment:
        return Comment(
            id=model.id,
            user_id=model.user_id,
            text=model.text,
            name=model.name,
            avatar=model.avatar,
            created_at=model.created_at,
        )
