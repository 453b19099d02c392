"""Pydantic schemas for Post API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from domain.entities.post import Comment, Like, Post


class PostCreate(BaseModel):
    """Schema for creating a Post."""

    text: str = ""


class CommentCreate(BaseModel):
    """Schema for commenting on a Post."""

    text: str = ""


class LikeResponse(BaseModel):
    """Schema for a like entry."""

    model_config = ConfigDict(from_attributes=True)

    user_id: UUID


class CommentResponse(BaseModel):
    """Schema for a comment."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    text: str
    name: str
    avatar: str | None = None
    created_at: datetime


class PostResponse(BaseModel):
    """Schema for Post response."""

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "user_id": "456e4567-e89b-12d3-a456-426614174000",
                "text": "Hello, world",
                "name": "Jane Doe",
                "avatar": "//www.gravatar.com/avatar/abc",
                "created_at": "2026-01-28T10:00:00",
                "likes": [],
                "comments": [],
            }
        },
    )

    id: UUID
    user_id: UUID
    text: str
    name: str
    avatar: str | None = None
    created_at: datetime
    likes: list[LikeResponse] = []
    comments: list[CommentResponse] = []

    @classmethod
    def from_entity(cls, post: Post) -> "PostResponse":
        return cls.model_validate(post)


class PostListResponse(BaseModel):
    """Schema for list of Posts."""

    data: list[PostResponse]


class PostDetailResponse(BaseModel):
    """Schema for single Post."""

    data: PostResponse


class LikeListResponse(BaseModel):
    """Schema for a post's likes after a like/unlike."""

    data: list[LikeResponse]

    @classmethod
    def from_entities(cls, likes: list[Like]) -> "LikeListResponse":
        return cls(data=[LikeResponse.model_validate(like) for like in likes])


class CommentListResponse(BaseModel):
    """Schema for a post's comments, newest first."""

    data: list[CommentResponse]

    @classmethod
    def from_entities(cls, comments: list[Comment]) -> "CommentListResponse":
        return cls(data=[CommentResponse.model_validate(c) for c in comments])
