"""Post API routes."""

from fastapi import APIRouter, Depends, Request, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_post_service
from api.v1.schemas.common import (
    CONFLICT,
    FORBIDDEN,
    NOT_FOUND,
    VALIDATION,
    MessageResponse,
)
from api.v1.schemas.post import (
    CommentCreate,
    CommentListResponse,
    LikeListResponse,
    PostCreate,
    PostDetailResponse,
    PostListResponse,
    PostResponse,
)
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post(
    "",
    response_model=PostDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a post",
    responses={**VALIDATION},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_post(
    request: Request,
    body: PostCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Create a post. Author name and avatar are copied from the user record."""
    post = await service.create(user_id=user.id, text=body.text)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.get(
    "",
    response_model=PostListResponse,
    summary="List all posts",
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_posts(
    request: Request,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostListResponse:
    """Get all posts, newest first."""
    posts = await service.list_all()
    return PostListResponse(data=[PostResponse.from_entity(post) for post in posts])


@router.get(
    "/{post_id}",
    response_model=PostDetailResponse,
    summary="Get a post",
    responses={**NOT_FOUND},
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> PostDetailResponse:
    """Get a single post with its likes and comments."""
    post = await service.get_by_id(post_id)
    return PostDetailResponse(data=PostResponse.from_entity(post))


@router.delete(
    "/{post_id}",
    response_model=MessageResponse,
    summary="Delete a post",
    responses={**NOT_FOUND, **FORBIDDEN},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    """Delete a post. Only its author may do so."""
    await service.delete(post_id, user.id)
    return MessageResponse(message="Post removed")


@router.put(
    "/like/{post_id}",
    response_model=LikeListResponse,
    summary="Like a post",
    responses={**NOT_FOUND, **CONFLICT},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def like_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> LikeListResponse:
    """Like a post. A user can like a post once."""
    likes = await service.like(post_id, user.id)
    return LikeListResponse.from_entities(likes)


@router.put(
    "/unlike/{post_id}",
    response_model=LikeListResponse,
    summary="Unlike a post",
    responses={**NOT_FOUND, **CONFLICT},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def unlike_post(
    request: Request,
    post_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> LikeListResponse:
    """Remove the caller's like from a post."""
    likes = await service.unlike(post_id, user.id)
    return LikeListResponse.from_entities(likes)


@router.put(
    "/comment/{post_id}",
    response_model=CommentListResponse,
    summary="Comment on a post",
    responses={**NOT_FOUND, **VALIDATION},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_comment(
    request: Request,
    post_id: str,
    body: CommentCreate,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> CommentListResponse:
    """Add a comment. Returns all comments of the post, newest first."""
    comments = await service.add_comment(post_id, user.id, body.text)
    return CommentListResponse.from_entities(comments)


@router.delete(
    "/comment/{post_id}/{comment_id}",
    response_model=CommentListResponse,
    summary="Delete a comment",
    responses={**NOT_FOUND, **FORBIDDEN},
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_comment(
    request: Request,
    post_id: str,
    comment_id: str,
    user: CurrentUser,
    service: PostService = Depends(get_post_service),
) -> CommentListResponse:
    """Delete a comment. Only its author may do so."""
    comments = await service.delete_comment(post_id, comment_id, user.id)
    return CommentListResponse.from_entities(comments)
