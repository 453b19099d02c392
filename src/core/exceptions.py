"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"

    # Not found errors (404)
    POST_NOT_FOUND = "POST_NOT_FOUND"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"
    PROFILE_NOT_FOUND = "PROFILE_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Conflict errors (409)
    ALREADY_LIKED = "ALREADY_LIKED"
    NOT_LIKED = "NOT_LIKED"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class MalformedIdentifierError(ValueError):
    """An identifier is not in the storage layer's key format.

    Raised by repositories; services translate it into the matching
    not-found error so callers cannot tell the two cases apart.
    """

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Malformed identifier: {value!r}")


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class AuthorizationError(AppException):
    """Authorization failed."""

    def __init__(self, message: str = "Access denied", details: Any | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.FORBIDDEN,
            message=message,
            status_code=403,
            details=details,
        )


class NotPostAuthorError(AuthorizationError):
    """Only the author of a post may delete it."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            message="User not authorized to delete this post",
            details={"post_id": post_id},
        )


class NotCommentAuthorError(AuthorizationError):
    """Only the author of a comment may delete it."""

    def __init__(self, comment_id: str) -> None:
        super().__init__(
            message="User not authorized to delete this comment",
            details={"comment_id": comment_id},
        )


class ValidationFailedError(AppException):
    """A required field is missing or empty."""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message or f"{field.capitalize()} is required",
            status_code=400,
            details=[{"field": field, "message": message or f"{field} is required"}],
        )


class PostNotFoundError(AppException):
    """Post not found."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.POST_NOT_FOUND,
            message=f"Post not found: {post_id}",
            status_code=404,
            details={"post_id": post_id},
        )


class CommentNotFoundError(AppException):
    """Comment not found on the post."""

    def __init__(self, comment_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.COMMENT_NOT_FOUND,
            message=f"Comment not found: {comment_id}",
            status_code=404,
            details={"comment_id": comment_id},
        )


class ProfileNotFoundError(AppException):
    """No profile exists for the user."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROFILE_NOT_FOUND,
            message=f"There is no profile for user: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class UserNotFoundError(AppException):
    """User identity record not found."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class AlreadyLikedError(AppException):
    """The user already has a like entry on the post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.ALREADY_LIKED,
            message="Post already liked",
            status_code=409,
            details={"post_id": post_id},
        )


class NotLikedError(AppException):
    """The user has no like entry on the post."""

    def __init__(self, post_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.NOT_LIKED,
            message="Post has not yet been liked",
            status_code=409,
            details={"post_id": post_id},
        )


class PersistenceError(AppException):
    """The database failed while serving a request."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.DATABASE_ERROR,
            message="Server error",
            status_code=500,
        )
