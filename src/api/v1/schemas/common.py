"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error_code: str
    message: str
    details: Any | None = None


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


# Documented error responses shared by the routers
NOT_FOUND = {404: {"model": ErrorResponse, "description": "Resource not found"}}
UNAUTHORIZED = {401: {"model": ErrorResponse, "description": "Missing or invalid token"}}
FORBIDDEN = {403: {"model": ErrorResponse, "description": "Not the author"}}
CONFLICT = {409: {"model": ErrorResponse, "description": "Like state conflict"}}
VALIDATION = {400: {"model": ErrorResponse, "description": "Required field missing"}}
