"""Conversion of raw identifiers into primary-key values."""

from uuid import UUID

from core.exceptions import MalformedIdentifierError


def to_uuid(value: str | UUID) -> UUID:
    """Parse ``value`` as a UUID key or raise ``MalformedIdentifierError``."""
    if isinstance(value, UUID):
        return value
    try:
        return UUID(value)
    except (TypeError, ValueError, AttributeError):
        raise MalformedIdentifierError(str(value)) from None
