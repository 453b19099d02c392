"""JWT authentication provider implementation.

Tokens are signed with a shared secret (HS256 by default). Two payload
shapes are accepted:

    {"sub": "user-uuid", "name": "Jane", "exp": 1234567890}
    {"user": {"id": "user-uuid"}, "exp": 1234567890}

The second is the shape issued by the legacy account service.
"""

from datetime import datetime, timedelta
from typing import Any, Optional
from uuid import UUID

import structlog
from jose import ExpiredSignatureError, JWTError, jwt

from core.config import settings
from core.exceptions import AuthenticationError, ErrorCode
from infrastructure.auth.provider import TokenUser

logger = structlog.get_logger()


class JWTAuthProvider:
    """JWT-based authentication provider.

    The secret, algorithm and token lifetime are passed in at construction
    time; the defaults come from application settings.
    """

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    async def verify_token(self, token: Optional[str]) -> TokenUser:
        """
        Verify a JWT and extract the identity claim.

        Args:
            token: The JWT to verify

        Returns:
            TokenUser carrying the verified user ID

        Raises:
            AuthenticationError: For a missing, invalid or expired token.
                The underlying JOSE error is logged, never propagated.
        """
        if not token:
            logger.info("token_rejected", reason="missing")
            raise AuthenticationError(
                message="No token, authorization denied",
                error_code=ErrorCode.UNAUTHORIZED,
            )

        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            logger.info("token_rejected", reason="expired")
            raise _invalid_token() from None
        except JWTError as e:
            logger.info("token_rejected", reason="invalid", error=str(e))
            raise _invalid_token() from None

        user_id = _extract_user_id(payload)
        if user_id is None:
            logger.info("token_rejected", reason="missing_subject")
            raise _invalid_token()

        return TokenUser(id=user_id, name=payload.get("name"))

    def create_token(self, user: TokenUser) -> str:
        """
        Create a signed JWT for a user.

        Args:
            user: The user to create a token for

        Returns:
            The generated JWT string
        """
        expire = datetime.utcnow() + timedelta(minutes=self._expire_minutes)

        payload: dict[str, Any] = {
            "sub": str(user.id),
            "exp": expire,
        }
        if user.name:
            payload["name"] = user.name

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)


def _extract_user_id(payload: dict[str, Any]) -> Optional[UUID]:
    """Read the user ID from ``sub`` or the legacy ``user.id`` claim."""
    raw = payload.get("sub")
    if not raw:
        legacy = payload.get("user")
        if isinstance(legacy, dict):
            raw = legacy.get("id")
    if not raw or not isinstance(raw, str):
        return None
    try:
        return UUID(raw)
    except ValueError:
        return None


def _invalid_token() -> AuthenticationError:
    return AuthenticationError(
        message="Token is not valid",
        error_code=ErrorCode.INVALID_TOKEN,
    )
