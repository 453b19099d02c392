"""Authentication provider protocol."""

from dataclasses import dataclass
from typing import Optional, Protocol
from uuid import UUID


@dataclass
class TokenUser:
    """Identity claim extracted from a verified auth token."""

    id: UUID
    name: Optional[str] = None


class IAuthProvider(Protocol):
    """Protocol for authentication providers."""

    async def verify_token(self, token: Optional[str]) -> TokenUser:
        """
        Verify an authentication token.

        Args:
            token: The credential presented by the client

        Returns:
            The identity claim embedded in the token

        Raises:
            AuthenticationError: If the token is missing, malformed,
                badly signed or expired
        """
        ...

    def create_token(self, user: TokenUser) -> str:
        """
        Create an authentication token for a user.

        Args:
            user: The user to create a token for

        Returns:
            The generated token string
        """
        ...
