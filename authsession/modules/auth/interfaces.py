"""Authentication interfaces following Black Box Design principles."""
from typing import Protocol

from ..api.models import AuthResponse


class AuthBackend(Protocol):
    """Protocol for the remote authentication API - allows swappable implementations."""

    async def login(self, email: str, password: str) -> AuthResponse:
        """
        Exchange credentials for a user and a token.

        Raises:
            AuthenticationError: If the credentials are rejected or the call fails
        """
        ...

    async def check_token(self, token: str) -> AuthResponse:
        """
        Verify a bearer token, returning the user and a possibly rotated token.

        Raises:
            AuthenticationError: If the token is rejected or the call fails
        """
        ...
