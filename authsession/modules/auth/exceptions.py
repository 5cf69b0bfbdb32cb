"""Authentication errors surfaced to callers."""
from typing import Optional


GENERIC_LOGIN_ERROR = "Authentication failed"
UNREACHABLE_ERROR = "Unable to reach the authentication service"
INVALID_RESPONSE_ERROR = "Invalid response from the authentication service"


class AuthSessionError(Exception):
    """Base class for all authsession errors."""


class AuthenticationError(AuthSessionError):
    """
    A login or token check was rejected or could not complete.

    Attributes:
        message: Server-provided message when available, otherwise a generic one
        status_code: HTTP status of the failed response, None for transport errors
    """

    def __init__(self, message: str = GENERIC_LOGIN_ERROR, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"AuthenticationError(message={self.message!r}, status_code={self.status_code!r})"
