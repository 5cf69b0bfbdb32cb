"""
Authsession shared data models.

These models define the structure of all data exchanged with the
remote authentication API and exposed to session consumers.
"""

from enum import Enum
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Enums


class AuthStatus(str, Enum):
    """Authentication status of the current session."""

    CHECKING = "checking"
    AUTHENTICATED = "authenticated"
    NOT_AUTHENTICATED = "notAuthenticated"


# Domain Models


class User(BaseModel):
    """
    Authenticated principal as returned by the server.

    The session core never interprets these fields; unknown fields are
    kept so the record round-trips unchanged.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: Optional[Any] = None
    email: Optional[str] = None
    name: Optional[str] = None


# Request Models (API Input)


class LoginRequest(BaseModel):
    """Credentials sent to the login endpoint."""

    email: str
    password: str


# Response Models (API Output)


class AuthResponse(BaseModel):
    """Response of both the login and the check-token endpoints."""

    user: User
    token: str = Field(..., min_length=1)


class LoginResponse(AuthResponse):
    """Response after a successful login."""


class CheckTokenResponse(AuthResponse):
    """Response after a successful token check."""


class ErrorResponse(BaseModel):
    """Error payload returned by the authentication API."""

    model_config = ConfigDict(extra="allow")

    message: Optional[Union[str, List[str]]] = None
    error: Optional[str] = None
    status_code: Optional[int] = Field(None, alias="statusCode")

    def describe(self) -> Optional[str]:
        """Return the server message as a single string, if any."""
        if isinstance(self.message, list):
            return "; ".join(str(m) for m in self.message) or None
        return self.message or None
