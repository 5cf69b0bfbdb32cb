"""
Authentication Module - Black Box Interface

Purpose: Own the client session (user, status, token)
Interface: initialize(), login(), check_auth_status(), logout()
Hidden: HTTP calls, token storage, state swapping

The session manager can be rebuilt around any AuthBackend and TokenStore
without affecting its consumers.
"""

from .client import AuthApiClient, OfflineAuthBackend
from .exceptions import AuthenticationError, AuthSessionError
from .factory import SessionFactory
from .manager import SessionManager
from .state import SessionState

__all__ = [
    "AuthApiClient",
    "AuthenticationError",
    "AuthSessionError",
    "OfflineAuthBackend",
    "SessionFactory",
    "SessionManager",
    "SessionState",
]
