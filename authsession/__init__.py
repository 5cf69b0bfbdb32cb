"""
Authsession - Client-side authentication session

Logs a user in against a remote authentication API, keeps the bearer
token in a pluggable key-value store and exposes the current user and
authentication status as observable state.

Modules:
- api: Wire models shared with the authentication API
- auth: Session manager, API client and state
- storage: Token persistence backends
"""

from .modules.api.models import AuthStatus, User
from .modules.auth import AuthenticationError, SessionFactory, SessionManager, SessionState

__version__ = "1.0.0"

__all__ = [
    "AuthStatus",
    "AuthenticationError",
    "SessionFactory",
    "SessionManager",
    "SessionState",
    "User",
]
