"""
API Module - Black Box Interface

Purpose: Wire models shared with the remote authentication API
Interface: User, AuthStatus, request and response models
Hidden: Field validation, alias handling

Other modules only exchange these models; none of them parse raw JSON.
"""

from .models import (
    AuthResponse,
    AuthStatus,
    CheckTokenResponse,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    User,
)

__all__ = [
    "AuthResponse",
    "AuthStatus",
    "CheckTokenResponse",
    "ErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "User",
]
