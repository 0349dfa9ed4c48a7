"""
Authentication module.

Handles registration, login, token issuing and token validation.

Public API:
- IAuthService: Interface for auth operations
- RegisterRequest, LoginRequest, AuthResponse, UserInfo: Request/response models
- Auth exceptions: InvalidTokenError, ExpiredTokenError, MissingTokenError
"""

from .interfaces import IAuthService
from .models import AuthResponse, JWTPayload, LoginRequest, RegisterRequest, UserInfo
from .exceptions import (
    AuthNotConfiguredError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "AuthResponse",
    "JWTPayload",
    "LoginRequest",
    "RegisterRequest",
    "UserInfo",
    # Exceptions
    "AuthNotConfiguredError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
]
