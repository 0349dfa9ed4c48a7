"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import AuthResponse, LoginRequest, RegisterRequest


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    register and login report business failures through
    AuthResponse.success; only token validation raises.
    """

    async def register(self, request: RegisterRequest) -> AuthResponse:
        """
        Create an account and issue a token.

        Fails when the email (compared case-insensitively) is taken.
        """
        ...

    async def login(self, request: LoginRequest) -> AuthResponse:
        """
        Check credentials and issue a token.

        Unknown email and wrong password produce the same failure.
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate an access token and return the authenticated user.

        Raises:
            MissingTokenError: If token is empty
            ExpiredTokenError: If token has expired
            InvalidTokenError: If the signature or claims are wrong
        """
        ...
