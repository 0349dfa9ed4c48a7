"""
Auth API endpoints.

Successful register/login responses carry the token in the body and also
set it as an HttpOnly cookie for browser clients.
"""

from fastapi import APIRouter, Depends, Response, status

from api.dependencies import get_auth_service
from shared.config import get_settings

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, RegisterRequest

router = APIRouter()


def _set_auth_cookie(response: Response, auth: AuthResponse) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=auth.token or "",
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite="strict",
        max_age=settings.jwt_expires_in_days * 24 * 60 * 60,
    )


@router.post("/register", response_model=AuthResponse)
async def register(
    request: RegisterRequest,
    response: Response,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Create an account.

    Returns 400 with success=false when the email is already registered.
    """
    result = await service.register(request)
    if not result.success:
        response.status_code = status.HTTP_400_BAD_REQUEST
        return result
    _set_auth_cookie(response, result)
    return result


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    response: Response,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Sign in with email and password.

    Returns 401 with a generic message on bad credentials.
    """
    result = await service.login(request)
    if not result.success:
        response.status_code = status.HTTP_401_UNAUTHORIZED
        return result
    _set_auth_cookie(response, result)
    return result


@router.post("/logout")
async def logout(response: Response) -> dict:
    """
    Clear the auth cookie.

    The token itself stays valid until it expires.
    """
    response.delete_cookie(get_settings().auth_cookie_name)
    return {"message": "Logged out"}
