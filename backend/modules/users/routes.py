"""
User profile API endpoints.
"""

import os

from fastapi import APIRouter, Depends, File, HTTPException, Query, UploadFile

from api.middleware.auth import get_current_user
from api.dependencies import get_user_service
from shared.config import get_settings
from shared.models import AuthenticatedUser

from .interfaces import IUserService
from .models import AvatarUploadResponse, UpdateUserRequest, UserProfile

router = APIRouter()

ALLOWED_AVATAR_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp"}


@router.get("/me", response_model=UserProfile)
async def get_my_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserProfile:
    """Get the current user's profile."""
    profile = await service.get_profile(user.id)
    if not profile:
        raise HTTPException(status_code=404, detail="User not found")
    return profile


@router.put("/me", response_model=UserProfile)
async def update_my_profile(
    request: UpdateUserRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserProfile:
    """Update the current user's profile. Only provided fields change."""
    profile = await service.update_profile(user.id, request)
    if not profile:
        raise HTTPException(status_code=404, detail="User not found")
    return profile


@router.delete("/me", status_code=204)
async def delete_my_account(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> None:
    """Delete the current user's account and all their data."""
    if not await service.delete_account(user.id):
        raise HTTPException(status_code=404, detail="User not found")


@router.post("/me/avatar", response_model=AvatarUploadResponse)
async def upload_avatar(
    file: UploadFile = File(...),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> AvatarUploadResponse:
    """
    Upload a profile picture.

    Accepts jpg, jpeg, png, gif and webp files up to the configured size.
    """
    settings = get_settings()
    filename = file.filename or ""
    extension = os.path.splitext(filename)[1].lower()
    if extension not in ALLOWED_AVATAR_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail="Unsupported file type. Allowed: jpg, jpeg, png, gif, webp",
        )

    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="No file uploaded")
    if len(content) > settings.max_avatar_bytes:
        raise HTTPException(status_code=400, detail="File too large")

    url = await service.upload_avatar(
        user.id,
        filename,
        content,
        file.content_type or "application/octet-stream",
    )
    if not url:
        raise HTTPException(status_code=400, detail="Avatar upload failed")
    return AvatarUploadResponse(avatar_url=url)


@router.get("/search", response_model=list[UserProfile])
async def search_users(
    q: str = Query(default="", description="Text matched against names, email and headline"),
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> list[UserProfile]:
    """Search users. Returns at most 20 matches."""
    return await service.search_users(q)


@router.get("/{user_id}", response_model=UserProfile)
async def get_profile(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserProfile:
    """Get another user's profile."""
    profile = await service.get_profile(user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="User not found")
    return profile
