"""
Users module.

Identity records and profile management.

Public API:
- IUserService: Interface for profile operations
- UserRecord, UserProfile, UpdateUserRequest: Data models
- UserRepository: Data access for the users table
"""

from .interfaces import IUserService
from .models import AvatarUploadResponse, UpdateUserRequest, UserProfile, UserRecord
from .repository import UserRepository

__all__ = [
    "IUserService",
    "AvatarUploadResponse",
    "UpdateUserRequest",
    "UserProfile",
    "UserRecord",
    "UserRepository",
]
