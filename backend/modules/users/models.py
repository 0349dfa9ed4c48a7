"""
Users module data models.

UserRecord mirrors the `users` table and stays inside the backend;
everything sent to clients goes through UserProfile or PublicProfile.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, computed_field

from shared.models import PublicProfile


class UserRecord(BaseModel):
    """A row of the users table, including the password hash."""

    id: str
    email: str
    password_hash: str
    first_name: str
    last_name: str
    headline: Optional[str] = None
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    def to_public_profile(self) -> PublicProfile:
        return PublicProfile(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            headline=self.headline,
            avatar_url=self.avatar_url,
        )


class UserProfile(BaseModel):
    """Full profile with statistics, as returned by the users endpoints."""

    id: str = Field(..., description="User ID (UUID)")
    email: str = Field(..., description="Email address")
    first_name: str = Field(..., description="First name")
    last_name: str = Field(..., description="Last name")
    headline: Optional[str] = Field(None, description="Professional headline")
    bio: Optional[str] = Field(None, description="Free-text biography")
    avatar_url: Optional[str] = Field(None, description="Avatar URL")
    created_at: datetime = Field(..., description="Account creation time")
    connections_count: int = Field(default=0, description="Accepted connections")
    posts_count: int = Field(default=0, description="Posts authored")

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class UpdateUserRequest(BaseModel):
    """
    Partial profile update.

    Fields left as None are not touched.
    """

    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    headline: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = Field(None, max_length=500)
    avatar_url: Optional[str] = Field(None, max_length=2048)


class AvatarUploadResponse(BaseModel):
    """Response from the avatar upload endpoint."""

    avatar_url: str
