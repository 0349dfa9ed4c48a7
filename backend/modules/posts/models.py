"""
Posts module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, HttpUrl

from shared.models import PublicProfile


class PostRecord(BaseModel):
    """A row of the posts table."""

    id: str
    author_id: str
    content: str
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class PostView(BaseModel):
    """
    A post as shown to a viewer.

    Carries the author's public profile, like and comment counts, and
    whether the viewer has liked it (False for anonymous viewers).
    """

    id: str = Field(..., description="Post ID")
    content: str = Field(..., description="Sanitized post body")
    image_url: Optional[str] = Field(None, description="Attached image URL")
    author: PublicProfile = Field(..., description="Post author")
    likes_count: int = Field(default=0)
    comments_count: int = Field(default=0)
    liked_by_viewer: bool = Field(default=False)
    created_at: datetime
    updated_at: datetime


class CreatePostRequest(BaseModel):
    """Request to publish a post."""

    content: str = Field(..., min_length=1, max_length=5000)
    image_url: Optional[HttpUrl] = Field(None, description="http(s) image URL")


class UpdatePostRequest(BaseModel):
    """
    Partial post update.

    Fields left as None are not touched.
    """

    content: Optional[str] = Field(None, min_length=1, max_length=5000)
    image_url: Optional[HttpUrl] = None
