"""
Comments module data models.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field, computed_field


class CommentRecord(BaseModel):
    """A row of the comments table."""

    id: str
    post_id: str
    author_id: str
    content: str
    created_at: datetime
    updated_at: datetime


class CommentAuthor(BaseModel):
    """Author summary attached to each comment."""

    id: str
    first_name: str
    last_name: str
    avatar_url: Optional[str] = None

    @computed_field
    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class CommentView(BaseModel):
    """A comment with its author."""

    id: str = Field(..., description="Comment ID")
    post_id: str = Field(..., description="Commented post")
    content: str = Field(..., description="Sanitized comment body")
    author: CommentAuthor
    created_at: datetime
    updated_at: datetime


class CreateCommentRequest(BaseModel):
    """Request to comment on a post."""

    content: str = Field(..., min_length=1, max_length=2000)
