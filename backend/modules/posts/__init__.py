"""
Posts module.

Publishing, editing and deleting posts, and likes.

Public API:
- IPostService: Interface for post and like operations
- PostRecord, PostView, CreatePostRequest, UpdatePostRequest: Data models
- PostRepository, LikeRepository: Data access
"""

from .interfaces import IPostService
from .models import CreatePostRequest, PostRecord, PostView, UpdatePostRequest
from .repository import LikeRepository, PostRepository

__all__ = [
    "IPostService",
    "CreatePostRequest",
    "PostRecord",
    "PostView",
    "UpdatePostRequest",
    "LikeRepository",
    "PostRepository",
]
