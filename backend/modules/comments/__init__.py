"""
Comments module.

Public API:
- ICommentService: Interface for comment operations
- CommentRecord, CommentView, CommentAuthor, CreateCommentRequest: Data models
- CommentRepository: Data access for the comments table
"""

from .interfaces import ICommentService
from .models import CommentAuthor, CommentRecord, CommentView, CreateCommentRequest
from .repository import CommentRepository

__all__ = [
    "ICommentService",
    "CommentAuthor",
    "CommentRecord",
    "CommentView",
    "CreateCommentRequest",
    "CommentRepository",
]
