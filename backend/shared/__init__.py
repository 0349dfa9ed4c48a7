"""
Shared infrastructure for the ProSocial backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: Supabase and MongoDB client factories
- exceptions: Base exception classes
- repository: Base repositories for both stores
- sanitizer: HTML sanitization of free text
- storage: Avatar blob storage

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import get_supabase_client, get_document_database, reset_client_cache
from .exceptions import (
    ProSocialError,
    NotFoundError,
    ValidationError,
    EmptyContentError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DuplicateRecordError,
    ExternalServiceError,
)
from .models import AuthenticatedUser, PublicProfile, ActionResult
from .sanitizer import Sanitizer

__all__ = [
    "Settings",
    "get_settings",
    "get_supabase_client",
    "get_document_database",
    "reset_client_cache",
    "ProSocialError",
    "NotFoundError",
    "ValidationError",
    "EmptyContentError",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DuplicateRecordError",
    "ExternalServiceError",
    "AuthenticatedUser",
    "PublicProfile",
    "ActionResult",
    "Sanitizer",
]
