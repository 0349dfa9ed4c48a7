"""
Database client factories.

Provides the service-role Supabase client for the relational store
(identities, connections, posts, comments, likes) and the MongoDB
database handle for the document store (conversations, notifications).
"""

from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database
from supabase import create_client, Client

from .config import get_settings

# Module-level client cache
_service_client: Optional[Client] = None
_mongo_client: Optional[MongoClient] = None


def get_supabase_client() -> Client:
    """
    Get Supabase client with service role (bypasses RLS).

    The backend performs its own authorization checks in the service
    layer, so every query runs with full table access.

    Returns:
        Supabase client configured with service role key
    """
    global _service_client

    if _service_client is None:
        settings = get_settings()
        if not settings.supabase_url or not settings.supabase_service_role_key:
            raise RuntimeError(
                "Supabase configuration missing. "
                "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
            )
        _service_client = create_client(
            settings.supabase_url,
            settings.supabase_service_role_key,
        )

    return _service_client


def get_document_database() -> Database:
    """
    Get the MongoDB database used for conversations and notifications.

    The underlying MongoClient keeps its own connection pool and is
    shared by every request.

    Returns:
        pymongo Database named by MONGODB_DATABASE
    """
    global _mongo_client

    settings = get_settings()
    if _mongo_client is None:
        if not settings.mongodb_url:
            raise RuntimeError(
                "MongoDB configuration missing. Set the MONGODB_URL environment variable."
            )
        _mongo_client = MongoClient(settings.mongodb_url, tz_aware=True)

    return _mongo_client[settings.mongodb_database]


def reset_client_cache() -> None:
    """
    Reset the cached database clients.

    Useful for testing or when configuration changes.
    """
    global _service_client, _mongo_client
    if _mongo_client is not None:
        _mongo_client.close()
    _service_client = None
    _mongo_client = None
