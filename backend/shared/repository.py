"""
Base repository classes for data access.

Provides a common abstraction layer for all repositories, encapsulating
store client access and the translation of store errors into the
backend's exception hierarchy.
"""

from contextlib import contextmanager
from typing import TypeVar, Generic, Any, Iterator

from postgrest.exceptions import APIError
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from supabase import Client

from .exceptions import DuplicateRecordError, ExternalServiceError, NotFoundError


T = TypeVar("T")

# PostgreSQL SQLSTATEs
UNIQUE_VIOLATION = "23505"
INVALID_TEXT_REPRESENTATION = "22P02"  # e.g. a malformed UUID in a filter


class BaseRepository(Generic[T]):
    """
    Base class for relational (Supabase) repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - _execute() which runs a query and maps PostgREST errors

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class PostRepository(BaseRepository[PostRecord]):
            table = "posts"

            def get_by_id(self, post_id: str) -> Optional[PostRecord]:
                result = self._execute(
                    self._table().select("*").eq("id", post_id).limit(1)
                )
                if not result.data:
                    return None
                return self._map_to_post(result.data[0])
    """

    table: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _table(self, name: str | None = None):
        """Start a query builder on this repository's table (or another)."""
        return self._db.table(name or self.table)

    def _execute(self, query: Any) -> Any:
        """
        Execute a PostgREST query.

        Raises:
            DuplicateRecordError: If the statement violated a unique index.
            NotFoundError: If an ID in the query is not a valid UUID.
            ExternalServiceError: For any other store failure.
        """
        try:
            return query.execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise DuplicateRecordError(self.table, e.details) from e
            if e.code == INVALID_TEXT_REPRESENTATION:
                raise NotFoundError(
                    f"No {self.table} record matches the given id",
                    code="MALFORMED_ID",
                ) from e
            raise ExternalServiceError(
                e.message or "Relational store request failed",
                service="supabase",
                details={"code": e.code},
            ) from e


class BaseDocumentRepository:
    """
    Base class for document (MongoDB) repositories.

    Subclasses set `collection_name` and use `self._collection` for
    queries, wrapping store calls in `self._store_errors()`.
    """

    collection_name: str = ""

    def __init__(self, db: Database) -> None:
        """
        Initialize the repository with a pymongo database handle.

        Args:
            db: Database holding this repository's collection.
        """
        self._db = db

    @property
    def _collection(self) -> Collection:
        return self._db[self.collection_name]

    @contextmanager
    def _store_errors(self) -> Iterator[None]:
        """Translate pymongo errors raised inside the block."""
        try:
            yield
        except DuplicateKeyError as e:
            raise DuplicateRecordError(self.collection_name) from e
        except PyMongoError as e:
            raise ExternalServiceError(
                str(e) or "Document store request failed",
                service="mongodb",
            ) from e
