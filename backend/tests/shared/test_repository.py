"""Tests for shared/repository.py."""

import pytest
from unittest.mock import MagicMock

from postgrest.exceptions import APIError
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from shared.exceptions import DuplicateRecordError, ExternalServiceError, NotFoundError
from shared.repository import BaseDocumentRepository, BaseRepository


def api_error(code: str, message: str = "boom", details: str = "") -> APIError:
    return APIError({"message": message, "code": code, "hint": None, "details": details})


class ThingRepository(BaseRepository[dict]):
    table = "things"


class ThingDocumentRepository(BaseDocumentRepository):
    collection_name = "things"


class TestBaseRepository:
    """Tests for BaseRepository base class."""

    def test_init_stores_db_client(self):
        """Should store the database client in _db attribute."""
        mock_db = MagicMock()
        repo = ThingRepository(mock_db)
        assert repo._db is mock_db

    def test_table_uses_repository_table(self):
        """_table() should start a query on the repository's table."""
        mock_db = MagicMock()
        ThingRepository(mock_db)._table()
        mock_db.table.assert_called_once_with("things")

    def test_execute_returns_response(self):
        """_execute should return the query's response."""
        query = MagicMock()
        query.execute.return_value.data = [{"id": "1"}]
        result = ThingRepository(MagicMock())._execute(query)
        assert result.data == [{"id": "1"}]

    def test_unique_violation_becomes_duplicate_record(self):
        """A 23505 error should raise DuplicateRecordError for the table."""
        query = MagicMock()
        query.execute.side_effect = api_error("23505", details="Key already exists")

        with pytest.raises(DuplicateRecordError) as exc_info:
            ThingRepository(MagicMock())._execute(query)
        assert exc_info.value.table == "things"

    def test_malformed_uuid_becomes_not_found(self):
        """A 22P02 error should raise NotFoundError."""
        query = MagicMock()
        query.execute.side_effect = api_error("22P02", "invalid input syntax for type uuid")

        with pytest.raises(NotFoundError):
            ThingRepository(MagicMock())._execute(query)

    def test_other_errors_become_external_service_error(self):
        """Any other APIError should raise ExternalServiceError."""
        query = MagicMock()
        query.execute.side_effect = api_error("42P01", "relation does not exist")

        with pytest.raises(ExternalServiceError) as exc_info:
            ThingRepository(MagicMock())._execute(query)
        assert exc_info.value.service == "supabase"
        assert exc_info.value.details["code"] == "42P01"


class TestBaseDocumentRepository:
    def test_collection_uses_collection_name(self):
        """_collection should index the database by collection_name."""
        mock_db = MagicMock()
        repo = ThingDocumentRepository(mock_db)
        assert repo._collection is mock_db.__getitem__.return_value
        mock_db.__getitem__.assert_called_with("things")

    def test_duplicate_key_becomes_duplicate_record(self):
        """DuplicateKeyError should raise DuplicateRecordError."""
        repo = ThingDocumentRepository(MagicMock())
        with pytest.raises(DuplicateRecordError):
            with repo._store_errors():
                raise DuplicateKeyError("E11000 duplicate key")

    def test_driver_errors_become_external_service_error(self):
        """Other PyMongoErrors should raise ExternalServiceError."""
        repo = ThingDocumentRepository(MagicMock())
        with pytest.raises(ExternalServiceError) as exc_info:
            with repo._store_errors():
                raise ServerSelectionTimeoutError("no servers")
        assert exc_info.value.service == "mongodb"
