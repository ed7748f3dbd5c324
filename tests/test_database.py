"""Tests for the Database wrapper."""
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from pymongo.errors import AutoReconnect, ConnectionFailure, ConfigurationError

from src.database import Database, DatabaseError
from src.sample_data import sample_documents


def make_database():
    client = MagicMock()
    db = Database("mongodb://unused", db_name="plp_bookstore", collection_name="books", client=client)
    return db, client


def test_collection_uses_configured_names():
    """Test the collection handle comes from the configured db and name."""
    db, client = make_database()

    collection = db.collection

    client.__getitem__.assert_called_with("plp_bookstore")
    assert collection is client["plp_bookstore"]["books"]


def test_insert_books_counts_inserted():
    """Test seeding returns the inserted count without mutating input."""
    db, _ = make_database()
    docs = sample_documents()
    db.collection.insert_many.return_value = SimpleNamespace(inserted_ids=list(range(len(docs))))

    inserted = db.insert_books(docs)

    assert inserted == len(docs)
    assert all("_id" not in doc for doc in docs)


def test_insert_books_empty():
    """Test inserting nothing skips the request."""
    db, _ = make_database()

    assert db.insert_books([]) == 0
    db.collection.insert_many.assert_not_called()


def test_get_stats():
    """Test statistics gathered from counts and index info."""
    db, _ = make_database()
    db.collection.count_documents.side_effect = [14, 10]
    db.collection.index_information.return_value = {"title_1": {}, "_id_": {}}

    stats = db.get_stats()

    assert stats == {"total_books": 14, "in_stock_books": 10, "indexes": ["_id_", "title_1"]}


def test_get_stats_error():
    """Test stats failures surface as DatabaseError."""
    db, _ = make_database()
    db.collection.count_documents.side_effect = AutoReconnect("connection reset")

    with pytest.raises(DatabaseError, match="connection reset"):
        db.get_stats()


def test_ping_error():
    """Test connectivity failures surface as DatabaseError."""
    db, client = make_database()
    client.admin.command.side_effect = ConnectionFailure("refused")

    with pytest.raises(DatabaseError):
        db.ping()


def test_context_manager_closes_client():
    """Test leaving the with block closes the client."""
    db, client = make_database()

    with db as entered:
        assert entered is db

    client.close.assert_called_once()


def test_client_configuration_error():
    """Test a bad URI (e.g. failed SRV lookup) surfaces as DatabaseError."""
    with patch("src.database.MongoClient", side_effect=ConfigurationError("The DNS query name does not exist")):
        with pytest.raises(DatabaseError, match="DNS query name"):
            Database("mongodb+srv://books.invalid")
