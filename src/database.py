"""Database layer for the books collection."""
from pymongo import MongoClient
from pymongo.errors import PyMongoError
from typing import Optional, List, Dict, Any
import logging

logger = logging.getLogger(__name__)


class DatabaseError(Exception):
    """Any failure reported by the MongoDB client."""


class Database:
    """MongoDB client holding the books collection."""

    def __init__(
        self,
        uri: str,
        db_name: str = "plp_bookstore",
        collection_name: str = "books",
        timeout_ms: int = 5000,
        client: Optional[MongoClient] = None
    ):
        """
        Initialize the MongoDB client.

        Args:
            uri: MongoDB connection string
            db_name: Database name
            collection_name: Books collection name
            timeout_ms: Server selection timeout in milliseconds
            client: Pre-built client (mostly for tests)
        """
        try:
            self.client = client or MongoClient(uri, serverSelectionTimeoutMS=timeout_ms)
        except PyMongoError as e:
            logger.error(f"Failed to create MongoDB client: {e}")
            raise DatabaseError(str(e)) from e
        self.db = self.client[db_name]
        self.collection_name = collection_name
        logger.info(f"MongoDB client created for {db_name}.{collection_name}")

    @property
    def collection(self):
        """The books collection handle."""
        return self.db[self.collection_name]

    def ping(self) -> bool:
        """Check connectivity with the server."""
        try:
            self.client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"Ping failed: {e}")
            raise DatabaseError(str(e)) from e

    def insert_books(self, docs: List[Dict[str, Any]]) -> int:
        """
        Insert book documents.

        Args:
            docs: Book documents

        Returns:
            Number of inserted documents
        """
        if not docs:
            return 0
        try:
            # insert_many mutates its input with _id
            result = self.collection.insert_many([dict(doc) for doc in docs])
        except PyMongoError as e:
            logger.error(f"Failed to insert books: {e}")
            raise DatabaseError(str(e)) from e
        inserted = len(result.inserted_ids)
        logger.info(f"Inserted {inserted} books")
        return inserted

    def drop_books(self):
        """Remove the books collection."""
        try:
            self.collection.drop()
        except PyMongoError as e:
            raise DatabaseError(str(e)) from e
        logger.info(f"Dropped collection {self.collection_name}")

    def get_stats(self) -> Dict[str, Any]:
        """Get collection statistics."""
        try:
            total = self.collection.count_documents({})
            in_stock = self.collection.count_documents({"in_stock": True})
            indexes = sorted(self.collection.index_information().keys())
        except PyMongoError as e:
            logger.error(f"Failed to read stats: {e}")
            raise DatabaseError(str(e)) from e

        return {
            "total_books": total,
            "in_stock_books": in_stock,
            "indexes": indexes
        }

    def close(self):
        """Close the client and its connection pool."""
        if self.client:
            self.client.close()
            logger.info("MongoDB client closed")

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
