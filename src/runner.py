"""Named queries over the books collection."""
from pymongo.errors import PyMongoError
from typing import Optional, List, Dict, Any, Callable
import logging

from src import queries
from src.database import DatabaseError
from src.models import Book, BookSummary, AuthorCount, DecadeCount
from src.parse import (
    parse_books,
    parse_summaries,
    parse_average_prices,
    parse_author_count,
    parse_decade_counts,
)

logger = logging.getLogger(__name__)


class QueryRunner:
    """One method per named query; each is a single request to the collection."""

    def __init__(self, collection):
        """
        Args:
            collection: pymongo Collection holding book documents
        """
        self.collection = collection

    def _run(self, name: str, call: Callable[[], Any]) -> Any:
        """Execute a request, surfacing client failures as DatabaseError."""
        logger.info(f"Running query: {name}")
        try:
            return call()
        except PyMongoError as e:
            logger.error(f"Query {name} failed: {e}")
            raise DatabaseError(str(e)) from e

    def _find(self, name: str, filter_doc: Dict[str, Any]) -> List[Book]:
        books = self._run(name, lambda: parse_books(self.collection.find(filter_doc)))
        logger.info(f"{name}: {len(books)} books")
        return books

    # Basic CRUD

    def find_by_genre(self, genre: str) -> List[Book]:
        return self._find("find_by_genre", queries.genre_filter(genre))

    def find_published_after(self, year: int) -> List[Book]:
        return self._find("find_published_after", queries.published_after_filter(year))

    def find_by_author(self, author: str) -> List[Book]:
        return self._find("find_by_author", queries.author_filter(author))

    def find_by_title(self, title: str) -> List[Book]:
        return self._find("find_by_title", queries.title_filter(title))

    def update_price(self, title: str, new_price: float) -> int:
        """
        Set the price of the first book with the given title.

        Returns:
            Number of modified documents (0 or 1)
        """
        # modified_count raises on unacknowledged writes
        modified = self._run(
            "update_price",
            lambda: self.collection.update_one(
                queries.title_filter(title), queries.price_update(new_price)
            ).modified_count,
        )
        logger.info(f"update_price: {modified} modified")
        return modified

    def delete_by_title(self, title: str) -> int:
        """
        Delete the first book with the given title.

        Returns:
            Number of deleted documents (0 or 1)
        """
        deleted = self._run(
            "delete_by_title",
            lambda: self.collection.delete_one(queries.title_filter(title)).deleted_count,
        )
        logger.info(f"delete_by_title: {deleted} deleted")
        return deleted

    # Advanced queries

    def find_in_stock_after_year(self, year: int) -> List[Book]:
        return self._find("find_in_stock_after_year", queries.in_stock_after_filter(year))

    def project_title_author_price(self) -> List[BookSummary]:
        return self._run(
            "project_title_author_price",
            lambda: parse_summaries(
                self.collection.find({}, queries.TITLE_AUTHOR_PRICE_PROJECTION)
            ),
        )

    def sort_by_price(self, ascending: bool = True) -> List[Book]:
        return self._run(
            "sort_by_price",
            lambda: parse_books(
                self.collection.find().sort(queries.price_sort(ascending))
            ),
        )

    def paginate(self, page_index: int, page_size: int) -> List[Book]:
        """
        Fetch one page of books in natural order.

        Args:
            page_index: Zero-based page number
            page_size: Books per page

        Raises:
            ValueError: on a negative page_index or non-positive page_size
        """
        skip, limit = queries.page_bounds(page_index, page_size)
        return self._run(
            "paginate",
            lambda: parse_books(self.collection.find().skip(skip).limit(limit)),
        )

    # Aggregation pipelines

    def average_price_by_genre(self) -> Dict[str, float]:
        return self._run(
            "average_price_by_genre",
            lambda: parse_average_prices(
                self.collection.aggregate(queries.average_price_by_genre_pipeline())
            ),
        )

    def author_with_most_books(self) -> Optional[AuthorCount]:
        """Top author by book count, or None for an empty collection."""
        return self._run(
            "author_with_most_books",
            lambda: parse_author_count(
                self.collection.aggregate(queries.author_with_most_books_pipeline())
            ),
        )

    def count_by_decade(self) -> List[DecadeCount]:
        return self._run(
            "count_by_decade",
            lambda: parse_decade_counts(
                self.collection.aggregate(queries.count_by_decade_pipeline())
            ),
        )

    # Indexing

    def create_title_index(self) -> str:
        return self._run(
            "create_title_index",
            lambda: self.collection.create_index(queries.TITLE_INDEX),
        )

    def create_author_year_index(self) -> str:
        return self._run(
            "create_author_year_index",
            lambda: self.collection.create_index(queries.AUTHOR_YEAR_INDEX),
        )

    def explain_title_search(self, title: str = "The Hobbit") -> Dict[str, Any]:
        """
        Explain a title lookup with executionStats verbosity.

        Returns:
            The server's explain output (queryPlanner, executionStats, ...)
        """
        return self._run(
            "explain_title_search",
            lambda: self.collection.database.command(
                "explain",
                {"find": self.collection.name, "filter": queries.title_filter(title)},
                verbosity="executionStats",
            ),
        )
