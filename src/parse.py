"""Parse and normalize MongoDB documents and aggregation results."""
from typing import Dict, Any, List, Iterable, Optional
from bson.decimal128 import Decimal128
import logging

from src.models import Book, BookSummary, AuthorCount, DecadeCount

logger = logging.getLogger(__name__)


def _to_float(value: Any) -> float:
    """Convert a stored number (int, float or Decimal128) to float; None is 0.0."""
    if value is None:
        return 0.0
    if isinstance(value, Decimal128):
        return float(value.to_decimal())
    return float(value)


def _group_key(row: Dict[str, Any]) -> Optional[str]:
    """The $group _id of a row as text, keeping a null _id as None."""
    key = row.get("_id")
    return None if key is None else str(key)


def parse_book(doc: Dict[str, Any]) -> Book:
    """
    Parse a single book document.

    Args:
        doc: Raw document from the books collection

    Returns:
        Book object, with safe defaults for missing fields
    """
    # _id and any unknown fields are dropped
    pages = doc.get("pages")
    return Book(
        title=str(doc.get("title", "")),
        author=str(doc.get("author", "")),
        genre=str(doc.get("genre", "")),
        published_year=int(doc.get("published_year") or 0),
        price=_to_float(doc.get("price")),
        in_stock=bool(doc.get("in_stock", False)),
        pages=int(pages) if pages is not None else None,
        publisher=doc.get("publisher"),
    )


def parse_books(docs: Iterable[Dict[str, Any]]) -> List[Book]:
    """
    Parse every document of a cursor.

    Args:
        docs: Cursor or list of raw documents

    Returns:
        List of Book objects (empty if the cursor is empty)
    """
    return [parse_book(doc) for doc in docs]


def parse_summaries(docs: Iterable[Dict[str, Any]]) -> List[BookSummary]:
    """Parse title/author/price projections."""
    return [
        BookSummary(
            title=str(doc.get("title", "")),
            author=str(doc.get("author", "")),
            price=_to_float(doc.get("price")),
        )
        for doc in docs
    ]


def parse_average_prices(rows: Iterable[Dict[str, Any]]) -> Dict[str, float]:
    """
    Turn ``{_id: genre, averagePrice: x}`` rows into a genre mapping.

    Rows without a genre or without an average (no priced books) are skipped.
    """
    averages = {}
    for row in rows:
        genre = _group_key(row)
        if genre is None or row.get("averagePrice") is None:
            logger.debug(f"Skipping genre row: {row}")
            continue
        averages[genre] = _to_float(row["averagePrice"])
    return averages


def parse_author_count(rows: Iterable[Dict[str, Any]]) -> Optional[AuthorCount]:
    """Return the first ``{_id: author, count: n}`` row, or None."""
    for row in rows:
        return AuthorCount(author=_group_key(row), count=int(row.get("count", 0)))
    return None


def parse_decade_counts(rows: Iterable[Dict[str, Any]]) -> List[DecadeCount]:
    """Turn ``{_id: decade, count: n}`` rows into DecadeCount objects."""
    return [
        DecadeCount(decade=_group_key(row), count=int(row.get("count", 0)))
        for row in rows
    ]
