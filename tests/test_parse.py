"""Tests for parsing functions."""
from bson.decimal128 import Decimal128

from src.parse import (
    parse_book,
    parse_books,
    parse_summaries,
    parse_average_prices,
    parse_author_count,
    parse_decade_counts,
)
from src.models import Book


def test_parse_book_complete():
    """Test parsing a document with all fields present."""
    doc = {
        "_id": "65f0c0ffee",
        "title": "1984",
        "author": "George Orwell",
        "genre": "Dystopian",
        "published_year": 1949,
        "price": 10.99,
        "in_stock": True,
        "pages": 328,
        "publisher": "Secker & Warburg"
    }

    book = parse_book(doc)

    assert book.title == "1984"
    assert book.author == "George Orwell"
    assert book.published_year == 1949
    assert book.price == 10.99
    assert book.in_stock is True
    assert book.pages == 328


def test_parse_book_missing_fields():
    """Test parsing a document with missing fields."""
    book = parse_book({"title": "Mystery Book"})

    assert book.title == "Mystery Book"
    assert book.author == ""
    assert book.published_year == 0
    assert book.price == 0.0
    assert book.in_stock is False
    assert book.pages is None
    assert book.publisher is None


def test_parse_books_empty_cursor():
    """Test that an empty cursor gives an empty list."""
    assert parse_books(iter([])) == []


def test_parse_summaries():
    """Test parsing title/author/price projections."""
    summaries = parse_summaries([{"title": "Dune", "author": "Frank Herbert", "price": 9}])

    assert len(summaries) == 1
    assert summaries[0].title == "Dune"
    assert summaries[0].price == 9.0


def test_parse_average_prices_skips_null():
    """Test that genres without an average are absent."""
    rows = [
        {"_id": "Fiction", "averagePrice": 10.5},
        {"_id": "Poetry", "averagePrice": None},
    ]

    averages = parse_average_prices(rows)

    assert averages == {"Fiction": 10.5}
    assert "Poetry" not in averages


def test_parse_author_count():
    """Test taking the top author row."""
    top = parse_author_count([{"_id": "George Orwell", "count": 2}])

    assert top.author == "George Orwell"
    assert top.count == 2
    assert parse_author_count([]) is None


def test_parse_decade_counts_keeps_order():
    """Test decade rows keep the server order."""
    counts = parse_decade_counts([
        {"_id": "1940s", "count": 2},
        {"_id": "1950s", "count": 3},
    ])

    assert [c.decade for c in counts] == ["1940s", "1950s"]
    assert counts[1].count == 3


def test_book_to_document_drops_empty_optionals():
    """Test document conversion omits unset optional fields."""
    book = Book("Dune", "Frank Herbert", "Science Fiction", 1965, 9.99, True)

    doc = book.to_document()

    assert doc["title"] == "Dune"
    assert "pages" not in doc
    assert "publisher" not in doc


def test_parse_decimal_prices():
    """Test Decimal128 prices and averages become floats."""
    book = parse_book({"title": "1984", "price": Decimal128("12.99")})
    summaries = parse_summaries([{"title": "1984", "author": "George Orwell", "price": Decimal128("12.99")}])
    averages = parse_average_prices([{"_id": "Dystopian", "averagePrice": Decimal128("11.245")}])

    assert book.price == 12.99
    assert summaries[0].price == 12.99
    assert averages == {"Dystopian": 11.245}


def test_parse_null_group_keys():
    """Test rows grouped on a missing field keep None, never the text 'None'."""
    averages = parse_average_prices([
        {"_id": None, "averagePrice": 9.0},
        {"_id": "Fiction", "averagePrice": 10.0},
    ])
    top = parse_author_count([{"_id": None, "count": 3}])
    decades = parse_decade_counts([{"_id": None, "count": 1}])

    assert averages == {"Fiction": 10.0}
    assert top.author is None
    assert decades[0].decade is None
