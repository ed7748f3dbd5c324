"""Data models for the books collection."""
from dataclasses import dataclass, asdict
from typing import Optional, Dict, Any


@dataclass
class Book:
    """Book document as stored in the collection."""
    title: str
    author: str
    genre: str
    published_year: int
    price: float
    in_stock: bool
    pages: Optional[int] = None
    publisher: Optional[str] = None

    @property
    def stock_str(self) -> str:
        """Human readable stock flag."""
        return "Yes" if self.in_stock else "No"

    def to_document(self) -> Dict[str, Any]:
        """Convert to a document suitable for insertion."""
        doc = asdict(self)
        return {key: value for key, value in doc.items() if value is not None}


@dataclass
class BookSummary:
    """Title, author and price projection of a book."""
    title: str
    author: str
    price: float


@dataclass
class AuthorCount:
    """Number of books written by one author."""
    author: Optional[str]
    count: int


@dataclass
class DecadeCount:
    """Number of books published in one decade, e.g. '1940s'."""
    decade: Optional[str]
    count: int
