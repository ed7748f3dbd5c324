"""Request shapes for the named book queries.

Every function here is pure: it takes explicit parameters and returns the
filter, update, sort, pipeline or index specification that is sent to the
collection unchanged.
"""
from typing import Dict, Any, List, Tuple
from pymongo import ASCENDING, DESCENDING

TITLE_AUTHOR_PRICE_PROJECTION = {"title": 1, "author": 1, "price": 1, "_id": 0}

TITLE_INDEX = [("title", ASCENDING)]
AUTHOR_YEAR_INDEX = [("author", ASCENDING), ("published_year", DESCENDING)]


def genre_filter(genre: str) -> Dict[str, Any]:
    """Books in one genre."""
    return {"genre": genre}


def published_after_filter(year: int) -> Dict[str, Any]:
    """Books published strictly after year."""
    return {"published_year": {"$gt": year}}


def author_filter(author: str) -> Dict[str, Any]:
    """Books by one author."""
    return {"author": author}


def title_filter(title: str) -> Dict[str, Any]:
    """Books with an exact title."""
    return {"title": title}


def price_update(new_price: float) -> Dict[str, Any]:
    """Update setting a new price."""
    return {"$set": {"price": new_price}}


def in_stock_after_filter(year: int) -> Dict[str, Any]:
    """In-stock books published strictly after year."""
    return {"in_stock": True, "published_year": {"$gt": year}}


def price_sort(ascending: bool = True) -> List[Tuple[str, int]]:
    """Sort by price, cheapest first unless ascending is False."""
    return [("price", ASCENDING if ascending else DESCENDING)]


def page_bounds(page_index: int, page_size: int) -> Tuple[int, int]:
    """
    Compute skip and limit for a zero-based page.

    Args:
        page_index: Zero-based page number
        page_size: Books per page

    Returns:
        (skip, limit) tuple

    Raises:
        ValueError: if page_index is negative or page_size is not positive
    """
    if page_index < 0:
        raise ValueError(f"page_index must be >= 0, got {page_index}")
    if page_size <= 0:
        raise ValueError(f"page_size must be > 0, got {page_size}")
    return page_index * page_size, page_size


def average_price_by_genre_pipeline() -> List[Dict[str, Any]]:
    """Average price per genre."""
    return [
        {"$group": {"_id": "$genre", "averagePrice": {"$avg": "$price"}}},
    ]


def author_with_most_books_pipeline() -> List[Dict[str, Any]]:
    """The single author with the most books."""
    # Ties keep whatever order the server's $sort yields
    return [
        {"$group": {"_id": "$author", "count": {"$sum": 1}}},
        {"$sort": {"count": -1}},
        {"$limit": 1},
    ]


def count_by_decade_pipeline() -> List[Dict[str, Any]]:
    """Group by the first three digits of published_year plus '0s'."""
    return [
        {
            "$project": {
                "decade": {
                    "$concat": [
                        {"$substr": ["$published_year", 0, 3]},
                        "0s",
                    ]
                }
            }
        },
        {"$group": {"_id": "$decade", "count": {"$sum": 1}}},
        {"$sort": {"_id": 1}},
    ]
