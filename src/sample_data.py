"""Sample books used to seed an empty collection."""
from typing import List, Dict, Any

from src.models import Book

SAMPLE_BOOKS: List[Book] = [
    Book("To Kill a Mockingbird", "Harper Lee", "Fiction", 1960, 12.99, True, 336, "J. B. Lippincott & Co."),
    Book("1984", "George Orwell", "Dystopian", 1949, 10.99, True, 328, "Secker & Warburg"),
    Book("Pride and Prejudice", "Jane Austen", "Romance", 1813, 7.99, True, 432, "T. Egerton"),
    Book("The Great Gatsby", "F. Scott Fitzgerald", "Fiction", 1925, 9.99, True, 180, "Charles Scribner's Sons"),
    Book("Brave New World", "Aldous Huxley", "Dystopian", 1932, 11.50, False, 311, "Chatto & Windus"),
    Book("The Hobbit", "J.R.R. Tolkien", "Fantasy", 1937, 14.99, True, 310, "George Allen & Unwin"),
    Book("The Catcher in the Rye", "J.D. Salinger", "Fiction", 1951, 8.99, True, 224, "Little, Brown and Company"),
    Book("Moby Dick", "Herman Melville", "Adventure", 1851, 12.50, False, 635, "Harper & Brothers"),
    Book("Lord of the Flies", "William Golding", "Fiction", 1954, 8.50, True, 224, "Faber and Faber"),
    Book("Animal Farm", "George Orwell", "Political Satire", 1945, 8.99, False, 112, "Secker & Warburg"),
    Book("The Alchemist", "Paulo Coelho", "Fiction", 1988, 10.99, True, 197, "HarperOne"),
    Book("The Lord of the Rings", "J.R.R. Tolkien", "Fantasy", 1954, 19.99, True, 1178, "Allen & Unwin"),
    Book("The Midnight Library", "Matt Haig", "Fiction", 2020, 13.99, True, 304, "Canongate Books"),
    Book("Project Hail Mary", "Andy Weir", "Science Fiction", 2021, 15.99, False, 496, "Ballantine Books"),
]


def sample_documents() -> List[Dict[str, Any]]:
    """The sample books as insertable documents."""
    return [book.to_document() for book in SAMPLE_BOOKS]
