#!/usr/bin/env python3
"""Bookstore Query Explorer CLI - named MongoDB queries over the books collection."""
import argparse
import sys
import json
from dataclasses import asdict
from tabulate import tabulate
from src.database import Database, DatabaseError
from src.runner import QueryRunner
from src.sample_data import sample_documents
from src.config import Config
import logging

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def setup_database(config: Config) -> Database:
    """Create the database client."""
    return Database(
        config.MONGO_URI,
        db_name=config.MONGO_DB,
        collection_name=config.MONGO_COLLECTION,
        timeout_ms=config.DEFAULT_TIMEOUT_MS
    )


def display_books(books, format_type: str):
    """Display books in specified format."""
    if format_type == "table":
        headers = ["Title", "Author", "Genre", "Year", "Price", "In stock"]
        rows = [
            [
                book.title[:50] + "..." if len(book.title) > 50 else book.title,
                book.author[:30] + "..." if len(book.author) > 30 else book.author,
                book.genre,
                book.published_year,
                f"{book.price:.2f}",
                book.stock_str
            ]
            for book in books
        ]
        print("\n" + tabulate(rows, headers=headers, tablefmt="grid"))

    elif format_type == "json":
        print(json.dumps([asdict(book) for book in books], indent=2))

    elif format_type == "compact":
        for i, book in enumerate(books, 1):
            print(f"{i}. {book.title} - {book.author} ({book.published_year}) ${book.price:.2f}")


def run_query(args, runner: QueryRunner):
    """Dispatch a query subcommand and print its result."""
    command = args.command

    if command == "genre":
        display_books(runner.find_by_genre(args.genre), args.format)
    elif command == "after":
        display_books(runner.find_published_after(args.year), args.format)
    elif command == "author":
        display_books(runner.find_by_author(args.author), args.format)
    elif command == "title":
        display_books(runner.find_by_title(args.title), args.format)
    elif command == "in-stock":
        display_books(runner.find_in_stock_after_year(args.year), args.format)
    elif command == "sort":
        display_books(runner.sort_by_price(ascending=not args.desc), args.format)
    elif command == "page":
        display_books(runner.paginate(args.page, args.size), args.format)

    elif command == "update-price":
        modified = runner.update_price(args.title, args.price)
        print(f"Modified {modified} book(s)")
    elif command == "delete":
        deleted = runner.delete_by_title(args.title)
        print(f"Deleted {deleted} book(s)")

    elif command == "project":
        summaries = runner.project_title_author_price()
        rows = [[s.title, s.author, f"{s.price:.2f}"] for s in summaries]
        print("\n" + tabulate(rows, headers=["Title", "Author", "Price"], tablefmt="grid"))
    elif command == "avg-price":
        averages = runner.average_price_by_genre()
        rows = [[genre, f"{avg:.2f}"] for genre, avg in sorted(averages.items())]
        print("\n" + tabulate(rows, headers=["Genre", "Average price"], tablefmt="grid"))
    elif command == "top-author":
        top = runner.author_with_most_books()
        if top is None:
            print("No books in collection")
        else:
            print(f"{top.author}: {top.count} book(s)")
    elif command == "decades":
        rows = [[d.decade, d.count] for d in runner.count_by_decade()]
        print("\n" + tabulate(rows, headers=["Decade", "Books"], tablefmt="grid"))

    elif command == "index":
        names = []
        if args.which in ("title", "all"):
            names.append(runner.create_title_index())
        if args.which in ("author-year", "all"):
            names.append(runner.create_author_year_index())
        print(f"Indexes ready: {', '.join(names)}")
    elif command == "explain":
        plan = runner.explain_title_search(args.title)
        print(json.dumps(plan.get("executionStats", plan), indent=2, default=str))


def seed_books(args, config: Config):
    """Load the sample books into the collection."""
    with setup_database(config) as db:
        if args.reset:
            db.drop_books()
        inserted = db.insert_books(sample_documents())
        logger.info(f"✅ Seeded {inserted} books")


def show_stats(args, config: Config):
    """Show collection statistics."""
    with setup_database(config) as db:
        stats = db.get_stats()

        print("\n" + "=" * 50)
        print("COLLECTION STATISTICS")
        print("=" * 50)
        print(f"Total books stored: {stats['total_books']}")
        print(f"Books in stock: {stats['in_stock_books']}")
        print(f"Indexes: {', '.join(stats['indexes']) or 'none'}")
        print("=" * 50 + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Bookstore Query Explorer - MongoDB queries CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Load sample data
  %(prog)s seed --reset

  # Filters
  %(prog)s genre Fiction
  %(prog)s in-stock 2010 --format compact

  # Mutations
  %(prog)s update-price 1984 12.99

  # Aggregations and indexes
  %(prog)s decades
  %(prog)s index all
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    def book_list(name, help_text):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--format", choices=["table", "json", "compact"], default="table", help="Output format")
        return sub

    book_list("genre", "Find books in a genre").add_argument("genre")
    book_list("after", "Find books published after a year").add_argument("year", type=int)
    book_list("author", "Find books by an author").add_argument("author")
    book_list("title", "Find books with a title").add_argument("title")
    book_list("in-stock", "Find in-stock books published after a year").add_argument("year", type=int)
    book_list("sort", "Sort books by price").add_argument("--desc", action="store_true", help="Descending order")

    page_parser = book_list("page", "Fetch one page of books")
    page_parser.add_argument("page", type=int, help="Zero-based page number")
    page_parser.add_argument("--size", type=int, default=Config.DEFAULT_PAGE_SIZE, help="Page size")

    update_parser = subparsers.add_parser("update-price", help="Update the price of a book")
    update_parser.add_argument("title")
    update_parser.add_argument("price", type=float)

    subparsers.add_parser("delete", help="Delete a book by title").add_argument("title")
    subparsers.add_parser("project", help="List title, author and price")
    subparsers.add_parser("avg-price", help="Average price by genre")
    subparsers.add_parser("top-author", help="Author with the most books")
    subparsers.add_parser("decades", help="Count books by publication decade")

    index_parser = subparsers.add_parser("index", help="Create indexes")
    index_parser.add_argument("which", choices=["title", "author-year", "all"])

    explain_parser = subparsers.add_parser("explain", help="Explain a title search")
    explain_parser.add_argument("title", nargs="?", default="The Hobbit")

    seed_parser = subparsers.add_parser("seed", help="Insert sample books")
    seed_parser.add_argument("--reset", action="store_true", help="Drop the collection first")

    subparsers.add_parser("stats", help="Show collection statistics")

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = Config()

    try:
        if args.command == "seed":
            seed_books(args, config)
        elif args.command == "stats":
            show_stats(args, config)
        else:
            with setup_database(config) as db:
                run_query(args, QueryRunner(db.collection))

    except KeyboardInterrupt:
        logger.info("\n⚠️  Interrupted by user")
        sys.exit(0)
    except (DatabaseError, ValueError) as e:
        logger.error(f"❌ Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
