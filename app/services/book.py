import logging
from typing import Any

from sqlalchemy.orm import Session

import app.repositories.author as author_repo
import app.repositories.book as book_repo
from app.db.models.author import Author as AuthorModel
from app.db.models.book import Book as BookModel
from app.domain.merge import merge_book
from app.domain.rating import calculate_rating
from app.errors import NotFoundError
from app.schemas.book import BookCreate, BookUpdate
from app.services import openlibrary

logger = logging.getLogger(__name__)


def list_books(db: Session) -> list[BookModel]:
    logger.info("Getting all books")
    return book_repo.get_all_books(db)


def get_book(db: Session, book_id: int) -> BookModel:
    """
    Get a book by ID.

    Raises:
        NotFoundError: If book doesn't exist
    """
    logger.info("Getting book by id: %s", book_id)
    book = book_repo.get_book_by_id(db, book_id)
    if book is None:
        raise NotFoundError("book", book_id)
    return book


def get_book_by_title(db: Session, title: str) -> BookModel:
    """
    Get a book by exact title.

    Raises:
        NotFoundError: If no book has this title
    """
    logger.info("Getting book by title: %s", title)
    book = book_repo.get_book_by_title(db, title)
    if book is None:
        raise NotFoundError("book", title, by="title")
    return book


def create_book(db: Session, data: BookCreate) -> BookModel:
    """
    Create a book for an existing author.

    The rating is not stored; it is derived on demand by get_rating.
    The author check and the insert are not wrapped in one transaction,
    so an author deleted in between leaves the insert to the store's
    foreign key.

    Raises:
        NotFoundError: If the referenced author doesn't exist
    """
    logger.info("Creating book: %s", data.title)
    if not author_repo.author_exists(db, data.author_id):
        raise NotFoundError("author", data.author_id)

    book = book_repo.create_book(
        db,
        title=data.title,
        author_id=data.author_id,
        publication_date=data.publication_date,
        type=data.type,
    )
    logger.info("Created book with id: %s", book.id)
    return book


def update_book(db: Session, book_id: int, data: BookUpdate) -> BookModel:
    """
    Update a book, keeping stored values for fields left null.

    - Validates book exists
    - Validates the author exists, even when the author is unchanged

    Raises:
        NotFoundError: If book or author doesn't exist
    """
    logger.info("Updating book with id: %s", book_id)
    book = book_repo.get_book_by_id(db, book_id)
    if book is None:
        raise NotFoundError("book", book_id)

    if not author_repo.author_exists(db, data.author_id):
        raise NotFoundError("author", data.author_id)

    updated = book_repo.update_book(db, book, **merge_book(book, data))
    logger.info("Updated book with id: %s", book_id)
    return updated


def delete_book(db: Session, book_id: int) -> None:
    """
    Delete a book.

    Raises:
        NotFoundError: If book doesn't exist
    """
    logger.info("Deleting book with id: %s", book_id)
    if not book_repo.book_exists(db, book_id):
        raise NotFoundError("book", book_id)

    book_repo.delete_book(db, book_id)
    logger.info("Deleted book with id: %s", book_id)


def get_rating(db: Session, book_id: int) -> float:
    """
    Compute the rating of a book from its publication date and its author's followers.

    Raises:
        NotFoundError: If book doesn't exist
    """
    logger.info("Getting rating for book id: %s", book_id)
    book = book_repo.get_book_by_id(db, book_id)
    if book is None:
        raise NotFoundError("book", book_id)
    return calculate_rating(book, book.author)


def get_authors_for_books(db: Session, book_ids: list[int]) -> list[AuthorModel]:
    """Distinct authors of the given books. Unknown book IDs are skipped."""
    unique_ids = list(dict.fromkeys(book_ids))
    logger.info("Getting authors for book ids: %s", unique_ids)
    return book_repo.get_authors_by_book_ids(db, unique_ids)


def lookup_by_isbn(isbn: str) -> dict[str, Any]:
    """
    Look a book up in the Open Library registry.

    Registry transport errors are not caught here.

    Raises:
        NotFoundError: If the registry has nothing for this ISBN
    """
    logger.info("Looking up book with ISBN: %s", isbn)
    payload = openlibrary.fetch_by_isbn(isbn)
    if not payload:
        raise NotFoundError("book", isbn, by="isbn")
    return payload
