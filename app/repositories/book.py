from sqlalchemy.orm import Session

from app.db.models.author import Author as AuthorModel
from app.db.models.book import Book as BookModel


def get_book_by_id(db: Session, book_id: int) -> BookModel | None:
    """Get a book by ID, with its author loaded."""
    return db.query(BookModel).filter(BookModel.id == book_id).first()


def get_all_books(db: Session) -> list[BookModel]:
    """Get all books."""
    return db.query(BookModel).all()


def get_book_by_title(db: Session, title: str) -> BookModel | None:
    """Get the first book whose title matches exactly."""
    return db.query(BookModel).filter(BookModel.title == title).first()


def book_exists(db: Session, book_id: int) -> bool:
    """Check whether a book with the given ID exists."""
    return db.query(BookModel.id).filter(BookModel.id == book_id).first() is not None


def get_authors_by_book_ids(db: Session, book_ids: list[int]) -> list[AuthorModel]:
    """Get the distinct authors of the given books. Unknown IDs are ignored."""
    if not book_ids:
        return []
    return (
        db.query(AuthorModel)
        .join(BookModel, AuthorModel.id == BookModel.author_id)
        .filter(BookModel.id.in_(book_ids))
        .distinct()
        .all()
    )


def create_book(
    db: Session,
    title: str,
    author_id: int,
    publication_date,
    type: str | None = None,
) -> BookModel:
    """Create a new book in the database. Pure data access - no business logic."""
    db_book = BookModel(
        title=title,
        author_id=author_id,
        publication_date=publication_date,
        type=type,
    )
    db.add(db_book)
    db.commit()
    db.refresh(db_book)
    return db_book


def update_book(db: Session, book: BookModel, **fields) -> BookModel:
    """Write the given fields onto an existing book and persist it."""
    for name, value in fields.items():
        setattr(book, name, value)

    db.commit()
    db.refresh(book)
    return book


def delete_book(db: Session, book_id: int) -> None:
    """Delete a book from the database. Pure data access - no business logic."""
    book = get_book_by_id(db, book_id)
    if book is None:
        return

    db.delete(book)
    db.commit()
