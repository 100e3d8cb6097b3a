from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas.author import Author
from app.schemas.book import Book, BookCreate, BookUpdate
from app.services import book as book_service

router = APIRouter(prefix="/books", tags=["books"])


@router.get("", response_model=list[Book])
def get_all_books(db: Session = Depends(get_db)):
    """
    Fetch a list of all books.
    """
    books = book_service.list_books(db)
    return [Book.model_validate(book) for book in books]


@router.get("/title/{title}", response_model=Book)
def get_book_by_title(title: str, db: Session = Depends(get_db)):
    """
    Fetch a single book by its exact title.
    """
    return Book.model_validate(book_service.get_book_by_title(db, title))


@router.get("/isbn/{isbn}", response_model=dict[str, Any])
def lookup_book_by_isbn(isbn: str):
    """
    Look a book up in the Open Library registry by ISBN and return the registry payload as is.
    """
    return book_service.lookup_by_isbn(isbn)


@router.post("/authors", response_model=list[Author])
def get_authors_by_book_ids(
    book_ids: list[int] = Body(...),
    db: Session = Depends(get_db),
):
    """
    Fetch the distinct authors of the given books. Unknown book IDs are ignored.
    """
    authors = book_service.get_authors_for_books(db, book_ids)
    return [Author.model_validate(author) for author in authors]


@router.get("/{book_id}", response_model=Book)
def get_book_by_id(book_id: int, db: Session = Depends(get_db)):
    """
    Fetch a single book by its ID.
    """
    return Book.model_validate(book_service.get_book(db, book_id))


@router.get("/{book_id}/rating", response_model=float)
def get_book_rating(book_id: int, db: Session = Depends(get_db)):
    """
    Compute the rating of a book from its publication date and its author's popularity.
    """
    return book_service.get_rating(db, book_id)


@router.post("", response_model=Book, status_code=status.HTTP_201_CREATED)
def create_new_book(book_data: BookCreate, db: Session = Depends(get_db)):
    """
    Add a new book. The referenced author must exist.
    """
    return Book.model_validate(book_service.create_book(db, book_data))


@router.put("/{book_id}", response_model=Book)
def update_book_by_id(
    book_id: int,
    book_data: BookUpdate,
    db: Session = Depends(get_db),
):
    """
    Update an existing book. The author is checked again even when unchanged.
    """
    return Book.model_validate(book_service.update_book(db, book_id, book_data))


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_book_by_id(book_id: int, db: Session = Depends(get_db)):
    """
    Remove a book by its ID.
    """
    book_service.delete_book(db, book_id)
