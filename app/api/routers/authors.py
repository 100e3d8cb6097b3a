from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
from app.schemas.author import Author, AuthorCreate, AuthorUpdate
from app.services import author as author_service

router = APIRouter(prefix="/authors", tags=["authors"])


@router.get("", response_model=list[Author])
def get_all_authors(db: Session = Depends(get_db)):
    """
    Load all authors.
    """
    authors = author_service.list_authors(db)
    return [Author.model_validate(author) for author in authors]


@router.get("/{author_id}", response_model=Author)
def get_author_by_id(author_id: int, db: Session = Depends(get_db)):
    """
    Find an author by ID.
    """
    return Author.model_validate(author_service.get_author(db, author_id))


@router.post("", response_model=Author, status_code=status.HTTP_201_CREATED)
def create_new_author(author_data: AuthorCreate, db: Session = Depends(get_db)):
    """
    Create a new author.
    """
    return Author.model_validate(author_service.create_author(db, author_data))


@router.put("/{author_id}", response_model=Author)
def update_author_by_id(
    author_id: int,
    author_data: AuthorUpdate,
    db: Session = Depends(get_db),
):
    """
    Update an existing author. Fields sent as null or omitted keep their value.
    """
    author = author_service.update_author(db, author_id, author_data)
    return Author.model_validate(author)


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_author_by_id(author_id: int, db: Session = Depends(get_db)):
    """
    Delete an author by ID. The author's books are deleted with it.
    """
    author_service.delete_author(db, author_id)
