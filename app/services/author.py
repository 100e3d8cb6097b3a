import logging

from sqlalchemy.orm import Session

import app.repositories.author as author_repo
from app.db.models.author import Author as AuthorModel
from app.domain.merge import merge_author
from app.errors import NotFoundError
from app.schemas.author import AuthorCreate, AuthorUpdate

logger = logging.getLogger(__name__)


def list_authors(db: Session) -> list[AuthorModel]:
    logger.info("Getting all authors")
    return author_repo.get_all_authors(db)


def get_author(db: Session, author_id: int) -> AuthorModel:
    """
    Get an author by ID.

    Raises:
        NotFoundError: If author doesn't exist
    """
    logger.info("Getting author by id: %s", author_id)
    author = author_repo.get_author_by_id(db, author_id)
    if author is None:
        raise NotFoundError("author", author_id)
    return author


def create_author(db: Session, data: AuthorCreate) -> AuthorModel:
    logger.info("Creating author: %s", data.name)
    author = author_repo.create_author(
        db,
        name=data.name,
        age=data.age,
        followers_number=data.followers_number,
    )
    logger.info("Created author with id: %s", author.id)
    return author


def update_author(db: Session, author_id: int, data: AuthorUpdate) -> AuthorModel:
    """
    Update an author, keeping stored values for fields left null.

    Raises:
        NotFoundError: If author doesn't exist
    """
    logger.info("Updating author with id: %s", author_id)
    author = author_repo.get_author_by_id(db, author_id)
    if author is None:
        raise NotFoundError("author", author_id)

    updated = author_repo.update_author(db, author, **merge_author(author, data))
    logger.info("Updated author with id: %s", author_id)
    return updated


def delete_author(db: Session, author_id: int) -> None:
    """
    Delete an author and, through the store cascade, its books.

    Raises:
        NotFoundError: If author doesn't exist
    """
    logger.info("Deleting author with id: %s", author_id)
    if not author_repo.author_exists(db, author_id):
        raise NotFoundError("author", author_id)

    author_repo.delete_author(db, author_id)
    logger.info("Deleted author with id: %s", author_id)
