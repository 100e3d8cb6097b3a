from sqlalchemy.orm import Session

from app.db.models.author import Author as AuthorModel


def get_author_by_id(db: Session, author_id: int) -> AuthorModel | None:
    """Get an author by ID."""
    return db.query(AuthorModel).filter(AuthorModel.id == author_id).first()


def get_all_authors(db: Session) -> list[AuthorModel]:
    """Get all authors."""
    return db.query(AuthorModel).all()


def author_exists(db: Session, author_id: int | None) -> bool:
    """Check whether an author with the given ID exists."""
    if author_id is None:
        return False
    return (
        db.query(AuthorModel.id).filter(AuthorModel.id == author_id).first()
        is not None
    )


def create_author(
    db: Session,
    name: str,
    age: int,
    followers_number: int,
) -> AuthorModel:
    """Create a new author in the database. Pure data access - no business logic."""
    db_author = AuthorModel(
        name=name,
        age=age,
        followers_number=followers_number,
    )
    db.add(db_author)
    db.commit()
    db.refresh(db_author)
    return db_author


def update_author(db: Session, author: AuthorModel, **fields) -> AuthorModel:
    """Write the given fields onto an existing author and persist it."""
    for name, value in fields.items():
        setattr(author, name, value)

    db.commit()
    db.refresh(author)
    return author


def delete_author(db: Session, author_id: int) -> None:
    """Delete an author. Its books are removed by the ORM cascade."""
    author = get_author_by_id(db, author_id)
    if author is None:
        return

    db.delete(author)
    db.commit()
