from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.db.base import Base


class Author(Base):
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False, default=0)
    followers_number = Column(Integer, nullable=False, default=0)

    # Deleting an author removes its books
    books = relationship(
        "Book", back_populates="author", cascade="all, delete-orphan"
    )
