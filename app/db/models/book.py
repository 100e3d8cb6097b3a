from sqlalchemy import Column, Integer, String, Date, ForeignKey
from sqlalchemy.orm import relationship

from app.db.base import Base


class Book(Base):
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    author_id = Column(
        Integer, ForeignKey("authors.id", ondelete="CASCADE"), nullable=False
    )
    publication_date = Column(Date, nullable=False)
    type = Column(String(100), nullable=True)

    # Relationships
    author = relationship("Author", back_populates="books", lazy="joined")

    @property
    def author_name(self) -> str | None:
        return self.author.name if self.author is not None else None
