from app.db.models.author import Author
from app.db.models.book import Book

__all__ = ["Author", "Book"]
