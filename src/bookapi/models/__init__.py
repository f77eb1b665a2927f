from .author import Author
from .book import Book
from .user import User

__all__ = ["Author", "Book", "User"]
