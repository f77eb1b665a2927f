from .crud_user import get_user_by_email, create_user, authenticate_user
from .crud_author import (
    get_authors,
    get_author_by_id,
    create_author,
    update_author,
    delete_author,
)
from .crud_book import (
    get_books,
    get_book_by_id,
    validate_book,
    create_book,
    update_book,
    delete_book,
)

__all__ = [
    "get_user_by_email",
    "create_user",
    "authenticate_user",
    "get_authors",
    "get_author_by_id",
    "create_author",
    "update_author",
    "delete_author",
    "get_books",
    "get_book_by_id",
    "validate_book",
    "create_book",
    "update_book",
    "delete_book",
]
