from .author import AuthorWrite, AuthorSummary, AuthorRead
from .book import BookBase, BookWrite, BookSummary, BookRead
from .error import Violation
from .user import UserCreate

# AuthorRead nests BookSummary, which lives next to the book schemas.
AuthorRead.model_rebuild(_types_namespace={"BookSummary": BookSummary})

__all__ = [
    "AuthorWrite",
    "AuthorSummary",
    "AuthorRead",
    "BookBase",
    "BookWrite",
    "BookSummary",
    "BookRead",
    "Violation",
    "UserCreate",
]
