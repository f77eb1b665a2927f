"""
Pydantic schemas for the Book entity.

`BookWrite` is the request body of create/update and carries the constraints a
book must satisfy. `BookRead` is the public view of a book with its author
embedded; `BookSummary` is the view used when books are nested under an author,
so the Book -> Author -> Books cycle is never serialized.
"""

from typing import Optional

from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from .author import AuthorSummary


class BookBase(BaseModel):
    """
    Constraints shared by every writable book state.

    Attributes:
        title (str): Book title, 1 to 255 characters, not blank.
        cover_text (Optional[str]): Back cover text.
    """
    title: str = Field(..., min_length=1, max_length=255)
    cover_text: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("The book title is required")
        return value


class BookWrite(BookBase):
    """
    Body of POST/PUT /api/books.

    Attributes:
        id_author (Optional[int]): Id of the author to attach (`idAuthor` on the wire).
            Unknown ids leave the book without author.
    """
    id_author: Optional[int] = None


class BookSummary(BaseModel):
    id: int
    title: str
    cover_text: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class BookRead(BookSummary):
    """Public view of a book, author included."""
    author: Optional[AuthorSummary] = None
