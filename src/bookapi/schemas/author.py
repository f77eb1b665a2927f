"""
Pydantic schemas for the Author entity.
"""

from typing import List

from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class AuthorWrite(BaseModel):
    """
    Body of POST/PUT /api/authors.

    Attributes:
        first_name (str): First name, 1 to 255 characters (`firstName` on the wire).
        last_name (str): Last name, 1 to 255 characters (`lastName` on the wire).
    """
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    @field_validator("first_name", "last_name")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("This value should not be blank")
        return value


class AuthorSummary(BaseModel):
    """Author as embedded in a book view, without its books."""
    id: int
    first_name: str
    last_name: str

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class AuthorRead(AuthorSummary):
    """Public view of an author with the books it wrote (books do not embed their author)."""
    books: List["BookSummary"] = []

