"""
Book endpoints under /api/books.

Reads go through the tag-aware cache (tag `booksCache`); every write invalidates
the whole tag once the transaction is committed.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.orm import Session

from ... import crud
from ...core.cache import AUTHORS_TAG, BOOKS_TAG, TagAwareCache
from ...core.security import ROLE_ADMIN
from ...db.session import get_db
from ...models.book import Book
from ...schemas.book import BookRead, BookWrite
from ..deps import get_book_or_404, get_cache, require_role
from ..errors import VALIDATION_RESPONSES


router = APIRouter(prefix="/api/books", tags=["books"])

# Author views embed their books, so book writes touch both tags.
WRITE_TAGS = [BOOKS_TAG, AUTHORS_TAG]


def _serialize(book: Book) -> dict:
    return BookRead.model_validate(book).model_dump(mode="json", by_alias=True)


@router.get("", response_model=List[BookRead], name="books", responses=VALIDATION_RESPONSES)
def list_books(
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
    cache: TagAwareCache = Depends(get_cache),
):
    """List books, all of them or one page when both `page` and `limit` are given."""
    cache_key = f"books_list_page{page}_limit{limit}" if page and limit else "books_list_all"

    def load() -> List[dict]:
        return [_serialize(book) for book in crud.get_books(db, page=page, limit=limit)]

    return cache.get(cache_key, load, tags=[BOOKS_TAG])


@router.get("/{book_id}", response_model=BookRead, name="detail-book")
def get_book(
    book_id: int,
    db: Session = Depends(get_db),
    cache: TagAwareCache = Depends(get_cache),
):
    """Get one book with its author."""
    def load() -> dict:
        book = crud.get_book_by_id(db, book_id)
        if book is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
        return _serialize(book)

    return cache.get(f"book_{book_id}", load, tags=[BOOKS_TAG])


@router.post(
    "",
    response_model=BookRead,
    status_code=status.HTTP_201_CREATED,
    name="create-book",
    responses=VALIDATION_RESPONSES,
    dependencies=[Depends(require_role(ROLE_ADMIN))],
)
def create_book(
    book_in: BookWrite,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    cache: TagAwareCache = Depends(get_cache),
):
    """
    Create a book. Example body:

        {"title": "Une chambre à soi", "coverText": "...", "idAuthor": 3}

    An `idAuthor` that matches no author leaves the book without author.
    """
    book = crud.create_book(db, book_in)
    cache.invalidate_tags(WRITE_TAGS)
    response.headers["Location"] = str(request.url_for("detail-book", book_id=book.id))
    return _serialize(book)


@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    name="update-book",
    responses=VALIDATION_RESPONSES,
    dependencies=[Depends(require_role(ROLE_ADMIN))],
)
def update_book(
    book_in: BookWrite,
    book: Book = Depends(get_book_or_404),
    db: Session = Depends(get_db),
    cache: TagAwareCache = Depends(get_cache),
):
    """Replace title, cover text and author of a book."""
    crud.update_book(db, book, book_in)
    cache.invalidate_tags(WRITE_TAGS)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    name="delete-book",
    dependencies=[Depends(require_role(ROLE_ADMIN))],
)
def delete_book(
    book: Book = Depends(get_book_or_404),
    db: Session = Depends(get_db),
    cache: TagAwareCache = Depends(get_cache),
):
    """Delete a book."""
    crud.delete_book(db, book)
    cache.invalidate_tags(WRITE_TAGS)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
