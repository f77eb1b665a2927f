"""
Author endpoints under /api/authors.

Author data is embedded in book views and deleting an author deletes its books,
so every author write invalidates the book reads too.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.orm import Session

from ... import crud
from ...core.cache import AUTHORS_TAG, BOOKS_TAG, TagAwareCache
from ...core.security import ROLE_ADMIN
from ...db.session import get_db
from ...models.author import Author
from ...schemas.author import AuthorRead, AuthorWrite
from ..deps import get_author_or_404, get_cache, require_role
from ..errors import VALIDATION_RESPONSES


router = APIRouter(prefix="/api/authors", tags=["authors"])

WRITE_TAGS = [AUTHORS_TAG, BOOKS_TAG]


def _serialize(author: Author) -> dict:
    return AuthorRead.model_validate(author).model_dump(mode="json", by_alias=True)


@router.get("", response_model=List[AuthorRead], name="authors", responses=VALIDATION_RESPONSES)
def list_authors(
    page: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
    cache: TagAwareCache = Depends(get_cache),
):
    cache_key = f"authors_list_page{page}_limit{limit}" if page and limit else "authors_list_all"

    def load() -> List[dict]:
        return [_serialize(author) for author in crud.get_authors(db, page=page, limit=limit)]

    return cache.get(cache_key, load, tags=[AUTHORS_TAG])


@router.get("/{author_id}", response_model=AuthorRead, name="detail-author")
def get_author(
    author_id: int,
    db: Session = Depends(get_db),
    cache: TagAwareCache = Depends(get_cache),
):
    def load() -> dict:
        author = crud.get_author_by_id(db, author_id)
        if author is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")
        return _serialize(author)

    return cache.get(f"author_{author_id}", load, tags=[AUTHORS_TAG])


@router.post(
    "",
    response_model=AuthorRead,
    status_code=status.HTTP_201_CREATED,
    name="create-author",
    responses=VALIDATION_RESPONSES,
    dependencies=[Depends(require_role(ROLE_ADMIN))],
)
def create_author(
    author_in: AuthorWrite,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    cache: TagAwareCache = Depends(get_cache),
):
    author = crud.create_author(db, author_in)
    cache.invalidate_tags(WRITE_TAGS)
    response.headers["Location"] = str(request.url_for("detail-author", author_id=author.id))
    return _serialize(author)


@router.put(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    name="update-author",
    responses=VALIDATION_RESPONSES,
    dependencies=[Depends(require_role(ROLE_ADMIN))],
)
def update_author(
    author_in: AuthorWrite,
    author: Author = Depends(get_author_or_404),
    db: Session = Depends(get_db),
    cache: TagAwareCache = Depends(get_cache),
):
    crud.update_author(db, author, author_in)
    cache.invalidate_tags(WRITE_TAGS)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    name="delete-author",
    dependencies=[Depends(require_role(ROLE_ADMIN))],
)
def delete_author(
    author: Author = Depends(get_author_or_404),
    db: Session = Depends(get_db),
    cache: TagAwareCache = Depends(get_cache),
):
    """Delete an author together with all of its books."""
    crud.delete_author(db, author)
    cache.invalidate_tags(WRITE_TAGS)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
