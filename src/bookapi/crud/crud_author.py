"""
CRUD operations for the Author model.
Deleting an author also deletes its books (ORM cascade plus ON DELETE CASCADE).
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from ..models.author import Author
from ..schemas.author import AuthorWrite
from .pagination import paginate

logger = logging.getLogger(__name__)


def get_authors(db: Session, page: Optional[int] = None, limit: Optional[int] = None) -> List[Author]:
    """Authors ordered by id, books preloaded; paginated when both `page` and `limit` are given."""
    stmt = select(Author).options(selectinload(Author.books)).order_by(Author.id)
    stmt = paginate(stmt, page, limit)
    return list(db.execute(stmt).scalars().all())


def get_author_by_id(db: Session, author_id: int) -> Optional[Author]:
    return db.get(Author, author_id)


def create_author(db: Session, author_in: AuthorWrite) -> Author:
    db_author = Author(first_name=author_in.first_name, last_name=author_in.last_name)
    db.add(db_author)
    try:
        db.commit()
        db.refresh(db_author)
    except Exception as e:
        logger.exception(f"Error committing author creation: {e}")
        db.rollback()
        raise
    logger.info(f"Author {db_author.id} created.")
    return db_author


def update_author(db: Session, db_author: Author, author_in: AuthorWrite) -> Author:
    db_author.first_name = author_in.first_name
    db_author.last_name = author_in.last_name
    try:
        db.commit()
        db.refresh(db_author)
    except Exception as e:
        logger.exception(f"Error committing update of author {db_author.id}: {e}")
        db.rollback()
        raise
    logger.info(f"Author {db_author.id} updated.")
    return db_author


def delete_author(db: Session, db_author: Author) -> int:
    """
    Deletes an author and, by cascade, all of its books.

    Returns:
        int: Number of books removed along with the author.
    """
    author_id = db_author.id
    book_count = len(db_author.books)
    try:
        db.delete(db_author)
        db.commit()
    except Exception as e:
        logger.exception(f"Error committing deletion of author {author_id}: {e}")
        db.rollback()
        raise
    logger.info(f"Author {author_id} deleted along with {book_count} book(s).")
    return book_count
