"""
FastAPI dependencies shared by the routers: database session, read cache,
caller authentication (HTTP Basic) and entity resolution by id.
"""

import logging

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from sqlalchemy.orm import Session

from ..core.cache import TagAwareCache
from ..crud import authenticate_user, get_author_by_id, get_book_by_id
from ..db.session import get_db
from ..models.author import Author
from ..models.book import Book
from ..models.user import User

logger = logging.getLogger(__name__)

security = HTTPBasic()


def get_cache(request: Request) -> TagAwareCache:
    """Returns the application-wide cache created in `create_app`."""
    return request.app.state.cache


def get_current_user(
    credentials: HTTPBasicCredentials = Depends(security),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolves the caller from HTTP Basic credentials (email / password).

    Raises:
        HTTPException: 401 if the credentials do not match a user.
    """
    user = authenticate_user(db, email=credentials.username, password=credentials.password)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return user


def require_role(role: str):
    """
    Builds a dependency that only lets through users holding `role`.

    Raises:
        HTTPException: 403 if the authenticated user lacks the role.
    """
    def checker(user: User = Depends(get_current_user)) -> User:
        if not user.has_role(role):
            logger.warning(f"User {user.email} denied: {role} required")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Insufficient rights: {role} required",
            )
        return user

    return checker


def get_book_or_404(book_id: int, db: Session = Depends(get_db)) -> Book:
    book = get_book_by_id(db, book_id)
    if book is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
    return book


def get_author_or_404(author_id: int, db: Session = Depends(get_db)) -> Author:
    author = get_author_by_id(db, author_id)
    if author is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Author not found")
    return author
