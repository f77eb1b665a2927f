"""
Operaciones CRUD para el modelo Book en la base de datos.
Incluye el listado paginado, la búsqueda por ID y las escrituras validadas
(crear, actualizar, borrar). La resolución de `idAuthor` sigue la regla
"si el autor existe se asocia, si no el libro queda sin autor".
"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from ..models.book import Book
from ..schemas.book import BookBase, BookWrite
from .crud_author import get_author_by_id
from .pagination import paginate

logger = logging.getLogger(__name__)


def get_books(db: Session, page: Optional[int] = None, limit: Optional[int] = None) -> List[Book]:
    """
    Devuelve los libros ordenados por ID, paginados si se indican `page` y `limit`.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        page (Optional[int]): Página a devolver, empezando en 1.
        limit (Optional[int]): Número de libros por página.

    Returns:
        List[Book]: Libros de la página (lista vacía si la página está fuera de rango).
    """
    stmt = select(Book).options(selectinload(Book.author)).order_by(Book.id)
    stmt = paginate(stmt, page, limit)
    return list(db.execute(stmt).scalars().all())


def get_book_by_id(db: Session, book_id: int) -> Optional[Book]:
    """
    Recupera un libro por su ID primario.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        book_id (int): ID del libro a recuperar.

    Returns:
        Optional[Book]: El objeto Book si se encuentra, None si no existe.
    """
    return db.get(Book, book_id)


def validate_book(book: Book) -> None:
    """
    Comprueba las restricciones de un libro (título obligatorio, 1 a 255 caracteres).

    Raises:
        pydantic.ValidationError: Si alguna restricción no se cumple.
    """
    BookBase.model_validate(book)


def _resolve_author(db: Session, book: Book, id_author: Optional[int]) -> None:
    author = get_author_by_id(db, id_author) if id_author is not None else None
    if id_author is not None and author is None:
        logger.warning(f"Author {id_author} not found, book '{book.title}' left without author")
    book.author = author


def _commit(db: Session, action: str) -> None:
    try:
        db.commit()
    except Exception as e:
        logger.exception(f"Error committing {action}: {e}")
        db.rollback()
        raise


def create_book(db: Session, book_in: BookWrite) -> Book:
    """
    Valida y guarda un libro nuevo, asociando el autor indicado si existe.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        book_in (BookWrite): Datos del libro.

    Returns:
        Book: El libro creado, con su ID asignado.

    Raises:
        pydantic.ValidationError: Si el libro no es válido; no se guarda nada.
    """
    db_book = Book(title=book_in.title, cover_text=book_in.cover_text)
    validate_book(db_book)

    _resolve_author(db, db_book, book_in.id_author)
    db.add(db_book)
    _commit(db, "book creation")
    db.refresh(db_book)
    logger.info(f"Book {db_book.id} created (author_id={db_book.author_id}).")
    return db_book


def update_book(db: Session, db_book: Book, book_in: BookWrite) -> Book:
    """
    Reemplaza título, contraportada y autor de un libro existente.

    El nuevo estado se valida sobre un libro transitorio antes de copiarlo al
    registro guardado, de modo que un fallo de validación no modifica nada.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        db_book (Book): Libro guardado a modificar.
        book_in (BookWrite): Nuevos datos del libro.

    Returns:
        Book: El libro actualizado.

    Raises:
        pydantic.ValidationError: Si el nuevo estado no es válido.
    """
    candidate = Book(title=book_in.title, cover_text=book_in.cover_text)
    validate_book(candidate)

    db_book.title = candidate.title
    db_book.cover_text = candidate.cover_text
    _resolve_author(db, db_book, book_in.id_author)
    _commit(db, f"update of book {db_book.id}")
    db.refresh(db_book)
    logger.info(f"Book {db_book.id} updated (author_id={db_book.author_id}).")
    return db_book


def delete_book(db: Session, db_book: Book) -> None:
    """Borra un libro."""
    book_id = db_book.id
    db.delete(db_book)
    _commit(db, f"deletion of book {book_id}")
    logger.info(f"Book {book_id} deleted.")
