# tests/crud/test_crud_book.py
import pytest
from pydantic import ValidationError

from bookapi.crud import (
    get_books,
    get_book_by_id,
    validate_book,
    create_book,
    update_book,
    delete_book,
)
from bookapi.models.book import Book
from bookapi.schemas.book import BookWrite

def test_get_books_returns_all_in_id_order(db_session, make_books):
    books = make_books(7)

    result = get_books(db_session)

    assert [b.id for b in result] == [b.id for b in books]

def test_get_books_second_page(db_session, make_books):
    """page=2, limit=5 returns records 6 to 10."""
    books = make_books(12)

    result = get_books(db_session, page=2, limit=5)

    assert [b.id for b in result] == [b.id for b in books[5:10]]

def test_get_books_page_beyond_end_is_empty(db_session, make_books):
    make_books(4)

    assert get_books(db_session, page=3, limit=5) == []

def test_get_books_page_without_limit_returns_all(db_session, make_books):
    make_books(6)

    assert len(get_books(db_session, page=2)) == 6
    assert len(get_books(db_session, limit=2)) == 6

def test_create_book_with_author(db_session, make_author):
    author = make_author()
    book_in = BookWrite(title="Orlando", cover_text="Une biographie", id_author=author.id)

    book = create_book(db_session, book_in)

    assert book.id is not None
    assert book.author_id == author.id
    assert get_book_by_id(db_session, book.id).author.last_name == "Woolf"

def test_create_book_with_unknown_author_leaves_author_unset(db_session):
    book = create_book(db_session, BookWrite(title="Orphelin", id_author=9999))

    assert book.id is not None
    assert book.author is None
    assert book.author_id is None

def test_create_book_accepts_camel_case_payload(db_session, make_author):
    author = make_author()
    book_in = BookWrite.model_validate({"title": "Les Vagues", "coverText": "Six voix", "idAuthor": author.id})

    book = create_book(db_session, book_in)

    assert book.cover_text == "Six voix"
    assert book.author_id == author.id

def test_create_invalid_book_persists_nothing(db_session):
    """Constraints are checked on the entity itself, not only on the request."""
    book_in = BookWrite.model_construct(title="", cover_text=None, id_author=None)

    with pytest.raises(ValidationError):
        create_book(db_session, book_in)

    assert db_session.query(Book).count() == 0

def test_update_book_replaces_fields_and_author(db_session, make_author, make_books):
    first, second = make_author("Victor", "Hugo"), make_author("George", "Sand")
    book = make_books(1, author=first)[0]

    update_book(db_session, book, BookWrite(title="Nouveau titre", id_author=second.id))

    db_session.expire_all()
    stored = get_book_by_id(db_session, book.id)
    assert stored.title == "Nouveau titre"
    assert stored.cover_text is None
    assert stored.author_id == second.id

def test_update_book_unknown_author_unsets_it(db_session, make_author, make_books):
    book = make_books(1, author=make_author())[0]

    update_book(db_session, book, BookWrite(title="Sans auteur", id_author=424242))

    assert get_book_by_id(db_session, book.id).author is None

def test_update_book_too_long_title_leaves_record_unchanged(db_session, make_books):
    book = make_books(1)[0]
    original_title = book.title
    book_in = BookWrite.model_construct(title="x" * 300, cover_text="changed", id_author=None)

    with pytest.raises(ValidationError):
        update_book(db_session, book, book_in)

    db_session.expire_all()
    stored = get_book_by_id(db_session, book.id)
    assert stored.title == original_title
    assert stored.cover_text != "changed"

def test_validate_book_rejects_blank_title():
    with pytest.raises(ValidationError) as exc_info:
        validate_book(Book(title="   "))

    assert exc_info.value.errors()[0]["loc"] == ("title",)

def test_validate_book_accepts_valid_book():
    validate_book(Book(title="Valid", cover_text=None))

def test_delete_book(db_session, make_books):
    book = make_books(2)[0]

    delete_book(db_session, book)

    assert get_book_by_id(db_session, book.id) is None
    assert db_session.query(Book).count() == 1
