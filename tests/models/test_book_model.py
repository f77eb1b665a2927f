# tests/models/test_book_model.py
import pytest
from sqlalchemy.exc import IntegrityError

from bookapi.models.author import Author
from bookapi.models.book import Book

def test_create_book(db_session):
    """Test creating a valid Book instance."""
    title = "Une chambre à soi"
    cover_text = "Une femme, pour être en mesure d'écrire, doit avoir de l'argent et une chambre à elle..."

    book = Book(title=title, cover_text=cover_text)
    db_session.add(book)
    db_session.commit()

    retrieved_book = db_session.query(Book).filter(Book.title == title).first()

    assert retrieved_book is not None
    assert retrieved_book.id is not None
    assert retrieved_book.cover_text == cover_text
    assert retrieved_book.author is None

def test_create_book_no_title(db_session):
    """Test that creating a book without a title raises IntegrityError."""
    book = Book(cover_text="No title here")
    db_session.add(book)

    with pytest.raises(IntegrityError):
        db_session.commit()

def test_book_author_relationship(db_session):
    """Test that a book is linked to its author and appears in the back-reference."""
    author = Author(first_name="Virginia", last_name="Woolf")
    book = Book(title="Mrs Dalloway", author=author)
    db_session.add(book)
    db_session.commit()
    db_session.refresh(author)

    assert book.author_id == author.id
    assert [b.id for b in author.books] == [book.id]

def test_book_repr(db_session):
    """Test the __repr__ method of the Book model."""
    title = "Representation Test Book Title That Is Quite Long"

    book = Book(title=title)
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)

    expected_repr = f"<Book(id={book.id}, title='{title[:30]}...', author_id=None)>"
    assert repr(book) == expected_repr
