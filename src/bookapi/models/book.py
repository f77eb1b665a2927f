"""
Modelo ORM para la entidad Book en la base de datos de la Book API.
Define los campos principales de un libro y su relación con el autor.
"""

from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from bookapi.db.session import Base

class Book(Base):
    """
    Representa un libro en la base de datos.

    Atributos:
        id (int): Identificador primario del libro.
        title (str): Título del libro (1 a 255 caracteres).
        cover_text (str): Texto de contraportada, opcional.
        author_id (int): Clave foránea hacia el autor, opcional.
        author (Author): Autor del libro, si lo tiene.
    """
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    cover_text = Column(Text, nullable=True)
    author_id = Column(Integer, ForeignKey("authors.id", ondelete="CASCADE"), nullable=True, index=True)

    author = relationship("Author", back_populates="books")

    def __repr__(self) -> str:
        """
        Representación legible del objeto Book para depuración.

        Returns:
            str: Cadena representando el libro.
        """
        return f"<Book(id={self.id}, title='{self.title[:30]}...', author_id={self.author_id})>"
