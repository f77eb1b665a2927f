"""
Modelo ORM para la entidad Author en la base de datos de la Book API.
Un autor agrupa sus libros; al borrarlo se borran también sus libros.
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from bookapi.db.session import Base

class Author(Base):
    """
    Representa un autor en la base de datos.

    Atributos:
        id (int): Identificador primario del autor.
        first_name (str): Nombre del autor.
        last_name (str): Apellido del autor.
        books (List[Book]): Libros escritos por el autor.
    """
    __tablename__ = "authors"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)

    books = relationship(
        "Book",
        back_populates="author",
        cascade="all, delete-orphan",
        order_by="Book.id",
    )

    def __repr__(self) -> str:
        return f"<Author(id={self.id}, name='{self.first_name} {self.last_name}')>"
