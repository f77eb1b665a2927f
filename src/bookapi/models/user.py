"""
Modelo ORM para la entidad User en la base de datos de la Book API.
Un usuario se identifica por su email y tiene un conjunto de roles.
"""

from sqlalchemy import Column, Integer, String, JSON, DateTime, func
from bookapi.db.session import Base
from bookapi.core.security import effective_roles

class User(Base):
    """
    Representa un usuario registrado en el sistema.

    Atributos:
        id (int): Identificador primario del usuario.
        email (str): Correo electrónico único del usuario.
        roles (List[str]): Roles asignados (p. ej. "ROLE_ADMIN").
        hashed_password (str): Contraseña almacenada de forma segura (hash).
        created_at (datetime): Fecha de creación del usuario.
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    email = Column(String(180), unique=True, index=True, nullable=False)
    roles = Column(JSON, nullable=False, default=list)
    hashed_password = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def get_roles(self) -> frozenset:
        """
        Devuelve los roles efectivos del usuario; ROLE_USER siempre está incluido.

        Returns:
            frozenset: Conjunto de roles.
        """
        return effective_roles(self.roles)

    def has_role(self, role: str) -> bool:
        return role in self.get_roles()

    def __repr__(self) -> str:
        """
        Representación legible del objeto User para depuración.

        Returns:
            str: Cadena representando el usuario.
        """
        return f"<User(id={self.id}, email='{self.email}')>"
