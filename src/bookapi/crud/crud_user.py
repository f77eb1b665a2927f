"""
Operaciones CRUD para el modelo User en la base de datos de la Book API.
Incluye funciones para crear usuarios, obtenerlos por email y autenticarlos.
Pensado para ser utilizado por la capa de autenticación y el script de carga de datos.
"""

import logging
from sqlalchemy.orm import Session
from ..models.user import User
from ..schemas.user import UserCreate
from ..core.security import hash_password, verify_password
from typing import Optional

logger = logging.getLogger(__name__)

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """
    Obtiene un usuario por su email.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        email (str): Email del usuario a buscar.

    Returns:
        Optional[User]: El usuario si existe, None si no.
    """
    return db.query(User).filter(User.email == email).first()

def create_user(db: Session, user: UserCreate) -> User:
    """
    Crea un nuevo usuario en la base de datos.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        user (UserCreate): Objeto con los datos del usuario a crear.

    Returns:
        User: El usuario creado.
    """
    hashed_password: str = hash_password(user.password)
    db_user: User = User(email=user.email, roles=list(user.roles), hashed_password=hashed_password)
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user

def authenticate_user(db: Session, email: str, password: str) -> Optional[User]:
    """
    Comprueba las credenciales de un usuario.

    Args:
        db (Session): Sesión de base de datos SQLAlchemy.
        email (str): Email del usuario.
        password (str): Contraseña en texto plano.

    Returns:
        Optional[User]: El usuario si las credenciales son correctas, None si no.
    """
    db_user = get_user_by_email(db, email=email)
    stored_hash = db_user.hashed_password if db_user is not None else None
    if not verify_password(password, stored_hash):
        logger.warning(f"Authentication failed for {email}")
        return None
    return db_user

