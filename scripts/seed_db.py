"""
Script para cargar datos de ejemplo en la base de datos de la Book API.

Este módulo crea las tablas si no existen y añade dos usuarios (uno normal y
un administrador), una lista de autores y libros asociados aleatoriamente a
esos autores. Utiliza Faker para los nombres y las contraportadas.

Uso:
    Ejecutar directamente este script tras configurar DATABASE_URL.

Nota:
    - Los usuarios existentes se reutilizan; autores y libros se añaden siempre.
    - Todos los usuarios comparten la contraseña SEED_PASSWORD.
"""

import random
import logging
import sys
from typing import List, Optional

from faker import Faker
from sqlalchemy.orm import Session

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

try:
    from bookapi.db.session import Base, SessionLocal, engine
    from bookapi.models.author import Author
    from bookapi.models.book import Book
    from bookapi.schemas.user import UserCreate
    from bookapi.crud.crud_user import create_user, get_user_by_email
    from bookapi.core.security import ROLE_ADMIN, ROLE_USER
    logger.info("Módulos del proyecto importados correctamente.")
except ImportError as e:
    logger.error(f"Error importando módulos: {e}.")
    logger.error("Asegúrate de haber ejecutado 'pip install -e .'")
    sys.exit(1)

SEED_USERS = [
    {"email": "user@bookapi.com", "roles": [ROLE_USER]},
    {"email": "admin@bookapi.com", "roles": [ROLE_ADMIN]},
]
SEED_PASSWORD: str = "password"
NUM_AUTHORS: int = 10
NUM_BOOKS: int = 20

fake = Faker(['fr_FR', 'en_US'])


def seed_users(db: Session) -> None:
    for data in SEED_USERS:
        existing_user = get_user_by_email(db, email=data["email"])
        if existing_user:
            logger.info(f"  Usuario encontrado: {existing_user.email} (ID: {existing_user.id})")
            continue
        new_user = create_user(db, UserCreate(email=data["email"], password=SEED_PASSWORD, roles=data["roles"]))
        logger.info(f"  Usuario creado: {new_user.email} {new_user.roles} (ID: {new_user.id})")


def seed_catalog(db: Session) -> None:
    authors: List[Author] = [
        Author(first_name=fake.first_name(), last_name=fake.last_name())
        for _ in range(NUM_AUTHORS)
    ]
    db.add_all(authors)

    for i in range(NUM_BOOKS):
        db.add(Book(
            title=fake.sentence(nb_words=4).rstrip("."),
            cover_text=f"Quatrième de couverture numéro : {i}. {fake.paragraph()}",
            author=random.choice(authors),
        ))

    db.commit()
    logger.info(f"  {NUM_AUTHORS} autores y {NUM_BOOKS} libros añadidos.")


def seed() -> None:
    """
    Crea las tablas y carga usuarios, autores y libros.

    Returns:
        None
    """
    logger.info("--- Creando tablas ---")
    Base.metadata.create_all(bind=engine)

    db: Optional[Session] = None
    try:
        db = SessionLocal()
        logger.info("--- Fase 1: Usuarios ---")
        seed_users(db)
        logger.info("--- Fase 2: Autores y libros ---")
        seed_catalog(db)
    except Exception as e:
        logger.exception(f"Error durante la carga de datos: {e}")
        if db:
            db.rollback()
        raise
    finally:
        if db:
            db.close()
            logger.info("Sesión de base de datos cerrada.")

    logger.info("--- Carga de datos completada ---")


if __name__ == "__main__":
    seed()
