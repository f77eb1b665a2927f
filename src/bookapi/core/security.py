"""
Passwords and roles for the Book API.

Callers authenticate with HTTP Basic (see `bookapi.api.deps`): the email names the
user and the password is checked against the bcrypt hash stored on it. Roles are
plain strings stored on the user; every account implicitly holds ROLE_USER and
the write endpoints require ROLE_ADMIN.

Functions:
    hash_password(password: str) -> str
    verify_password(plain_password: str, hashed_password: Optional[str]) -> bool
    effective_roles(roles: Iterable[str]) -> FrozenSet[str]
"""

from typing import FrozenSet, Iterable, Optional

from passlib.context import CryptContext

ROLE_USER = "ROLE_USER"
ROLE_ADMIN = "ROLE_ADMIN"
KNOWN_ROLES = frozenset({ROLE_USER, ROLE_ADMIN})

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

def hash_password(password: str) -> str:
    """
    Hashes a password for storage on a user.

    Args:
        password (str): Plain text password.

    Returns:
        str: bcrypt hash.
    """
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    """
    Checks a password against a stored hash.

    With no hash (unknown email) a dummy verification still runs, so an unknown
    user and a wrong password take the same time to reject.

    Args:
        plain_password (str): Password sent by the caller.
        hashed_password (Optional[str]): Stored hash, None when the user does not exist.

    Returns:
        bool: True only when the password matches an existing hash.
    """
    if hashed_password is None:
        pwd_context.dummy_verify()
        return False
    return pwd_context.verify(plain_password, hashed_password)

def effective_roles(roles: Optional[Iterable[str]]) -> FrozenSet[str]:
    """Stored roles plus the implicit ROLE_USER."""
    return frozenset(roles or ()) | {ROLE_USER}
