"""
Esquemas Pydantic para la entidad User de la Book API.
Define el modelo de entrada usado para crear usuarios (script de carga y tests).
"""

from typing import List

from pydantic import BaseModel, EmailStr, field_validator

from ..core.security import KNOWN_ROLES

class UserCreate(BaseModel):
    """
    Esquema para la creación de un usuario.

    Atributos:
        email (EmailStr): Correo electrónico del usuario.
        password (str): Contraseña en texto plano (será hasheada antes de almacenar).
        roles (List[str]): Roles adicionales a ROLE_USER.
    """
    email: EmailStr
    password: str
    roles: List[str] = []

    @field_validator("roles")
    @classmethod
    def roles_known(cls, roles: List[str]) -> List[str]:
        unknown = sorted(set(roles) - KNOWN_ROLES)
        if unknown:
            raise ValueError(f"Unknown roles: {', '.join(unknown)}")
        return roles

