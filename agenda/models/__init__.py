"""Paquete de modelos ORM — punto central de importación.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the metadata,
which Alembic migrations and relationship resolution require.

Modules:
    usuario: Roles y usuarios (Role and Usuario)
    profesional: Profesionales de la salud (Profesional)
"""

from agenda.models.usuario import Rol, Usuario
from agenda.models.profesional import Profesional

__all__ = [
    "Rol", "Usuario",
    "Profesional",
]
