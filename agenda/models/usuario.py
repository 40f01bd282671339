"""Modelos de usuario y rol.

User and Role SQLAlchemy ORM model definitions.
Roles are referenced by name in the JWT payload (claim "nombreRol").

Tables:
    - roles: Roles del sistema (System roles, e.g. Administrador, Profesional)
    - usuarios: Cuentas de usuario (User accounts)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Boolean, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from agenda.database import Base


class Rol(Base):
    """Rol de usuario.

    Role model. The role name travels inside access tokens and is what
    role guards compare against.

    Attributes:
        id: Unique identifier
        nombre: Role name, unique (e.g. "Administrador")
        created_at: Creation timestamp (UTC)
        updated_at: Last update timestamp (UTC)
    """

    __tablename__ = "roles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # Nombre del rol — unique role display name
    nombre: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    usuarios = relationship("Usuario", back_populates="rol")


class Usuario(Base):
    """Cuenta de usuario del sistema.

    User account. Each user has exactly one role.

    Attributes:
        id: Unique identifier
        rol_id: Assigned role foreign key
        nombre_usuario: Login name, globally unique
        password_hash: Bcrypt password hash
        email: Email address (optional)
        activo: Active flag; inactive users cannot log in
        created_at: Creation timestamp (UTC)
        updated_at: Last update timestamp (UTC)
    """

    __tablename__ = "usuarios"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # Rol asignado — RESTRICT: no se borra un rol en uso (Role in use cannot be deleted)
    rol_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("roles.id", ondelete="RESTRICT"), nullable=False)
    nombre_usuario: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    activo: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    rol = relationship("Rol", back_populates="usuarios")
