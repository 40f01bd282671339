"""Modelo de profesional de la salud.

Health professional SQLAlchemy ORM model definition.

Tables:
    - profesionales: Profesionales de la salud (Health-service providers)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Boolean, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from agenda.database import Base


class Profesional(Base):
    """Profesional de la salud que presta servicios.

    Health professional who provides services to patients.
    RUT and email are unique across all professionals.

    Attributes:
        id: Unique identifier
        nombres: Given names
        apellidos: Family names
        rut: National identifier, unique
        email: Contact email, unique
        telefono: Contact phone (optional)
        especialidad: Medical specialty (optional)
        activo: Active flag
        created_at: Creation timestamp (UTC)
        updated_at: Last update timestamp (UTC)
    """

    __tablename__ = "profesionales"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    nombres: Mapped[str] = mapped_column(String(100), nullable=False)
    apellidos: Mapped[str] = mapped_column(String(100), nullable=False)
    # RUT — identificador nacional único (Unique national identifier)
    rut: Mapped[str] = mapped_column(String(12), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    telefono: Mapped[str | None] = mapped_column(String(20), nullable=True)
    especialidad: Mapped[str | None] = mapped_column(String(100), nullable=True)
    activo: Mapped[bool] = mapped_column(Boolean, default=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))
