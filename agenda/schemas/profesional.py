"""Esquemas Pydantic de profesionales.

Profesional Pydantic request/response schema definitions.
Request schemas forbid unknown fields: a payload carrying a property that is
not declared here is rejected with 422 instead of being silently dropped.
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Largo máximo de un RUT normalizado, "12345678-K" — Max length of a normalized RUT
_RUT_MAX_LENGTH = 10


def normalize_rut(value: str) -> str:
    """Normaliza un RUT: sin puntos ni espacios, guion antes del DV, DV en mayúscula.

    Normalize a RUT so the same national id always maps to one stored value:
    "11.111.111-k", "11111111K" and "11111111-K" all become "11111111-K".
    """
    compact = value.replace(".", "").replace(" ", "").replace("-", "").upper()
    if len(compact) < 2 or not compact[:-1].isdigit() or not (compact[-1].isdigit() or compact[-1] == "K"):
        raise ValueError("RUT inválido")
    rut = f"{compact[:-1]}-{compact[-1]}"
    if len(rut) > _RUT_MAX_LENGTH:
        raise ValueError("RUT inválido")
    return rut


class ProfesionalCreate(BaseModel):
    """Solicitud de creación de profesional.

    Profesional creation request schema.

    Attributes:
        nombres: Given names
        apellidos: Family names
        rut: National identifier, unique
        email: Contact email, unique
        telefono: Contact phone (optional)
        especialidad: Medical specialty (optional)
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    nombres: str = Field(min_length=1, max_length=100)
    apellidos: str = Field(min_length=1, max_length=100)
    rut: str = Field(min_length=3, max_length=14)
    email: str = Field(min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    telefono: str | None = Field(default=None, max_length=20)
    especialidad: str | None = Field(default=None, max_length=100)

    @field_validator("email")
    @classmethod
    def _lower_email(cls, value: str) -> str:
        return value.lower()

    @field_validator("rut")
    @classmethod
    def _normalize_rut(cls, value: str) -> str:
        return normalize_rut(value)


class ProfesionalUpdate(BaseModel):
    """Solicitud de actualización parcial de profesional.

    Profesional partial update request schema. Only the fields sent by the
    client are applied (model_dump(exclude_unset=True)).
    """

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    nombres: str | None = Field(default=None, min_length=1, max_length=100)
    apellidos: str | None = Field(default=None, min_length=1, max_length=100)
    rut: str | None = Field(default=None, min_length=3, max_length=14)
    email: str | None = Field(default=None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
    telefono: str | None = Field(default=None, max_length=20)
    especialidad: str | None = Field(default=None, max_length=100)
    activo: bool | None = None

    @field_validator("nombres", "apellidos", "rut", "email", "activo")
    @classmethod
    def _not_null(cls, value: object) -> object:
        # Columnas NOT NULL — se omiten, no se anulan (NOT NULL columns may be omitted, never nulled)
        if value is None:
            raise ValueError("no puede ser nulo")
        return value

    @field_validator("email")
    @classmethod
    def _lower_email(cls, value: str) -> str:
        return value.lower()

    @field_validator("rut")
    @classmethod
    def _normalize_rut(cls, value: str) -> str:
        return normalize_rut(value)


class ProfesionalResponse(BaseModel):
    """Respuesta de profesional.

    Profesional response schema returned from the API.
    """

    id: str
    nombres: str
    apellidos: str
    rut: str
    email: str
    telefono: str | None
    especialidad: str | None
    activo: bool
    created_at: datetime
    updated_at: datetime
