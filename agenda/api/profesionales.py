"""Router de profesionales — endpoints CRUD y usuario actual.

Profesionales Router — CRUD endpoints for health professionals plus the
"current user" echo of token claims.

Permission Matrix:
    - Crear/actualizar: Administrador, Profesional (only when role guards are enabled)
    - Listar/consultar: sin restricción (unrestricted)
    - /me: cualquier token de acceso válido (any valid access token)
"""

import logging
from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from agenda.api.deps import get_jwt_payload, require_roles
from agenda.database import get_db
from agenda.schemas.auth import JwtPayload, MeResponse
from agenda.schemas.profesional import (
    ProfesionalCreate,
    ProfesionalResponse,
    ProfesionalUpdate,
)
from agenda.services.profesional_service import profesional_service

logger = logging.getLogger(__name__)

router: APIRouter = APIRouter()

# Roles con permiso de escritura — Roles allowed to write
_WRITE_ROLES = ("Administrador", "Profesional")


@router.post(
    "",
    response_model=ProfesionalResponse,
    status_code=201,
    summary="Crea un nuevo profesional",
    dependencies=[Depends(require_roles(*_WRITE_ROLES))],
)
async def create_profesional(
    data: ProfesionalCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProfesionalResponse:
    """Crea un nuevo profesional."""
    result: ProfesionalResponse = await profesional_service.create(db, data)
    await db.commit()
    return result


@router.get(
    "",
    response_model=list[ProfesionalResponse],
    summary="Obtiene todos los profesionales",
)
async def list_profesionales(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[ProfesionalResponse]:
    return await profesional_service.find_all(db)


# Declarado antes de /{profesional_id} — Declared before /{profesional_id} so "me" is not parsed as an ID
@router.get("/me", response_model=MeResponse, summary="Datos del usuario autenticado")
async def me(
    payload: Annotated[JwtPayload, Depends(get_jwt_payload)],
) -> MeResponse:
    """Devuelve los claims del token mapeados para el frontend.

    Echo the decoded token claims: sub -> usuarioId, nombreRol -> rol.
    """
    logger.debug("Datos del usuario autenticado: %s", payload.model_dump())
    return MeResponse(
        usuarioId=payload.sub,
        rol=payload.nombreRol,
        nombreUsuario=payload.nombreUsuario,
        mensaje="Acceso y token válidos.",
    )


@router.get(
    "/{profesional_id}",
    response_model=ProfesionalResponse | None,
    summary="Obtiene un profesional por su ID",
)
async def get_profesional(
    profesional_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProfesionalResponse | None:
    """Obtiene un profesional; responde null si no existe.

    Retrieve a professional. Responds with JSON null when it does not exist.
    """
    return await profesional_service.find_one(db, profesional_id)


@router.patch(
    "/{profesional_id}",
    response_model=ProfesionalResponse,
    summary="Actualiza un profesional existente",
    dependencies=[Depends(require_roles(*_WRITE_ROLES))],
)
async def update_profesional(
    profesional_id: UUID,
    data: ProfesionalUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ProfesionalResponse:
    result: ProfesionalResponse = await profesional_service.update(db, profesional_id, data)
    await db.commit()
    return result
