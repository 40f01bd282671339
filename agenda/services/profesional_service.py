"""Servicio de profesionales — reglas de negocio del CRUD.

Profesional Service — Business logic for health professional CRUD.
Enforces RUT/email uniqueness and maps ORM rows to response schemas.
"""

import logging
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from agenda.models.profesional import Profesional
from agenda.repositories.profesional_repository import profesional_repository
from agenda.schemas.profesional import (
    ProfesionalCreate,
    ProfesionalResponse,
    ProfesionalUpdate,
)
from agenda.utils.exceptions import DuplicateError, NotFoundError

logger = logging.getLogger(__name__)


class ProfesionalService:
    """Lógica de negocio de profesionales.

    Service handling professional business logic.
    """

    def _to_response(self, profesional: Profesional) -> ProfesionalResponse:
        return ProfesionalResponse(
            id=str(profesional.id),
            nombres=profesional.nombres,
            apellidos=profesional.apellidos,
            rut=profesional.rut,
            email=profesional.email,
            telefono=profesional.telefono,
            especialidad=profesional.especialidad,
            activo=profesional.activo,
            created_at=profesional.created_at,
            updated_at=profesional.updated_at,
        )

    async def create(
        self,
        db: AsyncSession,
        data: ProfesionalCreate,
    ) -> ProfesionalResponse:
        """Crea un nuevo profesional.

        Create a new professional.

        Args:
            db: Async database session
            data: Validated creation payload

        Returns:
            ProfesionalResponse: Created professional

        Raises:
            DuplicateError: RUT or email already registered
        """
        if await profesional_repository.rut_in_use(db, data.rut):
            raise DuplicateError("Ya existe un profesional con ese RUT")
        if await profesional_repository.email_in_use(db, data.email):
            raise DuplicateError("Ya existe un profesional con ese email")

        try:
            profesional: Profesional = await profesional_repository.create(
                db, data.model_dump()
            )
        except IntegrityError:
            # Carrera con otra alta concurrente — a concurrent insert won the unique constraint
            await db.rollback()
            raise DuplicateError("Ya existe un profesional con ese RUT o email")
        logger.info("Profesional creado id=%s", profesional.id)
        return self._to_response(profesional)

    async def find_all(self, db: AsyncSession) -> list[ProfesionalResponse]:
        """Lista todos los profesionales.

        List every professional, oldest first.
        """
        profesionales = await profesional_repository.get_all_ordered(db)
        return [self._to_response(p) for p in profesionales]

    async def find_one(
        self,
        db: AsyncSession,
        profesional_id: UUID,
    ) -> ProfesionalResponse | None:
        """Busca un profesional por ID; None si no existe.

        Retrieve a professional by ID. A missing professional is not an
        error here: the caller receives None.
        """
        profesional: Profesional | None = await profesional_repository.get_by_id(
            db, profesional_id
        )
        if profesional is None:
            return None
        return self._to_response(profesional)

    async def update(
        self,
        db: AsyncSession,
        profesional_id: UUID,
        data: ProfesionalUpdate,
    ) -> ProfesionalResponse:
        """Actualiza parcialmente un profesional.

        Partially update a professional. Only fields present in the payload
        are written.

        Args:
            db: Async database session
            profesional_id: Professional UUID
            data: Validated partial payload

        Returns:
            ProfesionalResponse: Updated professional

        Raises:
            NotFoundError: Professional not found
            DuplicateError: New RUT or email belongs to another professional
        """
        update_data: dict = data.model_dump(exclude_unset=True)

        existing: Profesional | None = await profesional_repository.get_by_id(db, profesional_id)
        if existing is None:
            raise NotFoundError("Profesional no encontrado")

        if "rut" in update_data and await profesional_repository.rut_in_use(
            db, update_data["rut"], exclude_id=profesional_id
        ):
            raise DuplicateError("Ya existe un profesional con ese RUT")
        if "email" in update_data and await profesional_repository.email_in_use(
            db, update_data["email"], exclude_id=profesional_id
        ):
            raise DuplicateError("Ya existe un profesional con ese email")

        try:
            profesional: Profesional | None = await profesional_repository.update(
                db, profesional_id, update_data
            )
        except IntegrityError:
            await db.rollback()
            raise DuplicateError("Ya existe un profesional con ese RUT o email")
        if profesional is None:
            raise NotFoundError("Profesional no encontrado")

        logger.info("Profesional actualizado id=%s campos=%s", profesional_id, sorted(update_data))
        return self._to_response(profesional)


# Instancia singleton — Singleton instance
profesional_service: ProfesionalService = ProfesionalService()
