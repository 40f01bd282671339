"""Repositorio de profesionales.

Profesional Repository — CRUD and lookups for health professionals.
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from agenda.models.profesional import Profesional
from agenda.repositories.base import BaseRepository


class ProfesionalRepository(BaseRepository[Profesional]):
    """Consultas sobre la tabla profesionales.

    Repository handling database queries for the profesionales table.
    """

    def __init__(self) -> None:
        super().__init__(Profesional)

    async def get_all_ordered(self, db: AsyncSession) -> Sequence[Profesional]:
        """Todos los profesionales en orden de creación.

        Retrieve every professional ordered by creation time.
        """
        return await self.get_all(db, order_by=Profesional.created_at)

    async def rut_in_use(
        self,
        db: AsyncSession,
        rut: str,
        exclude_id: UUID | None = None,
    ) -> bool:
        return await self.exists(db, {"rut": rut}, exclude_id=exclude_id)

    async def email_in_use(
        self,
        db: AsyncSession,
        email: str,
        exclude_id: UUID | None = None,
    ) -> bool:
        return await self.exists(db, {"email": email}, exclude_id=exclude_id)


# Instancia singleton — Singleton instance
profesional_repository: ProfesionalRepository = ProfesionalRepository()
