"""Repositorio CRUD base — padre de todos los repositorios.

Base CRUD Repository — Parent class for all domain repositories.

Usage:
    class ProfesionalRepository(BaseRepository[Profesional]):
        def __init__(self) -> None:
            super().__init__(Profesional)
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from agenda.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Repositorio CRUD genérico.

    Generic CRUD repository providing common database operations.
    Repositories only flush; committing is the router's job.

    Attributes:
        model: The SQLAlchemy model class
    """

    def __init__(self, model: type[ModelType]) -> None:
        self.model: type[ModelType] = model

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: UUID,
    ) -> ModelType | None:
        """Obtiene un registro por su UUID.

        Retrieve a single record by its UUID.

        Args:
            db: Async database session
            record_id: UUID of the record to retrieve

        Returns:
            ModelType | None: Found record or None
        """
        result = await db.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """Obtiene todos los registros.

        Retrieve all records, optionally ordered.

        Args:
            db: Async database session
            order_by: Column to order by

        Returns:
            Sequence[ModelType]: List of matching records
        """
        query: Select = select(self.model)
        if order_by is not None:
            query = query.order_by(order_by)

        result = await db.execute(query)
        return result.scalars().all()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """Crea un nuevo registro.

        Create a new record in the database.

        Args:
            db: Async database session
            obj_data: Dictionary of data for the new record

        Returns:
            ModelType: The created record
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: UUID,
        update_data: dict[str, Any],
    ) -> ModelType | None:
        """Actualiza un registro existente.

        Update an existing record by its UUID. Only the keys present in
        update_data are written, so callers pass model_dump(exclude_unset=True).

        Args:
            db: Async database session
            record_id: UUID of the record to update
            update_data: Dictionary of fields and values to update

        Returns:
            ModelType | None: Updated record or None
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def exists(
        self,
        db: AsyncSession,
        filters: dict[str, Any],
        exclude_id: UUID | None = None,
    ) -> bool:
        """Indica si existe un registro que cumple los filtros.

        Check if a record matching the given filters exists.

        Args:
            db: Async database session
            filters: Filter criteria dictionary
            exclude_id: Record to ignore, used when checking uniqueness on update

        Returns:
            bool: Whether a matching record exists
        """
        query: Select = select(func.count()).select_from(self.model)
        for column_name, value in filters.items():
            if hasattr(self.model, column_name):
                query = query.where(getattr(self.model, column_name) == value)
        if exclude_id is not None:
            query = query.where(self.model.id != exclude_id)

        count: int = (await db.execute(query)).scalar() or 0
        return count > 0
