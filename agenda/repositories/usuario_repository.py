"""Repositorio de usuarios.

Usuario Repository — Lookups used by authentication.
"""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from agenda.models.usuario import Usuario
from agenda.repositories.base import BaseRepository


class UsuarioRepository(BaseRepository[Usuario]):
    """Consultas sobre la tabla usuarios.

    Repository handling database queries for the usuarios table.
    """

    def __init__(self) -> None:
        super().__init__(Usuario)

    async def get_by_nombre_usuario(
        self,
        db: AsyncSession,
        nombre_usuario: str,
    ) -> Usuario | None:
        """Busca un usuario por nombre de usuario con su rol cargado.

        Retrieve a user by login name with the role eagerly loaded.

        Args:
            db: Async database session
            nombre_usuario: Login name

        Returns:
            Usuario | None: User with role loaded, or None
        """
        query: Select = (
            select(Usuario)
            .options(selectinload(Usuario.rol))
            .where(Usuario.nombre_usuario == nombre_usuario)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none()


# Instancia singleton — Singleton instance
usuario_repository: UsuarioRepository = UsuarioRepository()
