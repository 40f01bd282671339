"""Motor y sesiones de base de datos.

Database engine and session configuration module.
Sets up the async SQLAlchemy engine, session factory, and ORM base class
for the PostgreSQL database connection via asyncpg.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, AsyncEngine, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from agenda.config import settings

# Motor asíncrono — Async database engine (asyncpg driver)
# pool_pre_ping=True: valida la conexión antes de usarla (Validates connections before use)
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
    pool_size=5,
    max_overflow=10,
)

# expire_on_commit=False: atributos accesibles tras el commit (Attribute access after commit without refresh)
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Clase base declarativa de SQLAlchemy.

    Declarative base class for all ORM models.
    """

    pass


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Entrega una sesión asíncrona y la cierra al terminar la petición.

    FastAPI dependency that yields an async database session.
    The session is closed after the request completes.

    Yields:
        AsyncSession: Async session instance
    """
    async with async_session() as session:
        try:
            yield session
        finally:
            await session.close()
