"""Infraestructura de pruebas — BD SQLite en memoria, sesión y cliente httpx.

Test infrastructure — In-memory SQLite database, session, and httpx client fixtures.
Every test gets a fresh schema on its own StaticPool engine, so no cleanup
between tests is needed.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from agenda.config import settings
from agenda.database import Base, get_db
from agenda.main import app
from agenda.models import *  # noqa: F401,F403 — register all models with metadata
from agenda.utils.jwt import create_access_token
from agenda.utils.password import hash_password

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
FRONTEND_ORIGIN = "http://localhost:5173"


# ---------------------------------------------------------------------------
# Motor, sesión y cliente — Engine, session, client
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Motor SQLite en memoria con el esquema creado."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Sesión aislada para cada prueba."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Cliente de pruebas de FastAPI — sobrescribe la sesión de BD."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def enforce_roles(monkeypatch):
    """Activa las guardas de rol durante la prueba."""
    monkeypatch.setattr(settings, "ENFORCE_ROLE_GUARDS", True)


# ---------------------------------------------------------------------------
# Datos de prueba — Test data helpers
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def roles(db: AsyncSession):
    """Crea los roles base."""
    from agenda.models.usuario import Rol
    result = {}
    for nombre in ("Administrador", "Profesional", "Paciente"):
        rol = Rol(nombre=nombre)
        db.add(rol)
        await db.flush()
        await db.refresh(rol)
        result[nombre] = rol
    return result


@pytest_asyncio.fixture
async def admin_user(db: AsyncSession, roles):
    """Usuario administrador."""
    from agenda.models.usuario import Usuario
    usuario = Usuario(
        rol_id=roles["Administrador"].id,
        nombre_usuario="admin",
        password_hash=hash_password("admin123!"),
        email="admin@agenda.cl",
    )
    db.add(usuario)
    await db.flush()
    await db.refresh(usuario)
    return usuario


@pytest_asyncio.fixture
async def profesional(db: AsyncSession):
    """Profesional existente."""
    from agenda.models.profesional import Profesional
    p = Profesional(
        nombres="Ana María",
        apellidos="Rojas Soto",
        rut="12345678-5",
        email="ana.rojas@agenda.cl",
        telefono="+56911112222",
        especialidad="Kinesiología",
    )
    db.add(p)
    await db.flush()
    await db.refresh(p)
    return p


def make_token(usuario_id: str, nombre_usuario: str, nombre_rol: str) -> str:
    """Token de acceso JWT para pruebas."""
    return create_access_token({
        "sub": usuario_id,
        "nombreUsuario": nombre_usuario,
        "nombreRol": nombre_rol,
    })


@pytest.fixture
def admin_token(admin_user) -> str:
    return make_token(str(admin_user.id), "admin", "Administrador")


@pytest.fixture
def paciente_token() -> str:
    return make_token("9b1f3c1e-0000-4000-8000-000000000001", "paciente1", "Paciente")


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
