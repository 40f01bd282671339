"""Pruebas del script de datos iniciales.

Seed script tests — idempotency and a usable administrator login.
"""

from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from agenda.config import settings
from agenda.models import Rol, Usuario
from agenda.seed import BUILTIN_ROLES, seed_data


async def _count(db: AsyncSession, model) -> int:
    return (await db.execute(select(func.count()).select_from(model))).scalar()


class TestSeed:
    """Siembra de roles y administrador."""

    async def test_seed_creates_roles_and_admin(self, db: AsyncSession):
        created = await seed_data(db)
        assert created == {"roles": 3, "usuarios": 1}

        nombres = (await db.execute(select(Rol.nombre))).scalars().all()
        assert sorted(nombres) == sorted(BUILTIN_ROLES)

    async def test_seed_is_idempotent(self, db: AsyncSession):
        await seed_data(db)
        await db.commit()

        created = await seed_data(db)
        assert created == {"roles": 0, "usuarios": 0}
        assert await _count(db, Rol) == 3
        assert await _count(db, Usuario) == 1

    async def test_seed_fills_missing_roles_only(self, db: AsyncSession):
        db.add(Rol(nombre="Administrador"))
        await db.flush()

        created = await seed_data(db)
        assert created == {"roles": 2, "usuarios": 1}
        assert await _count(db, Rol) == 3

    async def test_seeded_admin_can_login(self, client: AsyncClient, db: AsyncSession):
        await seed_data(db)
        await db.commit()

        res = await client.post("/api/auth/login", json={
            "nombre_usuario": settings.SEED_ADMIN_USERNAME,
            "password": settings.SEED_ADMIN_PASSWORD,
        })
        assert res.status_code == 200
        assert res.json()["access_token"]
