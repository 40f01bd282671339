"""Script de datos iniciales — roles base y cuenta de administrador.

Seed script — Creates the built-in roles and an administrator account.
Safe to run repeatedly: only what is missing gets inserted.

Usage:
    python -m agenda.seed

Creates:
    - 3 roles: Administrador, Profesional, Paciente
    - 1 usuario Administrador (credentials from SEED_ADMIN_* settings)
"""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agenda.config import settings
from agenda.database import Base, async_session, engine
from agenda.models import Rol, Usuario
from agenda.utils.password import hash_password

BUILTIN_ROLES: tuple[str, ...] = ("Administrador", "Profesional", "Paciente")


async def seed_data(db: AsyncSession) -> dict[str, int]:
    """Inserta los roles y el administrador que falten.

    Insert the built-in roles and the administrator when they are missing.
    Flushes only; the caller commits.

    Returns:
        dict[str, int]: How many roles and usuarios were created
    """
    created: dict[str, int] = {"roles": 0, "usuarios": 0}

    result = await db.execute(select(Rol))
    roles: dict[str, Rol] = {rol.nombre: rol for rol in result.scalars().all()}
    for nombre in BUILTIN_ROLES:
        if nombre not in roles:
            rol = Rol(nombre=nombre)
            db.add(rol)
            await db.flush()  # genera rol.id (Flush to generate rol.id)
            roles[nombre] = rol
            created["roles"] += 1

    result = await db.execute(
        select(Usuario).where(Usuario.nombre_usuario == settings.SEED_ADMIN_USERNAME)
    )
    if result.scalar_one_or_none() is None:
        db.add(Usuario(
            rol_id=roles["Administrador"].id,
            nombre_usuario=settings.SEED_ADMIN_USERNAME,
            password_hash=hash_password(settings.SEED_ADMIN_PASSWORD),
            email=settings.SEED_ADMIN_EMAIL,
        ))
        await db.flush()
        created["usuarios"] += 1

    return created


async def seed() -> None:
    """Crea las tablas si faltan y siembra los datos iniciales.

    Create tables if they don't exist, then seed the initial data.
    """
    # Crear tablas — Create all tables from ORM metadata
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        created = await seed_data(db)
        await db.commit()

    if not any(created.values()):
        print("Already seeded. Skipping.")
        return
    print(f"Seeded {created['roles']} roles, {created['usuarios']} usuario(s).")
    if created["usuarios"]:
        print(f"  Admin: {settings.SEED_ADMIN_USERNAME}")


if __name__ == "__main__":
    asyncio.run(seed())
