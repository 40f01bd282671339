"""create roles, usuarios and profesionales

Revision ID: 3c9e1f0a7b21
Revises:
Create Date: 2026-10-19 00:00:00.000000

Tablas iniciales: roles, usuarios y profesionales.
Initial tables: roles, usuarios and profesionales.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c9e1f0a7b21"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "roles",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("nombre", sa.String(50), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("nombre", name="uq_roles_nombre"),
    )

    op.create_table(
        "usuarios",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("rol_id", sa.Uuid(), sa.ForeignKey("roles.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("nombre_usuario", sa.String(100), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("activo", sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("nombre_usuario", name="uq_usuarios_nombre_usuario"),
    )

    op.create_table(
        "profesionales",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("nombres", sa.String(100), nullable=False),
        sa.Column("apellidos", sa.String(100), nullable=False),
        sa.Column("rut", sa.String(12), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("telefono", sa.String(20), nullable=True),
        sa.Column("especialidad", sa.String(100), nullable=True),
        sa.Column("activo", sa.Boolean(), server_default=sa.true(), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("rut", name="uq_profesionales_rut"),
        sa.UniqueConstraint("email", name="uq_profesionales_email"),
    )

    # Roles base del sistema — Seed the built-in roles
    roles = sa.table("roles", sa.column("id", sa.Uuid()), sa.column("nombre", sa.String))
    op.execute(
        roles.insert().values([
            {"id": sa.text("gen_random_uuid()"), "nombre": nombre}
            for nombre in ("Administrador", "Profesional", "Paciente")
        ])
    )


def downgrade() -> None:
    op.drop_table("profesionales")
    op.drop_table("usuarios")
    op.drop_table("roles")
