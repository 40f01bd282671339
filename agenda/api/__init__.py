"""Paquete de routers de la API — agrupa todos los endpoints.

API Router package — Aggregates every endpoint into a single router that
the application mounts under the global prefix (/api).

Included routers:
    - health: disponibilidad de la aplicación (Application availability)
    - auth: autenticación (Login)
    - profesionales: gestión de profesionales (Health professional management)
"""

from fastapi import APIRouter

from agenda.api.auth import router as auth_router
from agenda.api.health import router as health_router
from agenda.api.profesionales import router as profesionales_router

api_router: APIRouter = APIRouter()

api_router.include_router(health_router, tags=["App"])
api_router.include_router(auth_router, prefix="/auth", tags=["Autenticación"])
api_router.include_router(profesionales_router, prefix="/profesionales", tags=["Profesionales"])
