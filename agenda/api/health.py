"""Router de disponibilidad de la aplicación.

Health check router for load balancers and monitoring.
"""

from fastapi import APIRouter

router: APIRouter = APIRouter()


@router.get("/health")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}
