"""Router de autenticación — inicio de sesión.

Auth Router — Login endpoint issuing access tokens.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from agenda.database import get_db
from agenda.schemas.auth import LoginRequest, TokenResponse
from agenda.services.auth_service import auth_service

router: APIRouter = APIRouter()


@router.post("/login", response_model=TokenResponse)
async def login(
    data: LoginRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TokenResponse:
    """Inicia sesión y devuelve un token de acceso.

    Login endpoint. Returns a bearer access token.
    """
    return await auth_service.login(db, data)
