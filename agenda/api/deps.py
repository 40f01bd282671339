"""Dependencias de FastAPI — autenticación y guardas de rol.

FastAPI dependency injection module — Authentication and role guards.

Authentication Flow:
    1. Client sends Authorization: Bearer <token>
    2. HTTPBearer extracts the token
    3. decode_token() verifies signature and expiration
    4. The claims are validated into a JwtPayload and handed to the route

Authorization Flow (require_roles):
    1. Inert when settings.ENFORCE_ROLE_GUARDS is off
    2. Otherwise the token is authenticated as above
    3. Claim "nombreRol" must be one of the allowed role names, else 403
"""

from typing import Annotated, Callable, Awaitable

import jwt
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from pydantic import ValidationError

from agenda.config import settings
from agenda.schemas.auth import JwtPayload
from agenda.utils.exceptions import ForbiddenError, UnauthorizedError
from agenda.utils.jwt import decode_token

# auto_error=False: la ausencia de token se reporta como 401 (Missing token is reported as 401, not 403)
security: HTTPBearer = HTTPBearer(auto_error=False)


def _payload_from_credentials(
    credentials: HTTPAuthorizationCredentials | None,
) -> JwtPayload:
    if credentials is None:
        raise UnauthorizedError("No autenticado")
    try:
        claims: dict = decode_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        raise UnauthorizedError("Token expirado")
    except jwt.InvalidTokenError:
        raise UnauthorizedError("Token inválido")

    if claims.get("type") != "access":
        raise UnauthorizedError("Tipo de token inválido")
    try:
        return JwtPayload.model_validate(claims)
    except ValidationError:
        raise UnauthorizedError("Token inválido")


async def get_jwt_payload(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> JwtPayload:
    """Extrae y valida los claims del token Bearer.

    Decode the Bearer token and return its claims.

    Raises:
        UnauthorizedError: Missing, invalid, expired, or non-access token
    """
    return _payload_from_credentials(credentials)


def require_roles(*roles: str) -> Callable[..., Awaitable[JwtPayload | None]]:
    """Fábrica de dependencias que restringe por nombre de rol.

    Dependency factory restricting a route to the given role names.
    Returns None without touching the request while role guards are disabled.
    """
    allowed: frozenset[str] = frozenset(roles)

    async def _check(
        credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    ) -> JwtPayload | None:
        if not settings.ENFORCE_ROLE_GUARDS:
            return None
        payload: JwtPayload = _payload_from_credentials(credentials)
        if payload.nombreRol not in allowed:
            raise ForbiddenError("Permisos insuficientes")
        return payload

    return _check
