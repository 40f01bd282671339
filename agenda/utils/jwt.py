"""Creación y verificación de tokens JWT.

JWT token creation and verification utility module.

JWT Payload Structure:
    {
        "sub": "usuario_uuid",          # Usuario ID
        "nombreUsuario": "jperez",      # Login name
        "nombreRol": "Profesional",     # Role name, checked by role guards
        "exp": 1234567890,              # Expiration (UNIX timestamp)
        "type": "access"                # Token type discriminator
    }
"""

from datetime import datetime, timedelta, timezone
from typing import Any
import jwt

from agenda.config import settings


def create_access_token(data: dict[str, Any]) -> str:
    """Genera un token de acceso JWT.

    Generate a JWT access token with the given payload data.
    Expires after JWT_ACCESS_TOKEN_EXPIRE_MINUTES.

    Args:
        data: JWT payload, typically {"sub", "nombreUsuario", "nombreRol"}

    Returns:
        str: Encoded JWT token string
    """
    to_encode: dict[str, Any] = data.copy()
    expire: datetime = datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    """Decodifica y verifica un token JWT.

    Decode and verify a JWT token string.

    Args:
        token: Encoded JWT token string

    Returns:
        dict[str, Any]: Decoded payload dictionary

    Raises:
        jwt.ExpiredSignatureError: When the token has expired
        jwt.InvalidTokenError: When the token is otherwise invalid
    """
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
