"""Esquemas Pydantic de autenticación.

Authentication-related Pydantic request/response schema definitions.
Covers login, token issuance and the "current user" echo of token claims.
"""

from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    """Solicitud de inicio de sesión.

    Login request schema.

    Attributes:
        nombre_usuario: User login name
        password: Plain text password, verified against the bcrypt hash
    """

    model_config = ConfigDict(extra="forbid")

    nombre_usuario: str
    password: str


class TokenResponse(BaseModel):
    """Respuesta con el token de acceso emitido.

    JWT token issuance response schema.
    """

    access_token: str
    token_type: str = "bearer"  # siempre "bearer" (Always "bearer" for the Authorization header)


class JwtPayload(BaseModel):
    """Claims decodificados de un token de acceso.

    Decoded access token claims attached to an authenticated request.
    Unknown claims (iat, exp, type) are ignored.
    """

    sub: str
    nombreUsuario: str | None = None
    nombreRol: str | None = None


class MeResponse(BaseModel):
    """Respuesta de GET /profesionales/me.

    Current user echo. Field names are the ones the frontend consumes.

    Attributes:
        usuarioId: Claim "sub"
        rol: Claim "nombreRol"
        nombreUsuario: Claim "nombreUsuario"
        mensaje: Fixed confirmation message
    """

    usuarioId: str
    rol: str | None
    nombreUsuario: str | None
    mensaje: str
