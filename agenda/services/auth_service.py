"""Servicio de autenticación — inicio de sesión y emisión de tokens.

Auth Service — Business logic for login and JWT issuance.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from agenda.models.usuario import Usuario
from agenda.repositories.usuario_repository import usuario_repository
from agenda.schemas.auth import LoginRequest, TokenResponse
from agenda.utils.exceptions import UnauthorizedError
from agenda.utils.jwt import create_access_token
from agenda.utils.password import verify_password


class AuthService:
    """Lógica de autenticación.

    Service handling authentication business logic.
    """

    def _build_jwt_payload(self, usuario: Usuario) -> dict[str, str]:
        """Arma los claims del token a partir del usuario.

        Build the JWT payload from the user and its role.
        """
        return {
            "sub": str(usuario.id),
            "nombreUsuario": usuario.nombre_usuario,
            "nombreRol": usuario.rol.nombre,
        }

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
    ) -> TokenResponse:
        """Valida credenciales y emite un token de acceso.

        Process login and issue an access token.

        Args:
            db: Async database session
            data: Login request data

        Returns:
            TokenResponse: Access token

        Raises:
            UnauthorizedError: Invalid credentials or inactive account
        """
        usuario: Usuario | None = await usuario_repository.get_by_nombre_usuario(
            db, data.nombre_usuario
        )
        if usuario is None or not verify_password(data.password, usuario.password_hash):
            raise UnauthorizedError("Usuario o contraseña inválidos")

        if not usuario.activo:
            raise UnauthorizedError("La cuenta está desactivada")

        return TokenResponse(access_token=create_access_token(self._build_jwt_payload(usuario)))


# Instancia singleton — Singleton instance
auth_service: AuthService = AuthService()
