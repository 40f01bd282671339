"""Pruebas de autenticación — login y /profesionales/me.

Auth API tests — login endpoint and the current-user claims echo.
"""

from datetime import datetime, timedelta, timezone

import jwt
from httpx import AsyncClient

from agenda.config import settings
from agenda.utils.jwt import decode_token
from tests.conftest import auth_header, make_token

LOGIN_URL = "/api/auth/login"
ME_URL = "/api/profesionales/me"


class TestLogin:
    """Inicio de sesión."""

    async def test_login_success(self, client: AsyncClient, admin_user):
        res = await client.post(LOGIN_URL, json={
            "nombre_usuario": "admin",
            "password": "admin123!",
        })
        assert res.status_code == 200
        data = res.json()
        assert data["token_type"] == "bearer"

        claims = decode_token(data["access_token"])
        assert claims["sub"] == str(admin_user.id)
        assert claims["nombreUsuario"] == "admin"
        assert claims["nombreRol"] == "Administrador"
        assert claims["type"] == "access"

    async def test_login_wrong_password(self, client: AsyncClient, admin_user):
        res = await client.post(LOGIN_URL, json={
            "nombre_usuario": "admin",
            "password": "incorrecta",
        })
        assert res.status_code == 401

    async def test_login_unknown_user(self, client: AsyncClient, roles):
        res = await client.post(LOGIN_URL, json={
            "nombre_usuario": "nadie",
            "password": "x",
        })
        assert res.status_code == 401

    async def test_login_inactive_user(self, client: AsyncClient, db, admin_user):
        admin_user.activo = False
        await db.flush()

        res = await client.post(LOGIN_URL, json={
            "nombre_usuario": "admin",
            "password": "admin123!",
        })
        assert res.status_code == 401


class TestMe:
    """GET /profesionales/me."""

    async def test_me_returns_mapped_claims(self, client: AsyncClient):
        token = make_token("c0ffee00-0000-4000-8000-000000000042", "jperez", "Profesional")
        res = await client.get(ME_URL, headers=auth_header(token))
        assert res.status_code == 200
        assert res.json() == {
            "usuarioId": "c0ffee00-0000-4000-8000-000000000042",
            "rol": "Profesional",
            "nombreUsuario": "jperez",
            "mensaje": "Acceso y token válidos.",
        }

    async def test_me_after_login(self, client: AsyncClient, admin_user):
        login = await client.post(LOGIN_URL, json={
            "nombre_usuario": "admin",
            "password": "admin123!",
        })
        res = await client.get(ME_URL, headers=auth_header(login.json()["access_token"]))
        assert res.status_code == 200
        assert res.json()["usuarioId"] == str(admin_user.id)
        assert res.json()["rol"] == "Administrador"

    async def test_me_without_token(self, client: AsyncClient):
        res = await client.get(ME_URL)
        assert res.status_code == 401

    async def test_me_invalid_token(self, client: AsyncClient):
        res = await client.get(ME_URL, headers=auth_header("invalid.token.here"))
        assert res.status_code == 401

    async def test_me_expired_token(self, client: AsyncClient):
        token = jwt.encode(
            {
                "sub": "u1",
                "nombreRol": "Profesional",
                "type": "access",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
        res = await client.get(ME_URL, headers=auth_header(token))
        assert res.status_code == 401

    async def test_me_wrong_signature(self, client: AsyncClient):
        token = jwt.encode(
            {"sub": "u1", "type": "access"}, "otro-secreto", algorithm="HS256"
        )
        res = await client.get(ME_URL, headers=auth_header(token))
        assert res.status_code == 401

    async def test_me_rejects_non_access_token(self, client: AsyncClient):
        token = jwt.encode(
            {"sub": "u1", "type": "refresh"},
            settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )
        res = await client.get(ME_URL, headers=auth_header(token))
        assert res.status_code == 401
