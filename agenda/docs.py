"""Documentación de la API (OpenAPI + Swagger UI).

API documentation setup. The OpenAPI document is served as JSON at
{API_PREFIX}/docs-json and Swagger UI at {API_PREFIX}/docs.
"""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.docs import get_swagger_ui_html
from fastapi.responses import HTMLResponse

from agenda.config import settings

DOCS_TITLE: str = "Documentación API Agenda"
DESCRIPTION: str = "Documentación de la API para la gestión de Agenda de Salud"
VERSION: str = "1.0"

# Etiquetas de la documentación — name/description of every API area
OPENAPI_TAGS: list[dict[str, str]] = [
    {"name": "Roles", "description": "Gestión de roles de usuario"},
    {"name": "Usuarios", "description": "Gestión de usuarios del sistema"},
    {"name": "Servicios", "description": "Gestión de los servicios que prestan los profesionales de salud"},
    {"name": "Profesionales", "description": "Gestión de los profesionales de la salud"},
    {"name": "Agendas Profesionales", "description": "Gestión de las agendas de profesionales de la salud"},
    {"name": "App", "description": "Disponibilidad de la aplicación"},
    {"name": "Autenticación", "description": "Gestión de la autenticación"},
    {"name": "Centros de Salud", "description": "Gestión de espacios físicos de atención"},
    {"name": "Citas", "description": "Gestión de las citas de pacientes"},
    {"name": "Descansos", "description": "Gestión de los descansos y pausas"},
    {"name": "Jornadas Diarias", "description": "Gestión de las jornadas diarias"},
    {"name": "Pacientes", "description": "Gestión de los pacientes"},
    {"name": "Profesional Servicios", "description": "Gestión de profesionales y sus servicios"},
    {"name": "Slots de Disponibilidad", "description": "Gestión de los slots/espacios en la agenda"},
]

SWAGGER_UI_PARAMETERS: dict[str, Any] = {
    "tagsSorter": "alpha",
    "operationsSorter": "alpha",
    "docExpansion": "none",
}


def docs_app_kwargs() -> dict[str, Any]:
    """Argumentos de FastAPI() relacionados con la documentación.

    FastAPI constructor arguments for the documentation surface. The default
    docs/redoc pages are disabled; setup_docs() mounts the Swagger page.
    """
    return {
        "title": settings.APP_NAME,
        "description": DESCRIPTION,
        "version": VERSION,
        "openapi_tags": OPENAPI_TAGS,
        "openapi_url": f"{settings.API_PREFIX}/docs-json",
        "docs_url": None,
        "redoc_url": None,
    }


def setup_docs(app: FastAPI) -> None:
    """Publica Swagger UI bajo {API_PREFIX}/docs.

    Mount the Swagger UI page with a custom site title and sorted,
    collapsed tags and operations.
    """

    async def swagger_ui() -> HTMLResponse:
        return get_swagger_ui_html(
            openapi_url=app.openapi_url,
            title=DOCS_TITLE,
            swagger_ui_parameters=SWAGGER_UI_PARAMETERS,
        )

    app.add_api_route(
        f"{settings.API_PREFIX}/docs",
        swagger_ui,
        methods=["GET"],
        include_in_schema=False,
    )
