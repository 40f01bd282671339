"""Punto de entrada de la aplicación FastAPI — middleware y routers.

FastAPI application entry point — Middleware and router registration.
Configures logging middleware, single-origin CORS, the /api router tree
and the API documentation.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agenda.api import api_router
from agenda.config import settings
from agenda.docs import docs_app_kwargs, setup_docs
from agenda.middleware.axiom_logging import AxiomLoggingMiddleware

app: FastAPI = FastAPI(**docs_app_kwargs())

# Registrado antes que CORS para capturar todas las peticiones
# Registered before CORS so it wraps every request
app.add_middleware(AxiomLoggingMiddleware)

# CORS — solo el origen del frontend (Only the configured frontend origin)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=settings.CORS_METHODS,
    allow_headers=["*"],
    allow_credentials=True,
)

app.include_router(api_router, prefix=settings.API_PREFIX)
setup_docs(app)
