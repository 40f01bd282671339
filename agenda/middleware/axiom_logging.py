"""Middleware de registro de peticiones en Axiom.

Axiom API logging middleware.
Sends one structured event per API call: method, path, params, masked body,
status code, duration and error detail. Health and documentation routes are
not logged. Sensitive fields (password, token, secret...) are masked.
"""

import json
import logging
import re
import time
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from axiom_py import Client as AxiomClient

from agenda.config import settings

logger = logging.getLogger(__name__)

_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|contrasena|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# Rutas excluidas — Paths excluded from logging
_SKIP_PATHS = {
    f"{settings.API_PREFIX}/health",
    f"{settings.API_PREFIX}/docs",
    f"{settings.API_PREFIX}/docs-json",
}

_MAX_DEPTH = 5
_MAX_ITEMS = 20


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """Enmascara recursivamente los campos sensibles.

    Recursively mask sensitive keys in dicts/lists. Lists are cut to the
    first 20 items and nesting deeper than 5 levels is elided.
    """
    if depth > _MAX_DEPTH:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else mask_sensitive(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:_MAX_ITEMS]]
    return data


def truncate(value: Any, max_len: int = 2000) -> Any:
    """Limita el tamaño de textos largos en el log.

    Truncate long strings to keep log events small.
    """
    if isinstance(value, str) and len(value) > max_len:
        return value[:max_len] + "...(truncated)"
    return value


def _error_detail(body: bytes) -> str:
    try:
        detail = json.loads(body).get("detail", "")
    except (json.JSONDecodeError, UnicodeDecodeError, AttributeError):
        return body.decode("utf-8", errors="replace")[:500]
    if not isinstance(detail, str):
        detail = json.dumps(detail, ensure_ascii=False)
    return truncate(detail, 500)


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """Registra cada petición/respuesta de la API en Axiom.

    Middleware that logs API requests and responses to Axiom.
    Acts as a pass-through when no Axiom token/dataset is configured.
    """

    def __init__(self, app: Any, client: AxiomClient | None = None) -> None:
        super().__init__(app)
        self._dataset: str = settings.AXIOM_DATASET
        self._client: AxiomClient | None = client
        if self._client is None and settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if self._client is None or request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        event: dict[str, Any] = {
            "method": request.method,
            "path": request.url.path,
        }
        if request.query_params:
            event["query_params"] = mask_sensitive(dict(request.query_params))

        if request.method in ("POST", "PUT", "PATCH"):
            body_bytes = await request.body()
            if body_bytes:
                try:
                    event["request_body"] = mask_sensitive(json.loads(body_bytes))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    event["request_body"] = "(non-json body)"

        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # El cuerpo de error se consume y se vuelve a envolver — Error body is consumed then re-wrapped
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = _error_detail(resp_body)
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["status_code"] = status_code
            event["duration_ms"] = round((time.perf_counter() - start_time) * 1000, 2)
            if request.path_params:
                event["path_params"] = dict(request.path_params)
            try:
                self._client.ingest_events(self._dataset, [event])
            except Exception:
                # Un fallo de Axiom no rompe la petición — Ingest failure never breaks the request
                logger.warning("No se pudo enviar el evento a Axiom", exc_info=True)

        return response
