"""Excepciones HTTP personalizadas.

Custom HTTP exception classes module.
Pre-configured HTTPException subclasses for common error patterns, so
services and dependencies never spell out status codes at the call site.

Usage:
    from agenda.utils.exceptions import NotFoundError, DuplicateError
    raise NotFoundError("Profesional no encontrado")
    raise DuplicateError("Ya existe un profesional con ese RUT")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 — el recurso solicitado no existe.

    404 Not Found exception.

    Args:
        detail: Error message
    """

    def __init__(self, detail: str = "Recurso no encontrado") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class DuplicateError(HTTPException):
    """409 — se viola una restricción de unicidad.

    409 Conflict exception.
    Raised when creating or updating a resource would break a uniqueness
    constraint (e.g. duplicate RUT or email).

    Args:
        detail: Error message
    """

    def __init__(self, detail: str = "El recurso ya existe") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class ForbiddenError(HTTPException):
    """403 — rol sin permisos suficientes.

    403 Forbidden exception.

    Args:
        detail: Error message
    """

    def __init__(self, detail: str = "Permisos insuficientes") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(HTTPException):
    """401 — autenticación ausente, inválida o expirada.

    401 Unauthorized exception. Carries the Bearer challenge header.

    Args:
        detail: Error message
    """

    def __init__(self, detail: str = "No autenticado") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )
