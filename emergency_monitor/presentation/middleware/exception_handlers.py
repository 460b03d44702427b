"""
Exception handlers globais — converte exceções de domínio em respostas
HTTP padronizadas.
"""

from __future__ import annotations

import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from emergency_monitor.domain.shared.errors import (
    ConflictError,
    IntegrityError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def _error_response(request: Request, status_code: int, error: str, detail: str, **extra) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "detail": detail,
            **extra,
            "request_id": getattr(request.state, "request_id", None),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra todos os handlers de exceção na app FastAPI."""

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(request: Request, exc: NotFoundError):
        return _error_response(
            request, status.HTTP_404_NOT_FOUND, "not_found", str(exc), resource=exc.resource,
        )

    @app.exception_handler(ConflictError)
    async def conflict_error_handler(request: Request, exc: ConflictError):
        return _error_response(request, status.HTTP_409_CONFLICT, "conflict", str(exc))

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        return _error_response(request, status.HTTP_400_BAD_REQUEST, "validation_error", str(exc))

    @app.exception_handler(IntegrityError)
    async def integrity_error_handler(request: Request, exc: IntegrityError):
        return _error_response(
            request, status.HTTP_422_UNPROCESSABLE_ENTITY, "integrity_error", str(exc),
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s %s: %s\n%s",
            request.method,
            request.url.path,
            exc,
            traceback.format_exc(),
        )
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "internal_server_error",
            "Erro interno do servidor",
        )
