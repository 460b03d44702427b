"""
Ponto de entrada principal da aplicação FastAPI.

    uvicorn emergency_monitor.main:app --reload --port 8000

Inclui: middleware (CORS, Request ID, logging), exception handlers globais,
health check e o MonitoringSystem de posse da aplicação.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from emergency_monitor.application.system import MonitoringSystem
from emergency_monitor.infrastructure.config import get_settings
from emergency_monitor.presentation.api.v1.router import api_v1_router
from emergency_monitor.presentation.middleware.exception_handlers import register_exception_handlers
from emergency_monitor.presentation.middleware.request_id import RequestIdMiddleware

settings = get_settings()

# ── Logging ──
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


# ════════════════════════════════════════════════════════════════
# LIFESPAN — startup / shutdown
# ════════════════════════════════════════════════════════════════
@asynccontextmanager
async def lifespan(app: FastAPI):
    system: MonitoringSystem = app.state.system
    system.start()
    if settings.SEED_ON_STARTUP:
        from emergency_monitor.seed import seed
        seed(system)
    yield
    logger.info("Sistema de monitoramento encerrado")


# ════════════════════════════════════════════════════════════════
# APP
# ════════════════════════════════════════════════════════════════
def create_app(system: Optional[MonitoringSystem] = None) -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=(
            "Monitoramento de emergência: pessoas, falhas de energia e "
            "sincronização verificada por checksum com dispositivos próximos."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan,
        responses={
            400: {"description": "Erro de validação"},
            404: {"description": "Recurso não encontrado"},
            409: {"description": "Conflito de dados"},
            422: {"description": "Falha de integridade ou payload inválido"},
            500: {"description": "Erro interno do servidor"},
        },
    )
    app.state.system = system or MonitoringSystem()

    # ── Middleware ──
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # ── Exception handlers globais ──
    register_exception_handlers(app)

    # ── Rotas versionadas ──
    app.include_router(api_v1_router, prefix="/api/v1")

    @app.get(
        "/health",
        tags=["Health"],
        summary="Verificação de saúde da API",
    )
    async def health_check():
        system: MonitoringSystem = app.state.system
        return {
            "status": "ok",
            "version": settings.APP_VERSION,
            "people": system.persons.count(),
            "open_failures": len(system.failures.list_open()),
            "active_devices": len(system.devices.list_active()),
            "events": len(system.event_log),
        }

    return app


app = create_app()
