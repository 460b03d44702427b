"""Router API v1 — agrega todos os sub-routers."""

from fastapi import APIRouter

from emergency_monitor.presentation.api.v1.endpoints.devices import router as devices_router
from emergency_monitor.presentation.api.v1.endpoints.events import router as events_router
from emergency_monitor.presentation.api.v1.endpoints.failures import router as failures_router
from emergency_monitor.presentation.api.v1.endpoints.people import router as people_router
from emergency_monitor.presentation.api.v1.endpoints.reports import router as reports_router

api_v1_router = APIRouter()

api_v1_router.include_router(people_router, prefix="/people", tags=["Pessoas"])
api_v1_router.include_router(failures_router, prefix="/failures", tags=["Falhas de energia"])
api_v1_router.include_router(devices_router, prefix="/devices", tags=["Dispositivos"])
api_v1_router.include_router(events_router, prefix="/events", tags=["Eventos"])
api_v1_router.include_router(reports_router, prefix="/reports", tags=["Relatórios"])
