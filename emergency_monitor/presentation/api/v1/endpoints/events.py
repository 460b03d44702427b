"""Endpoints de Eventos — /api/v1/events"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from emergency_monitor.application.system import MonitoringSystem
from emergency_monitor.domain.events.base import EventKind
from emergency_monitor.presentation.api.v1.deps import get_system
from emergency_monitor.presentation.api.v1.schemas import EventKindEnum, EventOut

router = APIRouter()


@router.get(
    "/",
    response_model=list[EventOut],
    summary="Consultar eventos",
    description="Filtros opcionais e conjuntivos: kind, since, until. Mais recentes primeiro.",
)
async def list_events(
    kind: Optional[EventKindEnum] = Query(default=None),
    since: Optional[datetime] = Query(default=None),
    until: Optional[datetime] = Query(default=None),
    system: MonitoringSystem = Depends(get_system),
):
    events = system.event_log.query(
        kind=EventKind(kind.value) if kind else None,
        since=since,
        until=until,
    )
    return [EventOut.from_entity(e) for e in events]


@router.get(
    "/export",
    response_class=PlainTextResponse,
    summary="Exportar eventos em texto",
)
async def export_events(system: MonitoringSystem = Depends(get_system)):
    return "\n".join(system.event_log.export_as_lines())
