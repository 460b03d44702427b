"""Endpoints de Falhas de energia — /api/v1/failures"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from emergency_monitor.application.systems.failures.registry import FailureRegistry
from emergency_monitor.domain.systems.failures.entity import FailureKind
from emergency_monitor.presentation.api.v1.deps import get_failure_registry
from emergency_monitor.presentation.api.v1.schemas import FailureCreate, FailureOut

router = APIRouter()


@router.post(
    "/",
    response_model=FailureOut,
    status_code=status.HTTP_201_CREATED,
    summary="Registrar falha de energia",
)
async def open_failure(
    payload: FailureCreate,
    registry: FailureRegistry = Depends(get_failure_registry),
):
    incident = registry.open(
        payload.region,
        FailureKind(payload.kind.value),
        payload.description,
        affected_people=payload.affected_people,
    )
    return FailureOut.from_entity(incident)


@router.get("/", response_model=list[FailureOut], summary="Listar falhas")
async def list_failures(
    open_only: bool = Query(default=False, description="Somente falhas em andamento"),
    registry: FailureRegistry = Depends(get_failure_registry),
):
    incidents = registry.list_open() if open_only else registry.list_all()
    return [FailureOut.from_entity(i) for i in incidents]


@router.get("/{incident_id}", response_model=FailureOut, summary="Detalhe de uma falha")
async def get_failure(incident_id: str, registry: FailureRegistry = Depends(get_failure_registry)):
    return FailureOut.from_entity(registry.get(incident_id))


@router.post("/{incident_id}/close", response_model=FailureOut, summary="Finalizar falha")
async def close_failure(incident_id: str, registry: FailureRegistry = Depends(get_failure_registry)):
    return FailureOut.from_entity(registry.close(incident_id))
