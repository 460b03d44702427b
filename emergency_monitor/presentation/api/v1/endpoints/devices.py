"""
Endpoints de Dispositivos — /api/v1/devices

Conexão/desconexão e sincronização verificada por checksum.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from emergency_monitor.application.system import MonitoringSystem
from emergency_monitor.application.systems.devices.registry import DeviceRegistry
from emergency_monitor.presentation.api.v1.deps import get_device_registry, get_system
from emergency_monitor.presentation.api.v1.schemas import (
    BroadcastOut,
    BroadcastRequest,
    DeviceCreate,
    DeviceOut,
    DigestOut,
    DigestRequest,
)

router = APIRouter()


@router.post(
    "/",
    response_model=DeviceOut,
    status_code=status.HTTP_201_CREATED,
    summary="Conectar dispositivo",
)
async def connect_device(
    payload: DeviceCreate,
    registry: DeviceRegistry = Depends(get_device_registry),
):
    return DeviceOut.from_entity(registry.connect(payload.name, payload.address))


@router.get("/", response_model=list[DeviceOut], summary="Listar dispositivos ativos")
async def list_active_devices(registry: DeviceRegistry = Depends(get_device_registry)):
    return [DeviceOut.from_entity(d) for d in registry.list_active()]


@router.delete(
    "/{device_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Desconectar dispositivo",
)
async def disconnect_device(device_id: str, registry: DeviceRegistry = Depends(get_device_registry)):
    registry.disconnect(device_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/digest", response_model=DigestOut, summary="Calcular checksum de um payload")
async def compute_digest(payload: DigestRequest, registry: DeviceRegistry = Depends(get_device_registry)):
    return DigestOut(digest=registry.compute_digest(payload.payload.encode("utf-8")))


@router.post(
    "/broadcast",
    response_model=BroadcastOut,
    summary="Broadcast verificado",
    description="Recalcula o checksum do payload e rejeita (422) se não conferir.",
)
async def broadcast(payload: BroadcastRequest, registry: DeviceRegistry = Depends(get_device_registry)):
    delivered = registry.broadcast(payload.payload.encode("utf-8"), payload.digest)
    return BroadcastOut(delivered_to=delivered)


@router.post("/sync", response_model=BroadcastOut, summary="Sincronizar status do sistema")
async def synchronize(system: MonitoringSystem = Depends(get_system)):
    return BroadcastOut(delivered_to=system.synchronize())
