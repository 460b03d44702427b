"""Implementação em memória do repositório de Dispositivos."""

from __future__ import annotations

from typing import Optional, Sequence

from emergency_monitor.domain.systems.devices.entity import Device
from emergency_monitor.domain.systems.devices.repository import IDeviceRepository


class InMemoryDeviceRepository(IDeviceRepository):
    def __init__(self) -> None:
        self._devices: dict[str, Device] = {}

    def get_by_id(self, device_id: str) -> Optional[Device]:
        return self._devices.get(device_id)

    def get_active_by_address(self, address: str) -> Optional[Device]:
        return next(
            (d for d in self._devices.values() if d.active and d.address == address),
            None,
        )

    def list_all(self) -> Sequence[Device]:
        return list(self._devices.values())

    def list_active(self) -> Sequence[Device]:
        return [d for d in self._devices.values() if d.active]

    def add(self, device: Device) -> Device:
        self._devices[device.id] = device
        return device

    def save(self, device: Device) -> Device:
        if device.id not in self._devices:
            raise KeyError(device.id)
        self._devices[device.id] = device
        return device
