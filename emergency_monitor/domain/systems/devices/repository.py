from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .entity import Device


class IDeviceRepository(ABC):

    @abstractmethod
    def get_by_id(self, device_id: str) -> Optional[Device]:
        ...

    @abstractmethod
    def get_active_by_address(self, address: str) -> Optional[Device]:
        """Só dispositivos ativos contam para a unicidade do endereço."""
        ...

    @abstractmethod
    def list_all(self) -> Sequence[Device]:
        ...

    @abstractmethod
    def list_active(self) -> Sequence[Device]:
        ...

    @abstractmethod
    def add(self, device: Device) -> Device:
        ...

    @abstractmethod
    def save(self, device: Device) -> Device:
        ...
