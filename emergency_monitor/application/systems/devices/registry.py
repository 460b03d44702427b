"""
DeviceRegistry — dispositivos pares conectados e broadcast com checksum.

Protocolo de sincronização: o produtor calcula o digest do payload
(compute_digest) e chama broadcast(payload, digest). O registry recalcula o
digest de forma independente e só entrega o payload se ambos conferirem.
A captura do conjunto de dispositivos ativos e a entrega a cada um ocorrem
na mesma seção crítica: ou todos recebem, ou nenhum.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from emergency_monitor.application.shared.audit import audit_failures
from emergency_monitor.application.shared.event_log import EventLog
from emergency_monitor.domain.events.base import EventKind
from emergency_monitor.domain.shared.clock import Clock, utc_now
from emergency_monitor.domain.shared.errors import (
    ConflictError,
    IntegrityError,
    NotFoundError,
    ValidationError,
)
from emergency_monitor.domain.systems.devices import integrity
from emergency_monitor.domain.systems.devices.entity import Device
from emergency_monitor.domain.systems.devices.repository import IDeviceRepository
from emergency_monitor.infrastructure.systems.devices.repository import InMemoryDeviceRepository

logger = logging.getLogger(__name__)


class DeviceRegistry:
    def __init__(
        self,
        event_log: EventLog,
        repo: Optional[IDeviceRepository] = None,
        clock: Clock = utc_now,
    ) -> None:
        self._events = event_log
        self._repo = repo or InMemoryDeviceRepository()
        self._clock = clock
        self._lock = threading.RLock()

    # ── Membership ──

    def connect(self, name: str, address: str) -> Device:
        with audit_failures(self._events, "Erro ao adicionar dispositivo"), self._lock:
            name = (name or "").strip()
            address = (address or "").strip()
            if not name:
                raise ValidationError("Nome do dispositivo não pode estar vazio")
            if not address:
                raise ValidationError("Endereço do dispositivo não pode estar vazio")
            if self._repo.get_active_by_address(address) is not None:
                raise ConflictError("Dispositivo já conectado à rede")

            device = Device(name=name, address=address, last_sync=self._clock())
            self._repo.add(device)
            self._events.append(
                EventKind.DEVICE_SYNC,
                f"Dispositivo {name} adicionado à rede",
                device.id,
            )

        logger.info("Dispositivo %s conectado à rede local", name)
        return device

    def disconnect(self, device_id: str) -> Device:
        with audit_failures(self._events, "Erro ao desconectar dispositivo"), self._lock:
            device = self._repo.get_by_id(device_id)
            if device is None:
                raise NotFoundError("Dispositivo", device_id)

            device = self._repo.save(device.deactivate())

        logger.info("Dispositivo %s desconectado", device.name)
        return device

    def get(self, device_id: str) -> Device:
        with self._lock:
            device = self._repo.get_by_id(device_id)
        if device is None:
            raise NotFoundError("Dispositivo", device_id)
        return device

    def list_active(self) -> list[Device]:
        with self._lock:
            return list(self._repo.list_active())

    def list_all(self) -> list[Device]:
        with self._lock:
            return list(self._repo.list_all())

    # ── Sincronização ──

    @staticmethod
    def compute_digest(payload: bytes) -> str:
        return integrity.compute_digest(payload)

    def broadcast(self, payload: bytes, digest: str) -> int:
        """Entrega o payload a todos os dispositivos ativos. Retorna quantos receberam."""
        with audit_failures(self._events, "Erro na sincronização"), self._lock:
            if not payload:
                raise ValidationError("Dados não podem estar vazios")
            if not isinstance(payload, (bytes, bytearray, memoryview)):
                raise ValidationError("Payload deve ser uma sequência de bytes")
            payload = bytes(payload)
            if not integrity.digest_matches(payload, digest):
                raise IntegrityError("Falha na verificação de integridade dos dados")

            now = self._clock()
            targets = self._repo.list_active()
            for device in targets:
                self._repo.save(device.receive(payload, now))

        logger.info("Dados sincronizados em %d dispositivos", len(targets))
        return len(targets)
