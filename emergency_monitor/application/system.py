"""
MonitoringSystem — composição explícita do núcleo.

Cria o EventLog e os registries compartilhando o mesmo relógio. O objeto é
de posse do chamador (app FastAPI, seed, testes); não há estado global.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from emergency_monitor.application.shared.event_log import EventLog
from emergency_monitor.application.systems.devices.registry import DeviceRegistry
from emergency_monitor.application.systems.devices.sync_payload import build_sync_payload
from emergency_monitor.application.systems.failures.registry import FailureRegistry
from emergency_monitor.application.systems.persons.registry import PersonRegistry
from emergency_monitor.application.systems.reports.status_report import StatusReportBuilder
from emergency_monitor.domain.shared.clock import Clock, utc_now

logger = logging.getLogger(__name__)


@dataclass
class MonitoringSystem:
    clock: Clock = utc_now
    event_log: EventLog = field(init=False)
    persons: PersonRegistry = field(init=False)
    failures: FailureRegistry = field(init=False)
    devices: DeviceRegistry = field(init=False)
    reports: StatusReportBuilder = field(init=False)

    def __post_init__(self):
        self.event_log = EventLog(clock=self.clock)
        self.persons = PersonRegistry(self.event_log, clock=self.clock)
        self.failures = FailureRegistry(self.event_log, clock=self.clock)
        self.devices = DeviceRegistry(self.event_log, clock=self.clock)
        self.reports = StatusReportBuilder(
            self.persons, self.failures, self.devices, self.event_log, clock=self.clock,
        )

    def start(self) -> None:
        logger.info("Sistema de monitoramento de emergência iniciado")

    def synchronize(self) -> int:
        """
        Monta o payload de status, calcula o digest e faz o broadcast.
        Sem dispositivos ativos não há o que sincronizar: retorna 0.
        """
        active = self.devices.list_active()
        if not active:
            logger.info("Nenhum dispositivo conectado para sincronização")
            return 0

        payload = build_sync_payload(
            people=self.persons.count(),
            open_failures=len(self.failures.list_open()),
            active_devices=len(active),
            timestamp=self.clock(),
        )
        digest = self.devices.compute_digest(payload)
        return self.devices.broadcast(payload, digest)
