"""
StatusReportBuilder — agrega snapshots dos três registries.

Agregação pura: não emite eventos em caso de sucesso. A renderização
(texto, arquivo) fica a cargo do chamador.
"""

from __future__ import annotations

from emergency_monitor.application.dtos.report_dtos import (
    AtRiskPersonEntry,
    OpenIncidentEntry,
    StatusReport,
)
from emergency_monitor.application.shared.audit import audit_failures
from emergency_monitor.application.shared.event_log import EventLog
from emergency_monitor.application.systems.devices.registry import DeviceRegistry
from emergency_monitor.application.systems.failures.registry import FailureRegistry
from emergency_monitor.application.systems.persons.registry import PersonRegistry
from emergency_monitor.domain.shared.clock import Clock, utc_now


class StatusReportBuilder:
    def __init__(
        self,
        persons: PersonRegistry,
        failures: FailureRegistry,
        devices: DeviceRegistry,
        event_log: EventLog,
        clock: Clock = utc_now,
    ) -> None:
        self._persons = persons
        self._failures = failures
        self._devices = devices
        self._events = event_log
        self._clock = clock

    def build_status_report(self) -> StatusReport:
        with audit_failures(self._events, "Erro ao gerar relatório"):
            now = self._clock()
            people = self._persons.list_all()
            open_incidents = self._failures.list_open()
            active_devices = self._devices.list_active()

            at_risk = [
                AtRiskPersonEntry(
                    person_id=p.id,
                    name=p.name,
                    national_id=p.national_id,
                    last_contact=p.last_contact,
                    time_without_contact=p.time_without_contact(now),
                    position=p.position,
                )
                for p in people
                if p.is_at_risk(now)
            ]
            incidents = [
                OpenIncidentEntry(
                    incident_id=i.id,
                    region=i.region,
                    kind=i.kind.name,
                    description=i.description,
                    started_at=i.started_at,
                    elapsed=i.elapsed(now),
                    affected_people=i.affected_people,
                )
                for i in open_incidents
            ]

            return StatusReport(
                generated_at=now,
                total_people=len(people),
                active_devices=len(active_devices),
                at_risk=at_risk,
                open_incidents=incidents,
            )
