"""FailureRegistry — registro e finalização de falhas de energia."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from emergency_monitor.application.shared.audit import audit_failures
from emergency_monitor.application.shared.event_log import EventLog
from emergency_monitor.domain.events.base import EventKind
from emergency_monitor.domain.shared.clock import Clock, utc_now
from emergency_monitor.domain.shared.errors import NotFoundError, ValidationError
from emergency_monitor.domain.systems.failures.entity import FailureIncident, FailureKind
from emergency_monitor.domain.systems.failures.repository import IFailureRepository
from emergency_monitor.infrastructure.systems.failures.repository import InMemoryFailureRepository

logger = logging.getLogger(__name__)


class FailureRegistry:
    def __init__(
        self,
        event_log: EventLog,
        repo: Optional[IFailureRepository] = None,
        clock: Clock = utc_now,
    ) -> None:
        self._events = event_log
        self._repo = repo or InMemoryFailureRepository()
        self._clock = clock
        self._lock = threading.RLock()

    def open(
        self,
        region: str,
        kind: FailureKind,
        description: str,
        affected_people: int = 0,
    ) -> FailureIncident:
        with audit_failures(self._events, "Erro ao registrar falha"), self._lock:
            region = (region or "").strip()
            description = (description or "").strip()
            if not region:
                raise ValidationError("Região não pode estar vazia")
            if not description:
                raise ValidationError("Descrição não pode estar vazia")
            if affected_people < 0:
                raise ValidationError("Número de pessoas afetadas não pode ser negativo")
            try:
                kind = FailureKind(kind)
            except ValueError:
                raise ValidationError(f"Tipo de falha inválido: {kind}") from None

            incident = FailureIncident(
                region=region,
                kind=kind,
                description=description,
                started_at=self._clock(),
                affected_people=affected_people,
            )
            self._repo.add(incident)
            self._events.append(
                EventKind.POWER_FAILURE,
                f"Falha de energia registrada em {region}: {kind.name}",
                incident.id,
            )

        logger.info("Falha de energia registrada: %s - %s", region, kind.name)
        return incident

    def close(self, incident_id: str) -> FailureIncident:
        with audit_failures(self._events, "Erro ao finalizar falha"), self._lock:
            incident = self._repo.get_by_id(incident_id)
            if incident is None:
                raise NotFoundError("Falha", incident_id)

            incident = self._repo.save(incident.close(self._clock()))

        logger.info(
            "Falha finalizada. Duração: %.2f horas",
            incident.duration.total_seconds() / 3600,
        )
        return incident

    def get(self, incident_id: str) -> FailureIncident:
        with self._lock:
            incident = self._repo.get_by_id(incident_id)
        if incident is None:
            raise NotFoundError("Falha", incident_id)
        return incident

    def list_open(self) -> list[FailureIncident]:
        with self._lock:
            return list(self._repo.list_open())

    def list_all(self) -> list[FailureIncident]:
        with self._lock:
            return list(self._repo.list_all())
