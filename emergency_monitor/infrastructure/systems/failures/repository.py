"""Implementação em memória do repositório de Falhas de energia."""

from __future__ import annotations

from typing import Optional, Sequence

from emergency_monitor.domain.systems.failures.entity import FailureIncident
from emergency_monitor.domain.systems.failures.repository import IFailureRepository


class InMemoryFailureRepository(IFailureRepository):
    def __init__(self) -> None:
        self._incidents: dict[str, FailureIncident] = {}

    def get_by_id(self, incident_id: str) -> Optional[FailureIncident]:
        return self._incidents.get(incident_id)

    def list_all(self) -> Sequence[FailureIncident]:
        return list(self._incidents.values())

    def list_open(self) -> Sequence[FailureIncident]:
        return [i for i in self._incidents.values() if i.is_open]

    def add(self, incident: FailureIncident) -> FailureIncident:
        self._incidents[incident.id] = incident
        return incident

    def save(self, incident: FailureIncident) -> FailureIncident:
        if incident.id not in self._incidents:
            raise KeyError(incident.id)
        self._incidents[incident.id] = incident
        return incident
