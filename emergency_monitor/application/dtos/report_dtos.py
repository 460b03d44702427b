"""DTOs do relatório de status — snapshot somente leitura dos registries."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Optional

from emergency_monitor.domain.shared.value_objects import Location


def _hours(delta: timedelta) -> float:
    return round(delta.total_seconds() / 3600, 1)


@dataclass(frozen=True)
class AtRiskPersonEntry:
    person_id: str
    name: str
    national_id: str
    last_contact: datetime
    time_without_contact: timedelta
    position: Optional[Location] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "person_id": self.person_id,
            "name": self.name,
            "national_id": self.national_id,
            "last_contact": self.last_contact.isoformat(),
            "hours_without_contact": _hours(self.time_without_contact),
            "position": self.position.to_dict() if self.position else None,
        }


@dataclass(frozen=True)
class OpenIncidentEntry:
    incident_id: str
    region: str
    kind: str
    description: str
    started_at: datetime
    elapsed: timedelta
    affected_people: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "incident_id": self.incident_id,
            "region": self.region,
            "kind": self.kind,
            "description": self.description,
            "started_at": self.started_at.isoformat(),
            "elapsed_hours": _hours(self.elapsed),
            "affected_people": self.affected_people,
        }


@dataclass(frozen=True)
class StatusReport:
    generated_at: datetime
    total_people: int
    active_devices: int
    at_risk: list[AtRiskPersonEntry] = field(default_factory=list)
    open_incidents: list[OpenIncidentEntry] = field(default_factory=list)

    @property
    def at_risk_count(self) -> int:
        return len(self.at_risk)

    @property
    def open_incident_count(self) -> int:
        return len(self.open_incidents)

    def to_dict(self) -> dict[str, Any]:
        return {
            "generated_at": self.generated_at.isoformat(),
            "total_people": self.total_people,
            "at_risk_count": self.at_risk_count,
            "open_incident_count": self.open_incident_count,
            "active_devices": self.active_devices,
            "at_risk": [e.to_dict() for e in self.at_risk],
            "open_incidents": [e.to_dict() for e in self.open_incidents],
        }
