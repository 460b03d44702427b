"""
Schemas Pydantic — camada de Apresentação.

DTOs de request/response para pessoas, falhas, dispositivos, eventos e
relatório de status.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from emergency_monitor.domain.events.base import SystemEvent
from emergency_monitor.domain.systems.devices.entity import Device
from emergency_monitor.domain.systems.failures.entity import FailureIncident
from emergency_monitor.domain.systems.persons.entity import Person


# ════════════════════════════════════════════════════════════════
# ERROR MODEL (para Swagger docs)
# ════════════════════════════════════════════════════════════════
class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["validation_error"])
    detail: str = Field(..., examples=["CPF deve ter 11 dígitos"])
    request_id: Optional[str] = None


# ════════════════════════════════════════════════════════════════
# PEOPLE
# ════════════════════════════════════════════════════════════════
class PersonStatusEnum(str, Enum):
    safe = "safe"
    at_risk = "at_risk"
    missing = "missing"
    unknown = "unknown"


class PersonCreate(BaseModel):
    name: str = Field(..., max_length=255, examples=["João Silva"])
    national_id: str = Field(..., max_length=32, examples=["12345678901"])
    birth_date: date = Field(..., examples=["1990-05-15"])


class BiometricDetectRequest(BaseModel):
    token: str = Field(..., max_length=255)


class LocationUpdate(BaseModel):
    # Intervalos validados no domínio (Location), que também audita a falha
    latitude: float = Field(..., examples=[-23.5505])
    longitude: float = Field(..., examples=[-46.6333])
    description: str = Field("", max_length=500, examples=["São Paulo - Centro"])


class LocationOut(BaseModel):
    latitude: float
    longitude: float
    description: str
    recorded_at: datetime


class PersonOut(BaseModel):
    id: str
    name: str
    national_id: str
    birth_date: date
    biometric_token: str
    last_contact: datetime
    status: PersonStatusEnum
    position: Optional[LocationOut] = None

    @classmethod
    def from_entity(cls, p: Person) -> "PersonOut":
        position = None
        if p.position is not None:
            position = LocationOut(
                latitude=p.position.latitude,
                longitude=p.position.longitude,
                description=p.position.description,
                recorded_at=p.position.recorded_at,
            )
        return cls(
            id=p.id,
            name=p.name,
            national_id=p.national_id,
            birth_date=p.birth_date,
            biometric_token=p.biometric_token,
            last_contact=p.last_contact,
            status=PersonStatusEnum(p.status.value),
            position=position,
        )


# ════════════════════════════════════════════════════════════════
# FAILURES
# ════════════════════════════════════════════════════════════════
class FailureKindEnum(str, Enum):
    total = "total"
    partial = "partial"
    overload = "overload"
    catastrophe = "catastrophe"


class FailureCreate(BaseModel):
    region: str = Field(..., max_length=255, examples=["Centro"])
    kind: FailureKindEnum = Field(..., examples=["total"])
    description: str = Field(..., max_length=1000, examples=["Queda de árvore na rede elétrica"])
    affected_people: int = Field(0, examples=[120])


class FailureOut(BaseModel):
    id: str
    region: str
    kind: FailureKindEnum
    description: str
    affected_people: int
    started_at: datetime
    ended_at: Optional[datetime] = None
    duration_hours: Optional[float] = None

    @classmethod
    def from_entity(cls, i: FailureIncident) -> "FailureOut":
        duration = i.duration
        return cls(
            id=i.id,
            region=i.region,
            kind=FailureKindEnum(i.kind.value),
            description=i.description,
            affected_people=i.affected_people,
            started_at=i.started_at,
            ended_at=i.ended_at,
            duration_hours=round(duration.total_seconds() / 3600, 2) if duration else None,
        )


# ════════════════════════════════════════════════════════════════
# DEVICES
# ════════════════════════════════════════════════════════════════
class DeviceCreate(BaseModel):
    name: str = Field(..., max_length=255, examples=["Celular-João"])
    address: str = Field(..., max_length=64, examples=["AA:BB:CC:DD:EE:01"])


class DeviceOut(BaseModel):
    id: str
    name: str
    address: str
    active: bool
    last_sync: datetime
    received_count: int

    @classmethod
    def from_entity(cls, d: Device) -> "DeviceOut":
        return cls(
            id=d.id,
            name=d.name,
            address=d.address,
            active=d.active,
            last_sync=d.last_sync,
            received_count=len(d.received_payloads),
        )


class DigestRequest(BaseModel):
    payload: str = Field(..., examples=['{"pessoas":3}'])


class DigestOut(BaseModel):
    digest: str


class BroadcastRequest(BaseModel):
    payload: str = Field(..., examples=['{"pessoas":3}'])
    digest: str


class BroadcastOut(BaseModel):
    delivered_to: int


# ════════════════════════════════════════════════════════════════
# EVENTS
# ════════════════════════════════════════════════════════════════
class EventKindEnum(str, Enum):
    person_registered = "person_registered"
    biometric_detection = "biometric_detection"
    power_failure = "power_failure"
    device_sync = "device_sync"
    cloud_sync = "cloud_sync"
    error = "error"


class EventOut(BaseModel):
    event_id: str
    kind: EventKindEnum
    description: str
    related_id: Optional[str] = None
    occurred_at: datetime

    @classmethod
    def from_entity(cls, e: SystemEvent) -> "EventOut":
        return cls(
            event_id=e.event_id,
            kind=EventKindEnum(e.kind.value),
            description=e.description,
            related_id=e.related_id,
            occurred_at=e.occurred_at,
        )


# ════════════════════════════════════════════════════════════════
# REPORTS
# ════════════════════════════════════════════════════════════════
class AtRiskPersonOut(BaseModel):
    person_id: str
    name: str
    national_id: str
    last_contact: datetime
    hours_without_contact: float
    position: Optional[LocationOut] = None


class OpenIncidentOut(BaseModel):
    incident_id: str
    region: str
    kind: str
    description: str
    started_at: datetime
    elapsed_hours: float
    affected_people: int


class StatusReportOut(BaseModel):
    generated_at: datetime
    total_people: int
    at_risk_count: int
    open_incident_count: int
    active_devices: int
    at_risk: list[AtRiskPersonOut]
    open_incidents: list[OpenIncidentOut]
