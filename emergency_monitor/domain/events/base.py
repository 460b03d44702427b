"""
Eventos do sistema.

Toda mutação nos registries gera um SystemEvent; falhas geram eventos do
tipo ERROR. Os eventos são imutáveis e pertencem exclusivamente ao EventLog.
"""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from emergency_monitor.domain.shared.clock import utc_now


class EventKind(str, enum.Enum):
    PERSON_REGISTERED = "person_registered"
    BIOMETRIC_DETECTION = "biometric_detection"
    POWER_FAILURE = "power_failure"
    DEVICE_SYNC = "device_sync"
    CLOUD_SYNC = "cloud_sync"
    ERROR = "error"


@dataclass(frozen=True)
class SystemEvent:
    kind: EventKind
    description: str
    related_id: Optional[str] = None
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    occurred_at: datetime = field(default_factory=utc_now)

    def as_line(self) -> str:
        """Formato de exportação: `timestamp [kind] description`."""
        return f"{self.occurred_at:%Y-%m-%d %H:%M:%S} [{self.kind.name}] {self.description}"
