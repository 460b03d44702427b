"""Entidade de domínio FailureIncident — ciclo de vida aberto → finalizado."""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from typing import Optional

from emergency_monitor.domain.shared.errors import ConflictError


class FailureKind(str, enum.Enum):
    TOTAL = "total"
    PARTIAL = "partial"
    OVERLOAD = "overload"
    CATASTROPHE = "catastrophe"


@dataclass(frozen=True)
class FailureIncident:
    region: str
    kind: FailureKind
    description: str
    started_at: datetime
    ended_at: Optional[datetime] = None
    affected_people: int = 0
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def is_open(self) -> bool:
        return self.ended_at is None

    @property
    def duration(self) -> Optional[timedelta]:
        """Duração total; None enquanto a falha estiver em andamento."""
        if self.ended_at is None:
            return None
        return self.ended_at - self.started_at

    def elapsed(self, now: datetime) -> timedelta:
        return (self.ended_at or now) - self.started_at

    # ── State machine ──

    def close(self, now: datetime) -> "FailureIncident":
        """Retorna nova instância finalizada. Só pode ocorrer uma vez."""
        if not self.is_open:
            raise ConflictError("Falha já foi finalizada")
        return replace(self, ended_at=now)
