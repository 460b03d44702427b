"""Entidade de domínio Person — registro imutável, atualizado por substituição."""

from __future__ import annotations

import base64
import enum
import hashlib
import time
import uuid
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta
from typing import Optional

from emergency_monitor.domain.shared.policy import AT_RISK_THRESHOLD, BIOMETRIC_TOKEN_LENGTH
from emergency_monitor.domain.shared.value_objects import Location


class PersonStatus(str, enum.Enum):
    SAFE = "safe"
    AT_RISK = "at_risk"
    MISSING = "missing"
    UNKNOWN = "unknown"


def generate_biometric_token(name: str, national_id: str) -> str:
    """
    Deriva o token biométrico: SHA-256 de nome + CPF + timestamp de alta
    resolução, codificado em base64 e truncado.
    """
    data = f"{name}{national_id}{time.time_ns()}"
    digest = hashlib.sha256(data.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")[:BIOMETRIC_TOKEN_LENGTH]


@dataclass(frozen=True)
class Person:
    name: str
    national_id: str
    birth_date: date
    biometric_token: str
    last_contact: datetime
    status: PersonStatus = PersonStatus.UNKNOWN
    position: Optional[Location] = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    # ── Regras de negócio ──

    def touch(self, now: datetime) -> "Person":
        """Retorna nova instância com o último contato renovado."""
        return replace(self, last_contact=now)

    def relocate(self, position: Location) -> "Person":
        return replace(self, position=position, last_contact=position.recorded_at)

    def time_without_contact(self, now: datetime) -> timedelta:
        return now - self.last_contact

    def is_at_risk(self, now: datetime) -> bool:
        # Exatamente no limite ainda não conta como risco
        return self.time_without_contact(now) > AT_RISK_THRESHOLD
