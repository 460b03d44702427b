"""Entidade de domínio Device — dispositivo par de curto alcance."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime


@dataclass(frozen=True)
class Device:
    name: str
    address: str
    last_sync: datetime
    active: bool = True
    received_payloads: tuple[bytes, ...] = ()
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def deactivate(self) -> "Device":
        """Soft delete: o dispositivo permanece no registro para auditoria."""
        return replace(self, active=False)

    def receive(self, payload: bytes, now: datetime) -> "Device":
        return replace(
            self,
            received_payloads=self.received_payloads + (payload,),
            last_sync=now,
        )
