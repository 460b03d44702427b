"""
EventLog — registro append-only dos eventos do sistema.

Compartilhado por todos os registries; protegido por lock próprio,
independente dos locks dos registries.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import Optional

from emergency_monitor.domain.events.base import EventKind, SystemEvent
from emergency_monitor.domain.shared.clock import Clock, as_utc, utc_now

logger = logging.getLogger(__name__)


class EventLog:
    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock
        self._events: list[SystemEvent] = []
        self._lock = threading.Lock()

    def append(self, kind: EventKind, description: str, related_id: Optional[str] = None) -> SystemEvent:
        kind = EventKind(kind)
        event = SystemEvent(
            kind=kind,
            description=description,
            related_id=related_id,
            occurred_at=self._clock(),
        )
        with self._lock:
            self._events.append(event)
        logger.debug("Evento %s: %s", kind.name, description)
        return event

    def query(
        self,
        kind: Optional[EventKind] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
    ) -> list[SystemEvent]:
        """
        Filtros conjuntivos; retorna do mais recente para o mais antigo.
        since/until sem fuso são tratados como UTC.
        """
        since, until = as_utc(since), as_utc(until)
        with self._lock:
            events = list(self._events)

        if kind is not None:
            events = [e for e in events if e.kind == kind]
        if since is not None:
            events = [e for e in events if e.occurred_at >= since]
        if until is not None:
            events = [e for e in events if e.occurred_at <= until]

        # sorted é estável: eventos com o mesmo timestamp saem do último appendado ao primeiro
        return sorted(reversed(events), key=lambda e: e.occurred_at, reverse=True)

    def export_as_lines(self) -> list[str]:
        return [e.as_line() for e in self.query()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)
