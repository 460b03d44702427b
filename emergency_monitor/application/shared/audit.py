"""
Trilha de auditoria de falhas.

Toda operação de registry que falha grava um evento ERROR antes de a
exceção chegar ao chamador. Se a própria gravação falhar, isso é apenas
logado; a exceção original continua sendo a propagada.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from emergency_monitor.application.shared.event_log import EventLog
from emergency_monitor.domain.events.base import EventKind

logger = logging.getLogger(__name__)


@contextmanager
def audit_failures(event_log: EventLog, context: str) -> Iterator[None]:
    try:
        yield
    except Exception as exc:
        logger.warning("%s: %s", context, exc)
        try:
            event_log.append(EventKind.ERROR, f"{context}: {exc}")
        except Exception:
            logger.exception("Falha ao gravar evento de erro (%s)", context)
        raise
