"""Serialização do payload de sincronização enviado aos dispositivos."""

from __future__ import annotations

import json
from datetime import datetime

SYNC_PAYLOAD_VERSION = "1.0"


def build_sync_payload(
    people: int,
    open_failures: int,
    active_devices: int,
    timestamp: datetime,
) -> bytes:
    data = {
        "pessoas": people,
        "falhas": open_failures,
        "dispositivos": active_devices,
        "timestamp": timestamp.isoformat(),
        "versao": SYNC_PAYLOAD_VERSION,
    }
    return json.dumps(data, separators=(",", ":")).encode("utf-8")
