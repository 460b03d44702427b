"""
Seed script — popula um MonitoringSystem com dados de demonstração.

Uso:
    python -m emergency_monitor.seed

Registra pessoas, dispositivos e falhas, atualiza localizações, sincroniza
e imprime o relatório de status resultante.
"""

from __future__ import annotations

import json
import logging
from datetime import date

from emergency_monitor.application.system import MonitoringSystem
from emergency_monitor.domain.systems.failures.entity import FailureKind

logger = logging.getLogger(__name__)

DEMO_PEOPLE = [
    ("João Silva", "12345678901", date(1990, 5, 15)),
    ("Maria Santos", "98765432100", date(1985, 8, 22)),
    ("Pedro Oliveira", "11122233344", date(1992, 12, 3)),
]

DEMO_DEVICES = [
    ("Celular-João", "AA:BB:CC:DD:EE:01"),
    ("Celular-Maria", "AA:BB:CC:DD:EE:02"),
    ("Tablet-Pedro", "AA:BB:CC:DD:EE:03"),
]

DEMO_FAILURES = [
    ("Centro", FailureKind.TOTAL, "Queda de árvore na rede elétrica"),
    ("Zona Sul", FailureKind.OVERLOAD, "Sobrecarga na subestação"),
]

DEMO_LOCATIONS = [
    (-23.5505, -46.6333, "São Paulo - Centro"),
    (-23.5629, -46.6544, "São Paulo - Vila Madalena"),
]


def seed(system: MonitoringSystem) -> int:
    """
    Idempotente por CPF: pessoas já cadastradas são mantidas. Retorna o
    número de dispositivos alcançados pela sincronização.
    """
    for name, national_id, birth_date in DEMO_PEOPLE:
        if any(p.national_id == national_id for p in system.persons.list_all()):
            continue
        system.persons.register(name, national_id, birth_date)

    active_addresses = {d.address for d in system.devices.list_active()}
    for name, address in DEMO_DEVICES:
        if address not in active_addresses:
            system.devices.connect(name, address)

    for region, kind, description in DEMO_FAILURES:
        system.failures.open(region, kind, description)

    people = system.persons.list_all()
    for person, (lat, lon, description) in zip(people, DEMO_LOCATIONS):
        system.persons.update_location(person.id, lat, lon, description)

    delivered = system.synchronize()
    logger.info("Seed concluído: %d pessoas, %d dispositivos sincronizados", len(people), delivered)
    return delivered


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s [%(name)s] %(message)s")
    system = MonitoringSystem()
    system.start()
    seed(system)
    print(json.dumps(system.reports.build_status_report().to_dict(), indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
