"""Testes do StatusReportBuilder e do MonitoringSystem (sincronização)."""

import json
from datetime import date, timedelta

import pytest

from emergency_monitor.domain.events.base import EventKind
from emergency_monitor.domain.shared.errors import NotFoundError
from emergency_monitor.domain.systems.failures.entity import FailureKind


def test_empty_report(system, clock):
    report = system.reports.build_status_report()
    assert report.generated_at == clock.now
    assert report.total_people == 0
    assert report.at_risk == []
    assert report.open_incidents == []
    assert report.active_devices == 0


def test_report_aggregates_registries(system, clock):
    ana = system.persons.register("Ana", "12345678901", date(1990, 1, 1))
    system.persons.register("Bia", "98765432100", date(1985, 8, 22))
    system.persons.update_location(ana.id, -23.5505, -46.6333, "Centro")
    open_one = system.failures.open("Centro", FailureKind.TOTAL, "desc", affected_people=12)
    closed = system.failures.open("Norte", FailureKind.PARTIAL, "desc")
    system.failures.close(closed.id)
    system.devices.connect("A", "AA:BB:CC:DD:EE:01")
    gone = system.devices.connect("B", "AA:BB:CC:DD:EE:02")
    system.devices.disconnect(gone.id)

    clock.advance(hours=3)
    events_before = len(system.event_log)
    report = system.reports.build_status_report()

    assert report.total_people == 2
    assert report.at_risk_count == 2
    entry = next(e for e in report.at_risk if e.person_id == ana.id)
    assert entry.time_without_contact == timedelta(hours=3)
    assert entry.position.description == "Centro"
    assert [i.incident_id for i in report.open_incidents] == [open_one.id]
    assert report.open_incidents[0].elapsed == timedelta(hours=3)
    assert report.open_incidents[0].kind == "TOTAL"
    assert report.active_devices == 1
    # Agregação pura: nenhum evento em caso de sucesso
    assert len(system.event_log) == events_before


def test_report_to_dict(system, clock):
    system.persons.register("Ana", "12345678901", date(1990, 1, 1))
    clock.advance(hours=2, minutes=30)
    data = system.reports.build_status_report().to_dict()

    assert data["total_people"] == 1
    assert data["at_risk_count"] == 1
    assert data["at_risk"][0]["hours_without_contact"] == 2.5
    assert data["at_risk"][0]["position"] is None


def test_report_failure_is_audited(system, monkeypatch):
    def boom():
        raise RuntimeError("registry indisponível")

    monkeypatch.setattr(system.persons, "list_all", boom)

    with pytest.raises(RuntimeError):
        system.reports.build_status_report()

    errors = system.event_log.query(kind=EventKind.ERROR)
    assert errors[0].description == "Erro ao gerar relatório: registry indisponível"


def test_error_event_failure_does_not_mask_original(system, monkeypatch):
    def broken_append(*args, **kwargs):
        raise OSError("log indisponível")

    monkeypatch.setattr(system.event_log, "append", broken_append)

    with pytest.raises(NotFoundError):
        system.failures.close("nao-existe")


def test_synchronize_broadcasts_status_payload(system, clock):
    system.persons.register("Ana", "12345678901", date(1990, 1, 1))
    system.failures.open("Centro", FailureKind.TOTAL, "desc")
    a = system.devices.connect("A", "AA:BB:CC:DD:EE:01")
    system.devices.connect("B", "AA:BB:CC:DD:EE:02")

    assert system.synchronize() == 2

    payload = system.devices.get(a.id).received_payloads[-1]
    data = json.loads(payload.decode("utf-8"))
    assert data == {
        "pessoas": 1,
        "falhas": 1,
        "dispositivos": 2,
        "timestamp": clock.now.isoformat(),
        "versao": "1.0",
    }


def test_synchronize_without_devices_is_noop(system):
    assert system.synchronize() == 0
    assert system.event_log.query(kind=EventKind.ERROR) == []
