"""Testes do EventLog — append, filtros conjuntivos, ordenação e exportação."""

import threading
from datetime import datetime

import pytest

from emergency_monitor.application.shared.event_log import EventLog
from emergency_monitor.domain.events.base import EventKind
from tests.conftest import START, FakeClock


def test_append_assigns_id_and_timestamp(event_log, clock):
    event = event_log.append(EventKind.POWER_FAILURE, "Queda no Centro", "f-1")
    assert event.event_id
    assert event.occurred_at == clock.now
    assert event.related_id == "f-1"
    assert len(event_log) == 1


def test_append_rejects_unknown_kind(event_log):
    with pytest.raises(ValueError):
        event_log.append("terremoto", "não existe")


def test_query_returns_newest_first(event_log, clock):
    event_log.append(EventKind.PERSON_REGISTERED, "primeiro")
    clock.advance(minutes=1)
    event_log.append(EventKind.PERSON_REGISTERED, "segundo")
    clock.advance(minutes=1)
    event_log.append(EventKind.ERROR, "terceiro")

    assert [e.description for e in event_log.query()] == ["terceiro", "segundo", "primeiro"]


def test_query_same_timestamp_keeps_append_order_reversed(event_log):
    event_log.append(EventKind.DEVICE_SYNC, "a")
    event_log.append(EventKind.DEVICE_SYNC, "b")
    assert [e.description for e in event_log.query()] == ["b", "a"]


def test_query_filters_are_conjunctive(event_log, clock):
    event_log.append(EventKind.ERROR, "erro antigo")
    clock.advance(hours=1)
    cutoff = clock.now
    event_log.append(EventKind.ERROR, "erro novo")
    event_log.append(EventKind.POWER_FAILURE, "falha nova")

    assert [e.description for e in event_log.query(kind=EventKind.ERROR)] == ["erro novo", "erro antigo"]
    assert [e.description for e in event_log.query(since=cutoff)] == ["falha nova", "erro novo"]
    assert [e.description for e in event_log.query(kind=EventKind.ERROR, since=cutoff)] == ["erro novo"]
    assert [e.description for e in event_log.query(until=START)] == ["erro antigo"]


def test_query_result_is_a_copy(event_log):
    event_log.append(EventKind.ERROR, "x")
    result = event_log.query()
    result.clear()
    assert len(event_log.query()) == 1


def test_export_as_lines_format(event_log, clock):
    event_log.append(EventKind.POWER_FAILURE, "Falha em Centro")
    clock.advance(seconds=5)
    event_log.append(EventKind.ERROR, "Erro qualquer")

    assert event_log.export_as_lines() == [
        "2026-01-10 12:00:05 [ERROR] Erro qualquer",
        "2026-01-10 12:00:00 [POWER_FAILURE] Falha em Centro",
    ]


def test_concurrent_appends_are_not_lost():
    log = EventLog(clock=FakeClock())

    def worker():
        for i in range(200):
            log.append(EventKind.DEVICE_SYNC, f"evento {i}")

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(log) == 1600


def test_query_accepts_naive_bounds_as_utc(event_log, clock):
    event_log.append(EventKind.ERROR, "antes")
    clock.advance(hours=1)
    event_log.append(EventKind.ERROR, "depois")

    naive_cutoff = datetime(2026, 1, 10, 12, 30)

    assert [e.description for e in event_log.query(since=datetime(2000, 1, 1))] == ["depois", "antes"]
    assert [e.description for e in event_log.query(since=naive_cutoff)] == ["depois"]
    assert [e.description for e in event_log.query(until=naive_cutoff)] == ["antes"]
