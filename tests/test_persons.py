"""Testes do PersonRegistry — cadastro, biometria, localização e risco."""

import dataclasses
from datetime import date, datetime, timedelta

import pytest

from emergency_monitor.domain.events.base import EventKind
from emergency_monitor.domain.shared.errors import ConflictError, NotFoundError, ValidationError
from emergency_monitor.domain.shared.policy import BIOMETRIC_TOKEN_LENGTH
from emergency_monitor.domain.systems.persons.entity import PersonStatus


def _register_ana(persons):
    return persons.register("Ana", "12345678901", date(1990, 1, 1))


def test_register_person(persons, event_log, clock):
    ana = _register_ana(persons)

    assert ana.id
    assert ana.name == "Ana"
    assert ana.status == PersonStatus.UNKNOWN
    assert ana.last_contact == clock.now
    assert len(ana.biometric_token) == BIOMETRIC_TOKEN_LENGTH

    events = event_log.query(kind=EventKind.PERSON_REGISTERED)
    assert len(events) == 1
    assert events[0].related_id == ana.id


def test_register_trims_name_and_national_id(persons):
    p = persons.register("  João Silva ", " 12345678901 ", date(1990, 5, 15))
    assert p.name == "João Silva"
    assert p.national_id == "12345678901"


def test_biometric_tokens_differ_between_people(persons):
    a = _register_ana(persons)
    b = persons.register("Bia", "98765432100", date(1985, 8, 22))
    assert a.biometric_token != b.biometric_token


@pytest.mark.parametrize(
    "name, national_id, birth_date",
    [
        ("", "12345678901", date(1990, 1, 1)),
        ("   ", "12345678901", date(1990, 1, 1)),
        ("Ana", "", date(1990, 1, 1)),
        ("Ana", "123", date(1990, 1, 1)),
        ("Ana", "1234567890a", date(1990, 1, 1)),
        ("Ana", "123456789012", date(1990, 1, 1)),
        ("Ana", "12345678901", date(2026, 1, 11)),
        ("Ana", "12345678901", date(1900, 1, 1)),
    ],
)
def test_register_validation_errors(persons, event_log, name, national_id, birth_date):
    with pytest.raises(ValidationError):
        persons.register(name, national_id, birth_date)

    assert persons.list_all() == []
    errors = event_log.query(kind=EventKind.ERROR)
    assert len(errors) == 1
    assert errors[0].description.startswith("Erro ao registrar pessoa")


def test_register_birth_date_boundaries(persons):
    # Hoje e exatamente 120 anos atrás são aceitos
    persons.register("Recém-nascido", "11111111111", date(2026, 1, 10))
    persons.register("Decano", "22222222222", date(1906, 1, 10))
    with pytest.raises(ValidationError):
        persons.register("Velho demais", "33333333333", date(1906, 1, 9))


def test_register_accepts_datetime_birth_date(persons):
    p = persons.register("Ana", "12345678901", datetime(1990, 1, 1, 8, 30))
    assert p.birth_date == date(1990, 1, 1)


def test_duplicate_national_id_conflict(persons, event_log):
    _register_ana(persons)
    with pytest.raises(ConflictError):
        persons.register("Outra Ana", "12345678901", date(1991, 2, 2))

    assert len(persons.list_all()) == 1
    assert "CPF já cadastrado" in event_log.query(kind=EventKind.ERROR)[0].description


def test_find_by_biometric_token_refreshes_last_contact(persons, event_log, clock):
    ana = _register_ana(persons)
    clock.advance(hours=1)

    found = persons.find_by_biometric_token(ana.biometric_token)

    assert found.id == ana.id
    assert found.last_contact == clock.now
    assert found.last_contact > ana.last_contact
    assert persons.get(ana.id).last_contact == clock.now
    detections = event_log.query(kind=EventKind.BIOMETRIC_DETECTION)
    assert [e.related_id for e in detections] == [ana.id]


def test_find_by_unknown_token_returns_none(persons, event_log):
    _register_ana(persons)
    assert persons.find_by_biometric_token("nao-existe") is None
    assert event_log.query(kind=EventKind.BIOMETRIC_DETECTION) == []


def test_find_by_empty_token_is_validation_error(persons, event_log):
    with pytest.raises(ValidationError):
        persons.find_by_biometric_token("  ")
    assert len(event_log.query(kind=EventKind.ERROR)) == 1


def test_update_location(persons, clock):
    ana = _register_ana(persons)
    clock.advance(minutes=30)

    updated = persons.update_location(ana.id, -23.5505, -46.6333, "São Paulo - Centro")

    assert updated.position.latitude == -23.5505
    assert updated.position.longitude == -46.6333
    assert updated.position.description == "São Paulo - Centro"
    assert updated.position.recorded_at == clock.now
    assert updated.last_contact == clock.now


@pytest.mark.parametrize("lat, lon", [(91, 0), (-90.5, 0), (0, 180.1), (0, -181), (200, 300)])
def test_update_location_out_of_range(persons, event_log, lat, lon):
    ana = _register_ana(persons)
    with pytest.raises(ValidationError):
        persons.update_location(ana.id, lat, lon)
    assert persons.get(ana.id).position is None
    assert len(event_log.query(kind=EventKind.ERROR)) == 1


def test_update_location_accepts_range_limits(persons):
    ana = _register_ana(persons)
    persons.update_location(ana.id, 90, -180)
    persons.update_location(ana.id, -90, 180)


def test_update_location_unknown_person(persons, event_log):
    with pytest.raises(NotFoundError):
        persons.update_location("nao-existe", 0, 0)
    assert len(event_log.query(kind=EventKind.ERROR)) == 1


def test_get_unknown_person(persons):
    with pytest.raises(NotFoundError):
        persons.get("nao-existe")


def test_at_risk_scenario(persons, clock):
    ana = _register_ana(persons)
    assert persons.list_at_risk() == []

    clock.advance(hours=3)
    assert [p.id for p in persons.list_at_risk()] == [ana.id]


def test_at_risk_boundary_is_excluded(persons, clock):
    _register_ana(persons)
    clock.advance(hours=2)
    assert persons.list_at_risk() == []

    clock.advance(microseconds=1)
    assert len(persons.list_at_risk()) == 1


def test_location_update_clears_risk(persons, clock):
    ana = _register_ana(persons)
    clock.advance(hours=3)
    persons.update_location(ana.id, 0, 0)
    assert persons.list_at_risk() == []


def test_list_all_is_a_defensive_copy(persons):
    ana = _register_ana(persons)

    people = persons.list_all()
    people.clear()
    assert len(persons.list_all()) == 1

    with pytest.raises(dataclasses.FrozenInstanceError):
        ana.last_contact = ana.last_contact - timedelta(days=1)
