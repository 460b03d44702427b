"""
PersonRegistry — cadastro de pessoas, detecção biométrica e localização.

Dono exclusivo do repositório de pessoas; devolve apenas snapshots
imutáveis. Mutações são serializadas por um lock do próprio registry.
"""

from __future__ import annotations

import logging
import threading
from datetime import date, datetime
from typing import Optional

from emergency_monitor.application.shared.audit import audit_failures
from emergency_monitor.application.shared.event_log import EventLog
from emergency_monitor.domain.events.base import EventKind
from emergency_monitor.domain.shared.clock import Clock, utc_now
from emergency_monitor.domain.shared.errors import ConflictError, NotFoundError, ValidationError
from emergency_monitor.domain.shared.policy import MAX_AGE_YEARS
from emergency_monitor.domain.shared.value_objects import Location, NationalId
from emergency_monitor.domain.systems.persons.entity import Person, generate_biometric_token
from emergency_monitor.domain.systems.persons.repository import IPersonRepository
from emergency_monitor.infrastructure.systems.persons.repository import InMemoryPersonRepository

logger = logging.getLogger(__name__)


def _years_before(day: date, years: int) -> date:
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        # 29/02 em ano não bissexto
        return day.replace(year=day.year - years, day=28)


class PersonRegistry:
    def __init__(
        self,
        event_log: EventLog,
        repo: Optional[IPersonRepository] = None,
        clock: Clock = utc_now,
    ) -> None:
        self._events = event_log
        self._repo = repo or InMemoryPersonRepository()
        self._clock = clock
        self._lock = threading.RLock()

    # ── Mutações ──

    def register(self, name: str, national_id: str, birth_date: date) -> Person:
        with audit_failures(self._events, "Erro ao registrar pessoa"), self._lock:
            name = (name or "").strip()
            if not name:
                raise ValidationError("Nome não pode estar vazio")
            national_id = str(NationalId((national_id or "").strip()))

            now = self._clock()
            birth_date = self._validate_birth_date(birth_date, now.date())

            if self._repo.get_by_national_id(national_id) is not None:
                raise ConflictError("CPF já cadastrado no sistema")

            person = Person(
                name=name,
                national_id=national_id,
                birth_date=birth_date,
                biometric_token=generate_biometric_token(name, national_id),
                last_contact=now,
            )
            self._repo.add(person)
            self._events.append(
                EventKind.PERSON_REGISTERED,
                f"Pessoa {name} registrada com sucesso",
                person.id,
            )

        logger.info("Pessoa %s registrada com ID: %s", person.name, person.id)
        return person

    def find_by_biometric_token(self, token: str) -> Optional[Person]:
        """
        Busca pelo token biométrico. Uma detecção renova o último contato
        da pessoa: é uma leitura com efeito colateral de escrita.
        """
        with audit_failures(self._events, "Erro na busca biométrica"), self._lock:
            if not token or not token.strip():
                raise ValidationError("Hash da biometria não pode estar vazio")

            person = self._repo.get_by_biometric_token(token)
            if person is None:
                return None

            person = self._repo.save(person.touch(self._clock()))
            self._events.append(
                EventKind.BIOMETRIC_DETECTION,
                f"Pessoa {person.name} detectada via biometria",
                person.id,
            )
        return person

    def update_location(
        self,
        person_id: str,
        latitude: float,
        longitude: float,
        description: str = "",
    ) -> Person:
        with audit_failures(self._events, "Erro ao atualizar localização"), self._lock:
            position = Location(
                latitude=latitude,
                longitude=longitude,
                description=description or "",
                recorded_at=self._clock(),
            )
            person = self._repo.get_by_id(person_id)
            if person is None:
                raise NotFoundError("Pessoa", person_id)

            person = self._repo.save(person.relocate(position))

        logger.info("Localização atualizada para %s: %s, %s", person.name, latitude, longitude)
        return person

    # ── Consultas ──

    def get(self, person_id: str) -> Person:
        with self._lock:
            person = self._repo.get_by_id(person_id)
        if person is None:
            raise NotFoundError("Pessoa", person_id)
        return person

    def list_at_risk(self) -> list[Person]:
        now = self._clock()
        return [p for p in self.list_all() if p.is_at_risk(now)]

    def list_all(self) -> list[Person]:
        with self._lock:
            return list(self._repo.list_all())

    def count(self) -> int:
        with self._lock:
            return self._repo.count()

    # ── Validação ──

    @staticmethod
    def _validate_birth_date(birth_date: date, today: date) -> date:
        if not isinstance(birth_date, date):
            raise ValidationError("Data de nascimento inválida")
        if isinstance(birth_date, datetime):
            birth_date = birth_date.date()
        if birth_date > today:
            raise ValidationError("Data de nascimento não pode ser futura")
        if birth_date < _years_before(today, MAX_AGE_YEARS):
            raise ValidationError("Data de nascimento inválida")
        return birth_date
