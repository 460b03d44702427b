"""Implementação em memória do repositório de Pessoas."""

from __future__ import annotations

from typing import Optional, Sequence

from emergency_monitor.domain.systems.persons.entity import Person
from emergency_monitor.domain.systems.persons.repository import IPersonRepository


class InMemoryPersonRepository(IPersonRepository):
    """Não sincronizado: o PersonRegistry serializa o acesso."""

    def __init__(self) -> None:
        self._people: dict[str, Person] = {}

    def get_by_id(self, person_id: str) -> Optional[Person]:
        return self._people.get(person_id)

    def get_by_national_id(self, national_id: str) -> Optional[Person]:
        return next((p for p in self._people.values() if p.national_id == national_id), None)

    def get_by_biometric_token(self, token: str) -> Optional[Person]:
        return next((p for p in self._people.values() if p.biometric_token == token), None)

    def list_all(self) -> Sequence[Person]:
        return list(self._people.values())

    def add(self, person: Person) -> Person:
        self._people[person.id] = person
        return person

    def save(self, person: Person) -> Person:
        if person.id not in self._people:
            raise KeyError(person.id)
        self._people[person.id] = person
        return person

    def count(self) -> int:
        return len(self._people)
