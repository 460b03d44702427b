from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .entity import Person


class IPersonRepository(ABC):

    @abstractmethod
    def get_by_id(self, person_id: str) -> Optional[Person]:
        ...

    @abstractmethod
    def get_by_national_id(self, national_id: str) -> Optional[Person]:
        ...

    @abstractmethod
    def get_by_biometric_token(self, token: str) -> Optional[Person]:
        ...

    @abstractmethod
    def list_all(self) -> Sequence[Person]:
        ...

    @abstractmethod
    def add(self, person: Person) -> Person:
        ...

    @abstractmethod
    def save(self, person: Person) -> Person:
        """Substitui o registro existente com o mesmo id."""
        ...

    @abstractmethod
    def count(self) -> int:
        ...
