from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from .entity import FailureIncident


class IFailureRepository(ABC):

    @abstractmethod
    def get_by_id(self, incident_id: str) -> Optional[FailureIncident]:
        ...

    @abstractmethod
    def list_all(self) -> Sequence[FailureIncident]:
        ...

    @abstractmethod
    def list_open(self) -> Sequence[FailureIncident]:
        ...

    @abstractmethod
    def add(self, incident: FailureIncident) -> FailureIncident:
        ...

    @abstractmethod
    def save(self, incident: FailureIncident) -> FailureIncident:
        ...
