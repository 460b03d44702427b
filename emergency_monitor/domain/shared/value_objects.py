"""Value Objects do domínio — imutáveis, comparados por valor."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from emergency_monitor.domain.shared.errors import ValidationError
from emergency_monitor.domain.shared.policy import NATIONAL_ID_LENGTH


@dataclass(frozen=True)
class Location:
    """
    Coordenada geográfica informada para uma pessoa.
    Valida os intervalos de latitude/longitude na construção.
    """
    latitude: float
    longitude: float
    recorded_at: datetime
    description: str = ""

    def __post_init__(self):
        if not -90 <= self.latitude <= 90:
            raise ValidationError("Latitude deve estar entre -90 e 90 graus")
        if not -180 <= self.longitude <= 180:
            raise ValidationError("Longitude deve estar entre -180 e 180 graus")

    def to_dict(self) -> dict[str, Any]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "description": self.description,
            "recorded_at": self.recorded_at.isoformat(),
        }


@dataclass(frozen=True)
class NationalId:
    """CPF: exatamente 11 dígitos."""
    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValidationError("CPF não pode estar vazio")
        digits_only = self.value.isascii() and self.value.isdigit()
        if len(self.value) != NATIONAL_ID_LENGTH or not digits_only:
            raise ValidationError(f"CPF deve ter {NATIONAL_ID_LENGTH} dígitos")

    def __str__(self) -> str:
        return self.value
