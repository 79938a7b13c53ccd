# app/domain/entities/conversion.py
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from app.domain.errors import InvalidDirectionError


class Direction(str, Enum):
    FOREIGN_TO_LOCAL = "usd_to_bs"
    LOCAL_TO_FOREIGN = "bs_to_usd"

    @classmethod
    def from_token(cls, token: str | None) -> "Direction":
        """Traduce el valor del formulario a una dirección."""
        try:
            return cls((token or "").strip())
        except ValueError:
            raise InvalidDirectionError(
                f"Dirección de conversión inválida: '{token}'"
            ) from None


@dataclass(frozen=True)
class CacheEntry:
    rate: float
    fetched_at: datetime  # reloj de pared, solo para mostrar
    stamp: float  # time.monotonic(), para medir la antigüedad


@dataclass(frozen=True)
class ConversionRequest:
    amount: float
    direction: Direction


@dataclass
class ConversionResult:
    direction: Direction
    amount: float
    rate: float
    converted_value: Optional[float]
    formatted_input: str
    formatted_converted: Optional[str]
    formatted_rate: str
    error_message: Optional[str] = None
