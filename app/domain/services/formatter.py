# app/domain/services/formatter.py
import math
from dataclasses import dataclass

from app.core.config import settings


@dataclass(frozen=True)
class SeparatorConfig:
    thousands: str = ","
    decimal: str = "."

    def __post_init__(self) -> None:
        if not self.decimal:
            raise ValueError("El separador decimal no puede estar vacío")
        if self.thousands == self.decimal:
            raise ValueError("Los separadores de miles y decimales deben ser distintos")


class NumericFormatter:
    """
    Formatea montos con dos decimales fijos y separador de miles.

    Ejemplo con la configuración por defecto:
        1234567.5 -> "1,234,567.50"
    """

    def __init__(self, separators: SeparatorConfig | None = None):
        self.separators = separators or SeparatorConfig()

    def format(self, value: float) -> str:
        if not math.isfinite(value):
            raise ValueError(f"No se puede formatear un valor no finito: {value}")

        texto = f"{abs(value):.2f}"
        entero, decimales = texto.split(".")

        grupos = []
        while len(entero) > 3:
            grupos.insert(0, entero[-3:])
            entero = entero[:-3]
        grupos.insert(0, entero)

        signo = "-" if value < 0 and texto != "0.00" else ""
        return f"{signo}{self.separators.thousands.join(grupos)}{self.separators.decimal}{decimales}"


def formatter_from_settings() -> NumericFormatter:
    return NumericFormatter(
        SeparatorConfig(
            thousands=settings.THOUSANDS_SEPARATOR,
            decimal=settings.DECIMAL_SEPARATOR,
        )
    )
