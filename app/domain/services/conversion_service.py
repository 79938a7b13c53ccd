# app/domain/services/conversion_service.py
import math

from app.domain.entities.conversion import ConversionRequest, ConversionResult, Direction
from app.domain.errors import InvalidAmountError
from app.domain.services.formatter import NumericFormatter

MENSAJE_TASA_CERO = (
    "No se puede convertir de Bs a $ con una tasa de 0. "
    "La tasa actual obtenida es 0."
)
MENSAJE_FUERA_DE_RANGO = (
    "El monto es demasiado grande para convertirlo. "
    "Por favor, ingresa un monto menor."
)


def parse_amount(texto: str | None) -> float:
    """
    Convierte el monto del formulario a float.

    Se eliminan las comas de miles ("10,000.50" -> 10000.50). Montos vacíos,
    no numéricos, no finitos o negativos se rechazan con InvalidAmountError.
    """
    limpio = (texto or "").replace(",", "").strip()
    if not limpio:
        raise InvalidAmountError("Monto vacío")
    # float() acepta "1_000"; un monto escrito así no es válido
    if "_" in limpio:
        raise InvalidAmountError(f"Monto no numérico: '{texto}'")

    try:
        monto = float(limpio)
    except ValueError:
        raise InvalidAmountError(f"Monto no numérico: '{texto}'") from None

    if not math.isfinite(monto):
        raise InvalidAmountError(f"Monto no finito: '{texto}'")
    if monto < 0:
        raise InvalidAmountError(f"Monto negativo: '{texto}'")
    return monto


def parse_request(amount_text: str | None, direction_token: str | None) -> ConversionRequest:
    """Valida los campos del formulario; el monto se valida primero."""
    return ConversionRequest(
        amount=parse_amount(amount_text),
        direction=Direction.from_token(direction_token),
    )


class ConversionEngine:
    def __init__(self, formatter: NumericFormatter):
        self.formatter = formatter

    def convert(self, rate: float, amount: float, direction: Direction) -> ConversionResult:
        resultado = ConversionResult(
            direction=direction,
            amount=amount,
            rate=rate,
            converted_value=None,
            formatted_input=self.formatter.format(amount),
            formatted_converted=None,
            formatted_rate=self.formatter.format(rate),
        )

        if direction is Direction.FOREIGN_TO_LOCAL:
            resultado.converted_value = amount * rate
        else:
            # Tasa 0 solo ocurre si el scraping devuelve basura; no se divide.
            if rate == 0:
                resultado.error_message = MENSAJE_TASA_CERO
                return resultado
            resultado.converted_value = amount / rate

        if not math.isfinite(resultado.converted_value):
            resultado.converted_value = None
            resultado.error_message = MENSAJE_FUERA_DE_RANGO
            return resultado

        resultado.formatted_converted = self.formatter.format(resultado.converted_value)
        return resultado
