# app/schemas/exchange_schemas.py
from typing import Optional

from pydantic import BaseModel

from app.domain.entities.conversion import ConversionResult, Direction


class TasaResponse(BaseModel):
    rate: float
    formatted_rate: str
    fetched_at: Optional[str]
    status: str


class ConversionResponse(BaseModel):
    direction: Direction
    amount: float
    rate: float
    converted_value: Optional[float] = None
    formatted_input: str
    formatted_converted: Optional[str] = None
    formatted_rate: str
    error_message: Optional[str] = None

    @classmethod
    def from_result(cls, resultado: ConversionResult) -> "ConversionResponse":
        return cls(
            direction=resultado.direction,
            amount=resultado.amount,
            rate=resultado.rate,
            converted_value=resultado.converted_value,
            formatted_input=resultado.formatted_input,
            formatted_converted=resultado.formatted_converted,
            formatted_rate=resultado.formatted_rate,
            error_message=resultado.error_message,
        )
