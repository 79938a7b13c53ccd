# app/domain/errors.py
"""
Errores de dominio del conversor.

Las fallas de la fuente de la tasa se propagan sin cambios a través de la
caché hasta el borde HTTP, que decide el mensaje para el usuario.
"""


class DomainError(Exception):
    """Base de los errores de dominio."""


class RateSourceError(DomainError):
    """No se pudo obtener la tasa desde la fuente."""


class NetworkError(RateSourceError):
    """La petición HTTP no pudo completarse (conexión, timeout, TLS)."""


class UpstreamStatusError(RateSourceError):
    """La fuente respondió con un estado distinto de 200."""

    def __init__(self, status_code: int):
        super().__init__(f"la fuente respondió con estado HTTP {status_code}")
        self.status_code = status_code


class ParseError(RateSourceError):
    """El cuerpo de la respuesta no se pudo procesar como HTML."""


class NotFoundError(RateSourceError):
    """El selector no encontró el texto de la tasa en la página."""


class NumericFormatError(RateSourceError):
    """El texto encontrado no es un número válido."""

    def __init__(self, raw_text: str):
        super().__init__(f"no se pudo convertir la tasa '{raw_text}' a número")
        self.raw_text = raw_text


class InvalidAmountError(DomainError):
    """El monto ingresado no es un número válido."""


class InvalidDirectionError(DomainError):
    """La dirección de conversión no es ninguna de las soportadas."""
