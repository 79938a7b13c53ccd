# app/infra/rates/base.py
from abc import ABC, abstractmethod


class RateSource(ABC):
    """Contrato de cualquier fuente de la tasa USD -> Bs."""

    name: str = "rate-source"

    @abstractmethod
    def fetch(self) -> float:
        """
        Obtiene la tasa actual con un único intento.

        Lanza una subclase de RateSourceError si falla. No debe modificar
        estado compartido: la caché es quien guarda el resultado.
        """
