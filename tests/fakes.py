"""
Dobles de prueba: reloj controlable y fuente de tasa que cuenta llamadas.
"""

import threading
import time
from datetime import datetime, timedelta

from app.infra.rates.base import RateSource


class FakeClock:
    """Reloj de pared y reloj monótono controlables por separado."""

    def __init__(self, start: datetime = datetime(2025, 1, 15, 9, 30, 0)):
        self.now = start
        self.elapsed = 0.0

    def __call__(self) -> datetime:
        return self.now

    def monotonic(self) -> float:
        return self.elapsed

    def advance(self, **kwargs) -> None:
        """Pasa el tiempo real: avanzan ambos relojes."""
        paso = timedelta(**kwargs)
        self.now += paso
        self.elapsed += paso.total_seconds()

    def shift_wall(self, **kwargs) -> None:
        """Ajuste del reloj de pared (DST, NTP) sin que pase tiempo real."""
        self.now += timedelta(**kwargs)


class CountingSource(RateSource):
    """Devuelve las tasas de `rates` en orden (la última se repite) y cuenta las llamadas."""

    name = "fake"

    def __init__(self, *rates: float, delay: float = 0.0):
        self.rates = list(rates) or [36.5]
        self.delay = delay
        self.calls = 0
        self.error: Exception | None = None
        self._lock = threading.Lock()

    def fetch(self) -> float:
        with self._lock:
            self.calls += 1
            n = self.calls
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.rates[min(n, len(self.rates)) - 1]
