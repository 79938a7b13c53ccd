# app/infra/cache/rate_cache.py
import logging
import threading
import time
from datetime import datetime, timedelta
from typing import Callable, Optional

from app.domain.entities.conversion import CacheEntry
from app.infra.rates.base import RateSource

logger = logging.getLogger(__name__)


class RateCache:
    """
    Caché en memoria de la tasa con ventana de frescura.

    - Un único lock cubre la verificación y, si hace falta, la petición a la
      fuente: como mucho hay una petición en curso y quien espera vuelve a
      verificar la frescura al obtener el lock.
    - Si la fuente falla se propaga el error y la entrada anterior queda
      intacta; nunca se sirve una tasa vencida.
    - La antigüedad se mide con un reloj monótono; `clock` (reloj de pared)
      solo fecha la entrada para mostrarla.
    """

    def __init__(
        self,
        source: RateSource,
        ttl: timedelta = timedelta(minutes=10),
        clock: Callable[[], datetime] = datetime.now,
        monotonic: Callable[[], float] = time.monotonic,
    ):
        self.source = source
        self.ttl = ttl
        self._clock = clock
        self._monotonic = monotonic
        self._entry: Optional[CacheEntry] = None
        self._lock = threading.Lock()

    def _edad(self) -> timedelta:
        return timedelta(seconds=self._monotonic() - self._entry.stamp)

    def _vigente(self) -> bool:
        return (
            self._entry is not None
            and self._entry.rate != 0
            and self._edad() < self.ttl
        )

    def get(self, force_refresh: bool = False) -> float:
        with self._lock:
            if not force_refresh and self._vigente():
                logger.info(
                    f"✅ Usando tasa en caché: {self._entry.rate:.2f} "
                    f"(válida por {self.ttl - self._edad()} más)"
                )
                return self._entry.rate

            logger.info(f"🔄 Caché expirada o vacía. Consultando la fuente '{self.source.name}'...")
            rate = self.source.fetch()

            self._entry = CacheEntry(
                rate=rate,
                fetched_at=self._clock(),
                stamp=self._monotonic(),
            )
            logger.info(f"📈 Nueva tasa guardada en caché: {rate:.2f}")
            return rate

    def snapshot(self) -> Optional[CacheEntry]:
        with self._lock:
            return self._entry

    def is_fresh(self) -> bool:
        with self._lock:
            return self._vigente()
