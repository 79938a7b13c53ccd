# app/infra/rates/bcv_source.py
import logging
import math

import requests
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from app.core.config import settings
from app.domain.errors import (
    NetworkError,
    NotFoundError,
    NumericFormatError,
    ParseError,
    UpstreamStatusError,
)
from app.infra.rates.base import RateSource

logger = logging.getLogger(__name__)


def parse_rate_text(texto: str) -> float:
    """Convierte el texto de la página ("36,50120000") a float."""
    limpio = texto.strip().replace(",", ".")
    if "_" in limpio:
        raise NumericFormatError(limpio)
    try:
        tasa = float(limpio)
    except ValueError:
        raise NumericFormatError(limpio) from None

    if not math.isfinite(tasa):
        raise NumericFormatError(limpio)
    return tasa


class BCVRateSource(RateSource):
    """Obtiene la tasa oficial del dólar haciendo scraping de la página del BCV."""

    name = "bcv"

    def __init__(
        self,
        url: str = settings.RATE_SOURCE_URL,
        selector: str = settings.RATE_SELECTOR,
        timeout: float = settings.RATE_FETCH_TIMEOUT,
        verify_tls: bool = settings.RATE_SOURCE_VERIFY_TLS,
        user_agent: str = settings.RATE_USER_AGENT,
        session: requests.Session | None = None,
    ):
        self.url = url
        self.selector = selector
        self.timeout = timeout
        self.verify_tls = verify_tls
        self.headers = {"User-Agent": user_agent}
        self.session = session or requests.Session()

    def fetch(self) -> float:
        # -----------------------------
        # 1. Petición HTTP (siempre con timeout)
        # -----------------------------
        try:
            r = self.session.get(
                self.url,
                headers=self.headers,
                timeout=self.timeout,
                verify=self.verify_tls,
            )
        except requests.RequestException as e:
            logger.error(f"Error al hacer la petición HTTP a {self.url}: {e}")
            raise NetworkError(f"error al conectar con el BCV: {e}") from e

        if r.status_code != 200:
            logger.error(f"El BCV respondió con estado HTTP {r.status_code}")
            raise UpstreamStatusError(r.status_code)

        # -----------------------------
        # 2. Parseo del documento
        # -----------------------------
        if not r.content:
            logger.error("El BCV respondió con un cuerpo vacío")
            raise ParseError("la página del BCV llegó vacía")

        try:
            doc = BeautifulSoup(r.content, "html.parser")
        except ParserRejectedMarkup as e:
            logger.error(f"Error al parsear el HTML del BCV: {e}")
            raise ParseError(f"error al procesar la página del BCV: {e}") from e

        # -----------------------------
        # 3. Extracción del texto (si hay varios nodos gana el último)
        # -----------------------------
        nodos = doc.select(self.selector)
        texto = nodos[-1].get_text().strip() if nodos else ""
        if not texto:
            logger.error(f"No se encontró la tasa con el selector '{self.selector}'")
            raise NotFoundError("no se pudo encontrar la tasa del dólar en la página del BCV")

        # -----------------------------
        # 4. Coma decimal -> punto
        # -----------------------------
        try:
            return parse_rate_text(texto)
        except NumericFormatError:
            logger.error(f"Error al convertir la tasa '{texto}' a float")
            raise
