# app/web/pages.py
import logging
from pathlib import Path
from typing import Any, Dict

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import PlainTextResponse
from fastapi.templating import Jinja2Templates

from app.api.deps import get_engine, get_rate_cache
from app.domain.entities.conversion import Direction
from app.domain.errors import InvalidAmountError, InvalidDirectionError, RateSourceError
from app.domain.services.conversion_service import ConversionEngine, parse_request
from app.domain.services.formatter import NumericFormatter
from app.infra.cache.rate_cache import RateCache

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

router = APIRouter(tags=["pages"])

MENSAJE_SIN_TASA = (
    "No se pudo obtener la tasa del dólar en este momento. Por favor, intenta "
    "de nuevo más tarde o verifica tu conexión a internet."
)
MENSAJE_MONTO_INVALIDO = "Monto inválido. Por favor, ingresa un número válido (ej. 10.000,50)."
MENSAJE_DIRECCION_INVALIDA = "Dirección de conversión inválida."


def build_templates(formatter: NumericFormatter) -> Jinja2Templates:
    """Plantillas de una app, con el filtro `format_amount` de su formateador."""
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.filters["format_amount"] = formatter.format
    return templates


def _datos_base(cache: RateCache, engine: ConversionEngine) -> Dict[str, Any] | None:
    """Datos comunes de la página, o None si no hay tasa."""
    try:
        rate = cache.get()
    except RateSourceError as e:
        logger.error(f"Error en la página principal al obtener la tasa: {e}")
        return None

    entry = cache.snapshot()
    return {
        "rate": rate,
        # Formato de fecha venezolano (DD/MM/YYYY HH:MM:SS)
        "last_updated": entry.fetched_at.strftime("%d/%m/%Y %H:%M:%S") if entry else "",
        "formatted_input": engine.formatter.format(0),
        "formatted_converted": None,
        "direction": Direction.FOREIGN_TO_LOCAL.value,
        "error_message": None,
    }


def _render(request: Request, data: Dict[str, Any]):
    templates = request.app.state.templates
    return templates.TemplateResponse(request, "index.html", {"page": data})


def _sin_tasa():
    return PlainTextResponse(MENSAJE_SIN_TASA, status_code=503)


@router.get("/", include_in_schema=False)
def home(
    request: Request,
    cache: RateCache = Depends(get_rate_cache),
    engine: ConversionEngine = Depends(get_engine),
):
    data = _datos_base(cache, engine)
    if data is None:
        return _sin_tasa()
    return _render(request, data)


@router.post("/", include_in_schema=False)
def convertir_formulario(
    request: Request,
    amount: str = Form(""),
    direction: str = Form(Direction.FOREIGN_TO_LOCAL.value),
    cache: RateCache = Depends(get_rate_cache),
    engine: ConversionEngine = Depends(get_engine),
):
    data = _datos_base(cache, engine)
    if data is None:
        return _sin_tasa()

    data["direction"] = direction

    try:
        solicitud = parse_request(amount, direction)
    except InvalidAmountError as e:
        logger.info(f"Monto rechazado: {e}")
        # Se muestra el texto original para que el usuario lo corrija
        data["formatted_input"] = amount
        data["error_message"] = MENSAJE_MONTO_INVALIDO
        return _render(request, data)
    except InvalidDirectionError as e:
        logger.info(str(e))
        data["formatted_input"] = amount
        data["error_message"] = MENSAJE_DIRECCION_INVALIDA
        return _render(request, data)

    resultado = engine.convert(data["rate"], solicitud.amount, solicitud.direction)
    data.update(
        formatted_input=resultado.formatted_input,
        formatted_converted=resultado.formatted_converted,
        error_message=resultado.error_message,
    )
    return _render(request, data)
