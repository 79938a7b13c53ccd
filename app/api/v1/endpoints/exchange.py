# app/api/v1/endpoints/exchange.py
import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_engine, get_rate_cache
from app.domain.entities.conversion import Direction
from app.domain.errors import InvalidAmountError, InvalidDirectionError, RateSourceError
from app.domain.services.conversion_service import ConversionEngine, parse_request
from app.infra.cache.rate_cache import RateCache
from app.schemas.exchange_schemas import ConversionResponse, TasaResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["exchange"])


def _obtener_tasa(cache: RateCache) -> float:
    try:
        return cache.get()
    except RateSourceError as e:
        logger.error(f"No se pudo obtener la tasa: {e}")
        raise HTTPException(
            status_code=503,
            detail="No hay tasa disponible temporalmente",
        )


@router.get("/exchange", response_model=TasaResponse)
def obtener_tasa_endpoint(
    cache: RateCache = Depends(get_rate_cache),
    engine: ConversionEngine = Depends(get_engine),
):
    rate = _obtener_tasa(cache)
    entry = cache.snapshot()

    return TasaResponse(
        rate=rate,
        formatted_rate=engine.formatter.format(rate),
        fetched_at=entry.fetched_at.isoformat() if entry else None,
        status="activo",
    )


@router.get("/exchange/convert", response_model=ConversionResponse)
def convertir(
    amount: str,
    direction: str = Direction.FOREIGN_TO_LOCAL.value,
    cache: RateCache = Depends(get_rate_cache),
    engine: ConversionEngine = Depends(get_engine),
):
    try:
        solicitud = parse_request(amount, direction)
    except (InvalidAmountError, InvalidDirectionError) as e:
        raise HTTPException(status_code=422, detail=str(e))

    rate = _obtener_tasa(cache)
    resultado = engine.convert(rate, solicitud.amount, solicitud.direction)
    return ConversionResponse.from_result(resultado)
