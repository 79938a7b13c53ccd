# app/api/deps.py
from fastapi import Request

from app.domain.services.conversion_service import ConversionEngine
from app.infra.cache.rate_cache import RateCache


def get_rate_cache(request: Request) -> RateCache:
    """Dependencia FastAPI: la caché única creada en create_app()."""
    return request.app.state.rate_cache


def get_engine(request: Request) -> ConversionEngine:
    return request.app.state.engine
