# app/main.py
import logging
from datetime import timedelta
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from app.api.v1.router import api_router_v1
from app.core.config import settings
from app.core.logging import setup_logging
from app.domain.services.conversion_service import ConversionEngine
from app.domain.services.formatter import NumericFormatter, formatter_from_settings
from app.infra.cache.rate_cache import RateCache
from app.infra.rates.bcv_source import BCVRateSource
from app.web.pages import build_templates, router as pages_router

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def build_rate_cache() -> RateCache:
    return RateCache(
        source=BCVRateSource(),
        ttl=timedelta(minutes=settings.RATE_CACHE_MINUTES),
    )


def create_app(
    rate_cache: RateCache | None = None,
    formatter: NumericFormatter | None = None,
) -> FastAPI:
    setup_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
    )

    # Estado de la app: una sola caché, un motor y sus plantillas
    engine = ConversionEngine(formatter or formatter_from_settings())
    app.state.rate_cache = rate_cache or build_rate_cache()
    app.state.engine = engine
    app.state.templates = build_templates(engine.formatter)

    # Rate limiting
    limiter = Limiter(
        key_func=get_remote_address,
        default_limits=[settings.RATE_LIMIT],
        enabled=settings.RATE_LIMIT_ENABLED,
    )
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # Routers
    app.include_router(api_router_v1)
    app.include_router(pages_router)
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    logger.info(
        f"🚀 {settings.PROJECT_NAME} listo (caché de {settings.RATE_CACHE_MINUTES} min, "
        f"fuente {settings.RATE_SOURCE_URL})"
    )
    return app


def _rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(
        status_code=429,
        content={"detail": "Rate limit exceeded", "error": str(exc)},
    )


app = create_app()
