# app/api/v1/endpoints/health.py
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from app.api.deps import get_rate_cache
from app.core.config import settings
from app.domain.errors import RateSourceError
from app.infra.cache.rate_cache import RateCache
from app.schemas.health_schemas import ComponentStatus, HealthResponse, ServiceInfo

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check(cache: RateCache = Depends(get_rate_cache)):
    t = datetime.now(timezone.utc).isoformat()

    # Tasas (usa la caché; solo consulta al BCV si está vencida)
    try:
        cache.get()
        exchange_status = ComponentStatus(status="operational", detail="BCV FX scraper")
    except RateSourceError as e:
        exchange_status = ComponentStatus(status="major_outage", detail=f"BCV error: {e}")

    entry = cache.snapshot()
    exchange_status.last_update = entry.fetched_at.isoformat() if entry else None
    exchange_status.fresh = cache.is_fresh()

    if exchange_status.status != "operational":
        indicator = "major_outage"
        desc = "Exchange rate source unavailable."
    else:
        indicator = "operational"
        desc = "All systems functional."

    return HealthResponse(
        service=ServiceInfo(
            name=settings.PROJECT_NAME,
            version=settings.PROJECT_VERSION,
            environment=settings.ENVIRONMENT,
            time=t,
        ),
        indicator=indicator,
        description=desc,
        components={"exchange": exchange_status},
    )
