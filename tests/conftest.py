"""
Fixtures de pytest.
Caché sobre una fuente falsa y cliente HTTP sobre la app.
"""

from datetime import timedelta

import pytest
from httpx import ASGITransport, AsyncClient

from app.infra.cache.rate_cache import RateCache
from app.main import create_app
from tests.fakes import CountingSource, FakeClock


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def source():
    return CountingSource(36.5)


@pytest.fixture
def cache(source, clock):
    return RateCache(source=source, ttl=timedelta(minutes=10), clock=clock, monotonic=clock.monotonic)


@pytest.fixture
def app(cache):
    return create_app(rate_cache=cache)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
