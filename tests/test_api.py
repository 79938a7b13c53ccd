"""
Pruebas de la API JSON (/api/v1) con httpx.AsyncClient.
"""

import pytest

from app.domain.errors import NetworkError


@pytest.mark.asyncio
async def test_exchange_returns_rate(client):
    response = await client.get("/api/v1/exchange")

    assert response.status_code == 200
    data = response.json()
    assert data["rate"] == 36.5
    assert data["formatted_rate"] == "36.50"
    assert data["fetched_at"] == "2025-01-15T09:30:00"
    assert data["status"] == "activo"


@pytest.mark.asyncio
async def test_exchange_unavailable(client, source):
    source.error = NetworkError("caído")
    response = await client.get("/api/v1/exchange")

    assert response.status_code == 503
    assert response.json()["detail"] == "No hay tasa disponible temporalmente"


@pytest.mark.asyncio
async def test_convert_usd_to_bs(client):
    response = await client.get(
        "/api/v1/exchange/convert", params={"amount": "100", "direction": "usd_to_bs"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["converted_value"] == 3650
    assert data["formatted_converted"] == "3,650.00"
    assert data["error_message"] is None


@pytest.mark.asyncio
async def test_convert_zero_rate_is_not_an_http_error(client, source):
    source.rates = [0.0]
    response = await client.get(
        "/api/v1/exchange/convert", params={"amount": "100", "direction": "bs_to_usd"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["converted_value"] is None
    assert data["error_message"]


@pytest.mark.asyncio
async def test_convert_amount_too_large_is_not_an_http_error(client):
    response = await client.get(
        "/api/v1/exchange/convert", params={"amount": "1e308", "direction": "usd_to_bs"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["converted_value"] is None
    assert data["formatted_converted"] is None
    assert data["error_message"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params",
    [
        {"amount": "abc", "direction": "usd_to_bs"},
        {"amount": "-1", "direction": "usd_to_bs"},
        {"amount": "10", "direction": "eur_to_bs"},
    ],
)
async def test_convert_invalid_input(client, source, params):
    response = await client.get("/api/v1/exchange/convert", params=params)

    assert response.status_code == 422
    assert source.calls == 0


@pytest.mark.asyncio
async def test_health_operational(client):
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["indicator"] == "operational"
    assert data["components"]["exchange"]["status"] == "operational"
    assert data["components"]["exchange"]["fresh"] is True
    assert data["components"]["exchange"]["last_update"] == "2025-01-15T09:30:00"


@pytest.mark.asyncio
async def test_health_major_outage(client, source):
    source.error = NetworkError("caído")
    response = await client.get("/api/v1/health")

    assert response.status_code == 200
    data = response.json()
    assert data["indicator"] == "major_outage"
    assert data["components"]["exchange"]["last_update"] is None
    assert data["components"]["exchange"]["fresh"] is False
