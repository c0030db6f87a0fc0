"""
End-to-end tests through the ASGI application.
"""

from __future__ import annotations

import json

import httpx
import pytest

import main as app_main


def _client() -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app_main.app), base_url="http://test")


@pytest.mark.asyncio
async def test_ready_endpoint():
    response = await app_main.ready()
    payload = json.loads(response.body.decode("utf-8"))
    assert response.status_code == 200
    assert payload["ready"] is True


@pytest.mark.asyncio
async def test_chart_roundtrip_over_http():
    async with _client() as client:
        r = await client.post("/api/v1/burn-rate/chart", json={"sloTarget": 99.9, "badEventRate": 5})
    assert r.status_code == 200
    body = r.json()
    assert body["alert_zone"]["start"] < body["alert_zone"]["end"]
    assert len(body["series"]["instant"]) == 4


@pytest.mark.asyncio
async def test_empty_body_uses_defaults():
    async with _client() as client:
        r = await client.post("/api/v1/burn-rate/chart", json={})
    assert r.status_code == 200
    assert r.json()["burn_rate"] == 20.0


@pytest.mark.asyncio
async def test_validation_error_over_http():
    async with _client() as client:
        r = await client.post("/api/v1/burn-rate/chart", json={"sloTarget": 150})
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_health_and_form_over_http():
    async with _client() as client:
        health = await client.get("/api/v1/health")
        form = await client.get("/api/v1/burn-rate/form")
    assert health.json()["status"] == "ok"
    assert form.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/v1/burn-rate/chart", "/api/v1/burn-rate/chartjs"])
@pytest.mark.parametrize(
    "payload",
    [{"badEventDurationMinutes": "inf"}, {"longWindowMinutes": "inf"}, {"sloTarget": "nan"}],
)
async def test_non_finite_values_rejected_over_http(path, payload):
    async with _client() as client:
        r = await client.post(path, json=payload)
    assert r.status_code == 422
