"""Tests for the FastAPI endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient

from asset_costing.calculators import ScpCalculator
from asset_costing import main
from asset_costing.main import app, create_app
from asset_costing.registry import CalculatorRegistry

def _atr_payload(**overrides):
    payload = {
        "assetName": "ATR",
        "complexity": "Medium",
        "commonFields": {
            "deploymentType": "cloud",
            "region": "us-east-1",
            "supportLevel": "standard",
        },
        "assetComponents": [
            {"name": "ignition", "resourceModel": [{"location": "India", "allocation": 100}]}
        ],
        "specificFields": {"licenseCount": 10},
    }
    payload.update(overrides)
    return payload

async def _post(payload, application=app):
    transport = ASGITransport(app=application)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        return await client.post("/costing", json=payload)

class TestCostingEndpoint:
    @pytest.mark.asyncio
    async def test_calculate_atr(self):
        resp = await _post(_atr_payload())
        assert resp.status_code == 200
        body = resp.json()
        assert body["assetName"] == "ATR"
        assert body["buildCost"]["currency"] == "USD"
        assert body["buildCost"]["total"] == pytest.approx(9025)
        assert body["runCost"]["total"] == pytest.approx(3600)
        assert body["runCost"]["period"] == "monthly"
        assert "estimationDate" in body
        ignition = body["buildCost"]["breakdown"][0]
        assert ignition["costComponentName"] == "ignition"
        assert ignition["isError"] is False
        assert ignition["effortBreakdown"][0]["deliveryLocation"] == "India"

    @pytest.mark.asyncio
    async def test_validation_error_returns_400(self):
        payload = _atr_payload(
            assetComponents=[
                {
                    "name": "ignition",
                    "resourceModel": [
                        {"location": "India", "allocation": 60.01},
                        {"location": "Australia", "allocation": 40.01},
                    ],
                }
            ]
        )
        resp = await _post(payload)
        assert resp.status_code == 400
        assert "100.02" in resp.json()["detail"]

    @pytest.mark.asyncio
    async def test_missing_license_count_returns_400(self):
        resp = await _post(_atr_payload(specificFields={}))
        assert resp.status_code == 400
        assert "licenseCount" in resp.json()["detail"]

    @pytest.mark.asyncio
    async def test_unknown_asset_returns_404(self):
        resp = await _post(_atr_payload(assetName="UNKNOWN"))
        assert resp.status_code == 404
        assert resp.json()["detail"] == "No calculator found for asset name: UNKNOWN"

    @pytest.mark.asyncio
    async def test_schema_violation_returns_422(self):
        payload = _atr_payload(
            assetComponents=[
                {"name": "ignition", "resourceModel": [{"location": "India", "allocation": 150}]}
            ]
        )
        resp = await _post(payload)
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_invalid_deployment_type_returns_422(self):
        payload = _atr_payload(commonFields={"deploymentType": "serverless"})
        resp = await _post(payload)
        assert resp.status_code == 422

    @pytest.mark.asyncio
    async def test_injected_registry(self):
        application = create_app(registry=CalculatorRegistry([ScpCalculator()]))
        resp = await _post(_atr_payload(assetName="SCP"), application)
        assert resp.status_code == 200
        assert resp.json()["buildCost"]["total"] == 5000
        resp = await _post(_atr_payload(), application)
        assert resp.status_code == 404

    @pytest.mark.asyncio
    async def test_location_missing_from_tables_returns_error_entries(self):
        payload = _atr_payload(
            assetComponents=[
                {
                    "name": "reporting",
                    "resourceModel": [
                        {"location": "India", "allocation": 50},
                        {"location": "US", "allocation": 50},
                    ],
                }
            ]
        )
        resp = await _post(payload)
        assert resp.status_code == 200
        body = resp.json()
        build = {b["costComponentName"]: b for b in body["buildCost"]["breakdown"]}
        run = {b["costComponentName"]: b for b in body["runCost"]["breakdown"]}
        assert build["reporting"]["isError"] is True
        assert run["Operations - US"]["isError"] is True
        assert run["Operations - US"]["amount"] == 0

class TestInfoEndpoints:
    @pytest.mark.asyncio
    async def test_asset_names(self):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            resp = await client.get("/costing/asset-names")
        assert resp.status_code == 200
        assert resp.json() == {"assetNames": ["ATR", "QPlusPlus", "SCP"]}

    @pytest.mark.asyncio
    async def test_health_check_endpoint(self):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            resp = await client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "ok"
        assert body["uptime"] >= 0

    @pytest.mark.asyncio
    async def test_cors_allows_localhost_3000(self):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            resp = await client.options(
                "/costing",
                headers={
                    "Origin": "http://localhost:3000",
                    "Access-Control-Request-Method": "POST",
                },
            )
        assert resp.headers.get("access-control-allow-origin") == "http://localhost:3000"

class TestServe:
    def test_serve_runs_app_with_uvicorn(self, monkeypatch):
        calls = []
        monkeypatch.setattr(main.uvicorn, "run", lambda *a, **kw: calls.append((a, kw)))
        main.serve(port=9001)
        assert len(calls) == 1
        args, kwargs = calls[0]
        assert args == (main.app,)
        assert kwargs["port"] == 9001
        assert kwargs["host"] == "0.0.0.0"
