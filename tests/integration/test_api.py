"""
Integration Tests for the FastAPI Backend

Tests for the analysis, reference and health endpoints.
Uses async httpx for ASGI app testing; the orchestrator dependency is
overridden so no test reaches Gemini.
"""
import json

import pytest
import httpx

from vitaguard.core import AnalysisOrchestrator, GeminiAnalysisClient, GeminiClient
from vitaguard.main import app, get_orchestrator


@pytest.fixture
def offline_orchestrator(gemini_config) -> AnalysisOrchestrator:
    return AnalysisOrchestrator(GeminiAnalysisClient(GeminiClient(gemini_config)))


@pytest.fixture
async def async_client(offline_orchestrator):
    """Create async test client backed by an unconfigured Gemini client."""
    app.dependency_overrides[get_orchestrator] = lambda: offline_orchestrator
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def high_risk_form():
    return {
        "name": "Ravi",
        "age": "55",
        "gender": "male",
        "heightCm": 170,
        "weightKg": 95,
        "symptoms": ["Chest Pain", "Shortness of Breath"],
        "otherSymptoms": "",
        "sleep": "less_5",
        "exercise": "never",
        "smoking": "regular",
        "alcohol": "high",
    }


@pytest.mark.asyncio
class TestHealthEndpoints:
    """Tests for health check endpoints."""

    async def test_root_endpoint(self, async_client):
        response = await async_client.get("/")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "healthy"
        assert data["gemini_configured"] is False
        assert "version" in data

    async def test_health_endpoint(self, async_client):
        response = await async_client.get("/health")
        assert response.status_code == 200
        assert response.json()["gemini_model"] == "gemini-1.5-flash"


@pytest.mark.asyncio
class TestAnalyzeEndpoint:
    """Tests for questionnaire analysis."""

    async def test_fallback_analysis(self, async_client, high_risk_form):
        response = await async_client.post("/api/v1/assessments/analyze", json=high_risk_form)
        assert response.status_code == 200

        data = response.json()
        assert data["source"] == "fallback"
        assert data["riskScore"] == 45
        assert data["riskLevel"] == "High"
        assert data["userName"] == "Ravi"
        assert [d["category"] for d in data["details"]] == ["Cardiovascular", "Respiratory", "Metabolic"]
        assert len(data["tips"]) == 4

    async def test_empty_form(self, async_client):
        response = await async_client.post("/api/v1/assessments/analyze", json={})
        assert response.status_code == 200

        data = response.json()
        assert data["riskScore"] == 0
        assert data["userName"] == "User"

    async def test_malformed_values_tolerated(self, async_client):
        form = {"age": "old", "weight": "heavy", "sleep": "sometimes", "symptoms": 7}
        response = await async_client.post("/api/v1/assessments/analyze", json=form)

        assert response.status_code == 200
        assert response.json()["riskScore"] == 0

    async def test_gemini_analysis(self, async_client, gemini_client_factory, gemini_payload, high_risk_form):
        client = gemini_client_factory(json.dumps(gemini_payload))
        orchestrator = AnalysisOrchestrator(GeminiAnalysisClient(client))
        app.dependency_overrides[get_orchestrator] = lambda: orchestrator

        response = await async_client.post("/api/v1/assessments/analyze", json=high_risk_form)
        assert response.status_code == 200

        data = response.json()
        assert data["source"] == "gemini"
        assert data["riskScore"] == 42
        client.generate_async.assert_awaited_once()


@pytest.mark.asyncio
class TestReferenceEndpoint:
    """Tests for questionnaire reference data."""

    async def test_questionnaire_reference(self, async_client):
        response = await async_client.get("/api/v1/reference/questionnaire")
        assert response.status_code == 200

        data = response.json()
        assert "Chest Pain" in data["symptoms"]
        assert data["sleep"]["less_5"] == "Less than 5 hours"
        assert data["smoking"]["non"] == "Non-smoker"
