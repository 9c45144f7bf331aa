"""
Pytest Configuration and Fixtures

Shared fixtures for the health risk analysis tests.
"""
import datetime
import json
from pathlib import Path
import sys
from typing import Any, Dict
from unittest.mock import AsyncMock, Mock

import pytest

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from vitaguard.core.llm import GeminiAnalysisClient, GeminiClient, GeminiConfig, GeminiResponse
from vitaguard.core.llm.gemini_client import GeminiModel
from vitaguard.core.questionnaire import Questionnaire


@pytest.fixture
def fixed_today() -> datetime.date:
    """Date stamped on results so comparisons are reproducible."""
    return datetime.date(2024, 5, 17)


@pytest.fixture
def healthy_questionnaire() -> Questionnaire:
    """Young, active, symptom-free respondent."""
    return Questionnaire(
        name="Asha",
        age=25,
        gender="female",
        height_cm=175,
        weight_kg=70,
        symptoms=[],
        sleep="7_9",
        exercise="daily",
        smoking="non",
        alcohol="none",
    )


@pytest.fixture
def high_risk_questionnaire() -> Questionnaire:
    """Older smoker with cardiopulmonary symptoms and obesity."""
    return Questionnaire(
        name="Ravi",
        age=55,
        gender="male",
        height_cm=170,
        weight_kg=95,
        symptoms=["Chest Pain", "Shortness of Breath"],
        sleep="less_5",
        exercise="never",
        smoking="regular",
        alcohol="high",
    )


@pytest.fixture
def sparse_questionnaire() -> Questionnaire:
    """Only symptoms answered; everything else left blank."""
    return Questionnaire(symptoms=["Fatigue", "Dizziness"])


@pytest.fixture
def gemini_payload() -> Dict[str, Any]:
    """A well-formed Gemini answer."""
    return {
        "riskScore": 42,
        "riskLevel": "High",
        "summary": "Chest pain with heavy smoking places you at high cardiovascular risk.",
        "recommendations": [
            "Book an ECG and stress test within the next two weeks.",
            "Start a supervised smoking cessation programme.",
            "Track resting blood pressure every morning.",
            "Ask your GP for a lipid panel.",
        ],
        "tips": [
            "Walk 15 minutes after dinner.",
            "Keep a consistent bedtime.",
            "Replace one cigarette break with a breathing exercise.",
            "Drink water before each meal.",
        ],
        "dietOptions": [
            "Oily fish twice a week for Omega-3.",
            "Oats for soluble fibre.",
            "Leafy greens for potassium.",
            "Unsalted nuts as snacks.",
        ],
        "details": [
            {"category": "Cardiovascular", "risk": "Elevated", "score": 70},
            {"category": "Respiratory", "risk": "Elevated", "score": 55},
            {"category": "Metabolic", "risk": "Moderate", "score": 30},
        ],
    }


@pytest.fixture
def gemini_config() -> GeminiConfig:
    """Config with no credential; the client must stay offline."""
    return GeminiConfig(
        api_key=None,
        model=GeminiModel.FLASH_1_5,
        temperature=0.3,
        request_timeout_seconds=5.0,
    )


def make_gemini_client(text: str = "", error: Exception = None) -> Mock:
    """A configured GeminiClient double answering every prompt with ``text``."""
    client = Mock(spec=GeminiClient)
    client.is_configured = True
    client.config = GeminiConfig(api_key="test-key", model=GeminiModel.FLASH_1_5)
    response = GeminiResponse(text=text, model="gemini-1.5-flash", latency_ms=12.0)
    if error is not None:
        client.generate.side_effect = error
        client.generate_async = AsyncMock(side_effect=error)
    else:
        client.generate.return_value = response
        client.generate_async = AsyncMock(return_value=response)
    return client


@pytest.fixture
def gemini_client_factory():
    """Factory for configured GeminiClient doubles."""
    return make_gemini_client


@pytest.fixture
def answering_analysis_client(gemini_payload) -> GeminiAnalysisClient:
    """Analysis client whose Gemini double returns ``gemini_payload``."""
    return GeminiAnalysisClient(make_gemini_client(json.dumps(gemini_payload)))
