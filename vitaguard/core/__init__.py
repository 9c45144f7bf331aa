"""
Health Risk Analysis Core

Questionnaire in, RiskAnalysis out, via Gemini or the deterministic engine.
"""
from .questionnaire import Questionnaire, Symptom
from .risk import (
    AnalysisSource,
    CategoryDetail,
    CategoryRisk,
    HealthCategory,
    RiskAnalysis,
    RiskLevel,
    classify_risk_level,
)
from .scoring import FallbackScoringEngine
from .llm import GeminiAnalysisClient, GeminiClient, GeminiConfig
from .orchestrator import AnalysisOrchestrator
from .records import build_assessment_record

__all__ = [
    "Questionnaire",
    "Symptom",
    "AnalysisSource",
    "CategoryDetail",
    "CategoryRisk",
    "HealthCategory",
    "RiskAnalysis",
    "RiskLevel",
    "classify_risk_level",
    "FallbackScoringEngine",
    "GeminiAnalysisClient",
    "GeminiClient",
    "GeminiConfig",
    "AnalysisOrchestrator",
    "build_assessment_record",
]
