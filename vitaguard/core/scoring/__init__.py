"""
Deterministic Scoring Layer

Local rule engine used whenever the Gemini analysis is unavailable.

Usage:
    from vitaguard.core.scoring import FallbackScoringEngine

    analysis = FallbackScoringEngine().analyze(questionnaire)
"""
from .engine import FallbackScoringEngine
from .rules import compute_bmi, compute_risk_score, category_details

__all__ = [
    "FallbackScoringEngine",
    "compute_bmi",
    "compute_risk_score",
    "category_details",
]
