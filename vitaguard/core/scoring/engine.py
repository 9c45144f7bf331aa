"""
Fallback Scoring Engine

Deterministic, offline replacement for the Gemini analysis. Produces a full
RiskAnalysis from a Questionnaire using the fixed tables in ``tables.py``.

Usage:
    from vitaguard.core.scoring import FallbackScoringEngine

    engine = FallbackScoringEngine()
    analysis = engine.analyze(questionnaire)
    print(analysis.risk_score, analysis.risk_level)
"""
from __future__ import annotations

import datetime
from typing import Optional

from vitaguard.core.questionnaire import Questionnaire
from vitaguard.core.risk import AnalysisSource, RiskAnalysis, classify_risk_level
from vitaguard.utils import get_logger
from . import advice, rules

logger = get_logger(__name__)


class FallbackScoringEngine:
    """
    Questionnaire → RiskAnalysis with no I/O and no randomness.

    Stateless; safe to share between threads and concurrent requests. The
    only environmental input is the calendar date stamped on the result.
    """

    def analyze(
        self,
        questionnaire: Questionnaire,
        today: Optional[datetime.date] = None,
    ) -> RiskAnalysis:
        """
        Score a questionnaire.

        Args:
            questionnaire: Submitted answers (any combination is accepted)
            today: Date to stamp on the result; defaults to the current date

        Returns:
            RiskAnalysis with ``source=fallback``
        """
        bmi = rules.compute_bmi(questionnaire)
        risk_score = rules.compute_risk_score(questionnaire, bmi)
        risk_level = classify_risk_level(risk_score)

        analysis = RiskAnalysis(
            risk_score=risk_score,
            risk_level=risk_level,
            summary=advice.build_summary(questionnaire, risk_score, risk_level),
            recommendations=advice.build_recommendations(questionnaire, bmi),
            tips=advice.build_tips(questionnaire),
            diet_options=advice.build_diet_options(questionnaire),
            details=rules.category_details(questionnaire, bmi),
            source=AnalysisSource.FALLBACK,
            user_name=questionnaire.display_name,
            date=(today or datetime.date.today()).isoformat(),
        )
        logger.debug(
            f"FallbackScoringEngine: score={risk_score} level={risk_level.value} "
            f"bmi={bmi:.1f} symptoms={questionnaire.symptom_count}"
        )
        return analysis
