"""
Analysis Orchestrator

Public entry point of the engine:

    START → credential check ─┬─ AI_SUCCESS ──────────────→ DONE (source=gemini)
                              └─ AI_FAILURE → FALLBACK ───→ DONE (source=fallback)

Exactly one Gemini attempt, then at most one fallback run. Results from the
two strategies are never merged, and the orchestrator itself never fails.

Usage:
    from vitaguard.core import AnalysisOrchestrator, GeminiAnalysisClient, GeminiClient

    orchestrator = AnalysisOrchestrator(GeminiAnalysisClient(GeminiClient()))
    analysis = orchestrator.analyze(questionnaire)
"""
from __future__ import annotations

import datetime
from typing import Optional

from vitaguard.core.llm import AnalysisAttempt, GeminiAnalysisClient
from vitaguard.core.questionnaire import Questionnaire
from vitaguard.core.risk import RiskAnalysis
from vitaguard.core.scoring import FallbackScoringEngine
from vitaguard.utils import get_logger

logger = get_logger(__name__)


class AnalysisOrchestrator:
    """
    Gemini first, deterministic engine on any failure.

    Holds no per-call state; one instance serves all concurrent requests.
    """

    def __init__(
        self,
        ai_client: GeminiAnalysisClient,
        engine: Optional[FallbackScoringEngine] = None,
    ):
        """
        Args:
            ai_client: Gemini analysis client, constructed and owned by the caller
            engine: Fallback engine; a default instance is used if omitted
        """
        self.ai_client = ai_client
        self.engine = engine or FallbackScoringEngine()

    def _resolve(
        self,
        attempt: AnalysisAttempt,
        questionnaire: Questionnaire,
        today: Optional[datetime.date],
    ) -> RiskAnalysis:
        if attempt.succeeded:
            return attempt.analysis

        code = attempt.error.code if attempt.error else "UNKNOWN_ERROR"
        logger.info("Using local engine after Gemini failure", extra={"error_code": code})
        return self.engine.analyze(questionnaire, today=today)

    def analyze(
        self,
        questionnaire: Questionnaire,
        today: Optional[datetime.date] = None,
    ) -> RiskAnalysis:
        """
        Analyse one questionnaire.

        Args:
            questionnaire: Submitted answers
            today: Date to stamp on the result; defaults to the current date

        Returns:
            RiskAnalysis whose ``source`` records which strategy produced it
        """
        attempt = self.ai_client.analyze(questionnaire, today=today)
        return self._resolve(attempt, questionnaire, today)

    async def analyze_async(
        self,
        questionnaire: Questionnaire,
        today: Optional[datetime.date] = None,
    ) -> RiskAnalysis:
        """Same as :meth:`analyze`, awaiting the Gemini round-trip."""
        attempt = await self.ai_client.analyze_async(questionnaire, today=today)
        return self._resolve(attempt, questionnaire, today)
