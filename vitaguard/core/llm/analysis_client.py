"""
Gemini Analysis Client

One attempt at a Gemini-sourced RiskAnalysis:

    credential check → build prompt → single round-trip → validate / normalise

The attempt never raises. It returns an AnalysisAttempt that holds either a
complete RiskAnalysis or the typed error explaining why there is none.
"""
from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Any, Dict, Optional

from vitaguard.core.questionnaire import Questionnaire
from vitaguard.core.risk import RiskAnalysis
from vitaguard.utils import ConfigurationError, HealthAnalysisError, get_logger
from .gemini_client import GeminiClient, GeminiResponse
from .prompt_builder import build_prompt
from .validators import parse_analysis_response

logger = get_logger(__name__)


@dataclass(frozen=True)
class AnalysisAttempt:
    """Outcome of one Gemini attempt: exactly one of analysis / error is set."""
    analysis: Optional[RiskAnalysis] = None
    error: Optional[HealthAnalysisError] = None

    @property
    def succeeded(self) -> bool:
        return self.analysis is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "succeeded": self.succeeded,
            "error": self.error.to_dict() if self.error else None,
        }


class GeminiAnalysisClient:
    """
    Produces RiskAnalysis objects from Gemini.

    Args:
        client: Shared GeminiClient; its lifecycle belongs to the caller
    """

    def __init__(self, client: GeminiClient):
        self.client = client

    @property
    def is_configured(self) -> bool:
        return self.client.is_configured

    def _unconfigured(self) -> AnalysisAttempt:
        return AnalysisAttempt(
            error=ConfigurationError("Gemini API key is missing or still the placeholder value")
        )

    def _accept(
        self,
        response: GeminiResponse,
        questionnaire: Questionnaire,
        today: Optional[datetime.date],
    ) -> AnalysisAttempt:
        analysis = parse_analysis_response(response.text, questionnaire, today=today)
        logger.info(
            f"Gemini analysis accepted: score={analysis.risk_score} "
            f"level={analysis.risk_level.value} latency={response.latency_ms:.0f}ms"
        )
        return AnalysisAttempt(analysis=analysis)

    def _failed(self, error: Exception) -> AnalysisAttempt:
        if isinstance(error, HealthAnalysisError):
            logger.warning(f"Gemini analysis failed: {error.message}", extra={"error_code": error.code})
            return AnalysisAttempt(error=error)
        logger.error(
            f"Gemini analysis raised unexpectedly: {error}",
            exc_info=True,
            extra={"error_code": "UNEXPECTED_ERROR"},
        )
        return AnalysisAttempt(
            error=HealthAnalysisError(str(error), code="UNEXPECTED_ERROR")
        )

    def analyze(
        self,
        questionnaire: Questionnaire,
        today: Optional[datetime.date] = None,
    ) -> AnalysisAttempt:
        """Blocking attempt. No request is made without a usable credential."""
        if not self.is_configured:
            return self._unconfigured()
        try:
            response = self.client.generate(build_prompt(questionnaire))
            return self._accept(response, questionnaire, today)
        except Exception as e:
            return self._failed(e)

    async def analyze_async(
        self,
        questionnaire: Questionnaire,
        today: Optional[datetime.date] = None,
    ) -> AnalysisAttempt:
        """Non-blocking attempt; suspends only during the Gemini round-trip."""
        if not self.is_configured:
            return self._unconfigured()
        try:
            response = await self.client.generate_async(build_prompt(questionnaire))
            return self._accept(response, questionnaire, today)
        except Exception as e:
            return self._failed(e)
