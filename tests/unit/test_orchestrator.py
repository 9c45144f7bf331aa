"""
Unit Tests for the Analysis Orchestrator

Gemini first, local engine on any failure; the caller always gets a
complete RiskAnalysis.
"""
import json
from unittest.mock import patch

import pytest

from vitaguard.config import PLACEHOLDER_API_KEY
from vitaguard.core import AnalysisOrchestrator, GeminiAnalysisClient, GeminiClient, GeminiConfig
from vitaguard.core.risk import AnalysisSource
from vitaguard.core.scoring import FallbackScoringEngine
from vitaguard.utils import TransportError

LLM_CLASS = "vitaguard.core.llm.gemini_client.ChatGoogleGenerativeAI"


def _orchestrator(client) -> AnalysisOrchestrator:
    return AnalysisOrchestrator(GeminiAnalysisClient(client))


class TestOrchestrator:
    """Tests for source selection."""

    def test_gemini_result_returned(self, answering_analysis_client, high_risk_questionnaire, gemini_payload):
        analysis = AnalysisOrchestrator(answering_analysis_client).analyze(high_risk_questionnaire)

        assert analysis.source == AnalysisSource.GEMINI
        assert analysis.risk_score == gemini_payload["riskScore"]
        assert analysis.summary == gemini_payload["summary"]

    def test_placeholder_key_uses_engine_without_request(self, high_risk_questionnaire, fixed_today):
        with patch(LLM_CLASS) as llm_cls:
            client = GeminiClient(GeminiConfig(api_key=PLACEHOLDER_API_KEY))
            analysis = _orchestrator(client).analyze(high_risk_questionnaire, today=fixed_today)

        llm_cls.assert_not_called()
        llm_cls.return_value.invoke.assert_not_called()
        assert analysis.source == AnalysisSource.FALLBACK
        assert analysis.risk_score == 45

    def test_missing_key_matches_engine_exactly(self, gemini_config, sparse_questionnaire, fixed_today):
        analysis = _orchestrator(GeminiClient(gemini_config)).analyze(sparse_questionnaire, today=fixed_today)
        expected = FallbackScoringEngine().analyze(sparse_questionnaire, today=fixed_today)

        assert analysis == expected

    def test_missing_details_falls_back(self, gemini_client_factory, gemini_payload, healthy_questionnaire):
        del gemini_payload["details"]
        client = gemini_client_factory(json.dumps(gemini_payload))

        analysis = _orchestrator(client).analyze(healthy_questionnaire)

        client.generate.assert_called_once()
        assert analysis.source == AnalysisSource.FALLBACK
        assert analysis.risk_score == 0

    def test_transport_failure_falls_back(self, gemini_client_factory, high_risk_questionnaire):
        client = gemini_client_factory(error=TransportError("timed out", timed_out=True))
        analysis = _orchestrator(client).analyze(high_risk_questionnaire)

        assert analysis.source == AnalysisSource.FALLBACK
        assert analysis.risk_score == 45

    def test_garbage_response_falls_back(self, gemini_client_factory, sparse_questionnaire):
        client = gemini_client_factory("I'm sorry, I can't help with that.")
        analysis = _orchestrator(client).analyze(sparse_questionnaire)

        assert analysis.source == AnalysisSource.FALLBACK

    def test_single_attempt(self, gemini_client_factory, sparse_questionnaire):
        client = gemini_client_factory(error=TransportError("connection refused"))
        _orchestrator(client).analyze(sparse_questionnaire)

        assert client.generate.call_count == 1

    def test_custom_engine(self, gemini_config, sparse_questionnaire):
        engine = FallbackScoringEngine()
        orchestrator = AnalysisOrchestrator(GeminiAnalysisClient(GeminiClient(gemini_config)), engine=engine)

        assert orchestrator.engine is engine
        assert orchestrator.analyze(sparse_questionnaire).risk_score == 10

    def test_fallback_logged(self, gemini_config, sparse_questionnaire, caplog):
        with caplog.at_level("INFO", logger="vitaguard.core.orchestrator"):
            _orchestrator(GeminiClient(gemini_config)).analyze(sparse_questionnaire)

        codes = [getattr(r, "error_code", None) for r in caplog.records if r.name == "vitaguard.core.orchestrator"]
        assert codes == ["CONFIGURATION_ERROR"]


@pytest.mark.asyncio
class TestOrchestratorAsync:
    """Tests for the async entry point."""

    async def test_gemini_result_returned(self, answering_analysis_client, high_risk_questionnaire):
        analysis = await AnalysisOrchestrator(answering_analysis_client).analyze_async(high_risk_questionnaire)
        assert analysis.source == AnalysisSource.GEMINI

    async def test_failure_falls_back(self, gemini_client_factory, high_risk_questionnaire, fixed_today):
        client = gemini_client_factory(error=TransportError("timed out", timed_out=True))
        analysis = await _orchestrator(client).analyze_async(high_risk_questionnaire, today=fixed_today)

        assert analysis == FallbackScoringEngine().analyze(high_risk_questionnaire, today=fixed_today)

    async def test_placeholder_key(self, healthy_questionnaire):
        with patch(LLM_CLASS) as llm_cls:
            client = GeminiClient(GeminiConfig(api_key=PLACEHOLDER_API_KEY))
            analysis = await _orchestrator(client).analyze_async(healthy_questionnaire)

        llm_cls.assert_not_called()
        assert analysis.source == AnalysisSource.FALLBACK
