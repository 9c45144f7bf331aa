"""
Gemini Analysis Module

Asks Gemini for a complete RiskAnalysis and validates the answer against the
declared output schema. Any failure is reported, never raised, so the
orchestrator can fall back to the deterministic engine.
"""
from .gemini_client import GeminiClient, GeminiConfig, GeminiModel, GeminiResponse
from .prompt_builder import RESPONSE_SCHEMA, build_prompt
from .validators import parse_analysis_response, strip_code_fences
from .analysis_client import AnalysisAttempt, GeminiAnalysisClient

__all__ = [
    "GeminiClient",
    "GeminiConfig",
    "GeminiModel",
    "GeminiResponse",
    "RESPONSE_SCHEMA",
    "build_prompt",
    "parse_analysis_response",
    "strip_code_fences",
    "AnalysisAttempt",
    "GeminiAnalysisClient",
]
