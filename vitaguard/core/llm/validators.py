"""
Gemini Response Validators

Parses the raw text Gemini returns into a RiskAnalysis, or raises
ResponseSchemaError. Nothing partially valid gets through: either every
required field parses and normalises, or the whole response is rejected and
the orchestrator falls back.

Normalisation applied to an accepted response:
    - riskScore rounded and clamped to the Gemini band [5, 75]
    - riskLevel re-derived from the clamped score (the model's label is ignored)
    - recommendations / tips / dietOptions trimmed to 4 entries
    - details trimmed to 3 and reordered Cardiovascular, Respiratory, Metabolic
"""
from __future__ import annotations

import datetime
import json
import re
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from vitaguard.core.questionnaire import Questionnaire
from vitaguard.core.risk import (
    CATEGORY_ORDER,
    CATEGORY_SCORE_RANGE,
    AnalysisSource,
    CategoryDetail,
    CategoryRisk,
    HealthCategory,
    RiskAnalysis,
    clamp,
    classify_category_risk,
    classify_risk_level,
    first_items,
)
from vitaguard.core.scoring import advice
from vitaguard.utils import ResponseSchemaError, get_logger
from .prompt_builder import RESPONSE_SCHEMA, required_fields, score_bounds

logger = get_logger(__name__)

_FENCE_PATTERN = re.compile(r"```(?:json)?[ \t]*\n?", re.IGNORECASE)


class DetailPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    category: HealthCategory
    risk: Optional[str] = None
    score: float = Field(allow_inf_nan=False)


class AnalysisPayload(BaseModel):
    """Typed view of the JSON object Gemini is asked to return."""
    model_config = ConfigDict(extra="ignore")

    riskScore: float = Field(allow_inf_nan=False)
    riskLevel: Optional[str] = None
    summary: Optional[str] = None
    recommendations: List[str]
    tips: Optional[List[str]] = None
    details: List[DetailPayload]
    dietOptions: Optional[List[str]] = None


def strip_code_fences(text: str) -> str:
    """Remove ```json / ``` markers the model sometimes wraps around JSON."""
    return _FENCE_PATTERN.sub("", text).strip()


def parse_json_object(text: str) -> Dict[str, Any]:
    cleaned = strip_code_fences(text or "")
    if not cleaned:
        raise ResponseSchemaError("Empty response from Gemini")
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise ResponseSchemaError(
            f"Response is not valid JSON: {e.msg}",
            details={"position": e.pos},
        ) from e
    if not isinstance(data, dict):
        raise ResponseSchemaError(
            "Response JSON is not an object",
            details={"type": type(data).__name__},
        )
    return data


def _clean_list(items: Optional[List[str]]) -> List[str]:
    return [item.strip() for item in (items or []) if item and item.strip()]


def _normalize_details(details: List[DetailPayload]) -> tuple:
    by_category: Dict[HealthCategory, CategoryDetail] = {}
    for payload in details[:len(CATEGORY_ORDER)]:
        score = clamp(int(round(payload.score)), *CATEGORY_SCORE_RANGE)
        try:
            risk = CategoryRisk(payload.risk)
        except ValueError:
            risk = classify_category_risk(score)
        by_category.setdefault(
            payload.category,
            CategoryDetail(category=payload.category, risk=risk, score=score),
        )

    missing = [c.value for c in CATEGORY_ORDER if c not in by_category]
    if missing:
        raise ResponseSchemaError(
            f"details is missing categories: {', '.join(missing)}",
            field="details",
            details={"missing": missing},
        )
    return tuple(by_category[c] for c in CATEGORY_ORDER)


def parse_analysis_response(
    text: str,
    questionnaire: Questionnaire,
    schema: Optional[Dict[str, Any]] = None,
    today: Optional[datetime.date] = None,
) -> RiskAnalysis:
    """
    Validate and normalise a Gemini response.

    Args:
        text: Raw model output
        questionnaire: The questionnaire the prompt was built from
        schema: Output contract; defaults to the one rendered into the prompt
        today: Date to stamp on the result

    Returns:
        RiskAnalysis with ``source=gemini``

    Raises:
        ResponseSchemaError: if the payload cannot be accepted
    """
    schema = schema or RESPONSE_SCHEMA
    data = parse_json_object(text)

    for name in required_fields(schema):
        if data.get(name) is None:
            raise ResponseSchemaError(f"Required field '{name}' is missing", field=name)

    try:
        payload = AnalysisPayload.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        raise ResponseSchemaError(
            f"Field '{field}' has the wrong shape: {first['msg']}",
            field=field,
        ) from e

    recommendations = _clean_list(payload.recommendations)
    if not recommendations:
        raise ResponseSchemaError("recommendations is empty", field="recommendations")

    risk_score = clamp(int(round(payload.riskScore)), *score_bounds(schema))
    risk_level = classify_risk_level(risk_score)
    if payload.riskLevel and payload.riskLevel != risk_level.value:
        logger.debug(
            f"Gemini riskLevel '{payload.riskLevel}' disagrees with score {risk_score}; "
            f"using '{risk_level.value}'"
        )

    tips = _clean_list(payload.tips) or [advice.VEGETABLE_DIVERSITY_TIP]
    diet_options = _clean_list(payload.dietOptions) or list(advice.GENERIC_DIET)
    summary = (payload.summary or "").strip() or (
        f"Your overall health risk is {risk_level.value} ({risk_score}%)."
    )

    return RiskAnalysis(
        risk_score=risk_score,
        risk_level=risk_level,
        summary=summary,
        recommendations=first_items(recommendations),
        tips=first_items(tips),
        diet_options=first_items(diet_options),
        details=_normalize_details(payload.details),
        source=AnalysisSource.GEMINI,
        user_name=questionnaire.display_name,
        date=(today or datetime.date.today()).isoformat(),
    )
