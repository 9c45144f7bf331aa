"""
Assessment Records

Flattened document handed to the persistence layer after an analysis:
the questionnaire answers under their wire names, plus the score, the
provenance tag and a timestamp. The engine never reads these back.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from vitaguard.core.questionnaire import Questionnaire
from vitaguard.core.risk import RiskAnalysis


def _code(value) -> Optional[str]:
    return value.value if value is not None else None


def questionnaire_to_dict(questionnaire: Questionnaire) -> Dict[str, Any]:
    """Questionnaire answers keyed the way the assessment form posts them."""
    return {
        "name": questionnaire.name,
        "age": questionnaire.age,
        "gender": _code(questionnaire.gender),
        "height": questionnaire.height_cm,
        "weight": questionnaire.weight_kg,
        "symptoms": list(questionnaire.symptoms),
        "otherSymptoms": questionnaire.other_symptoms or "",
        "sleep": _code(questionnaire.sleep),
        "exercise": _code(questionnaire.exercise),
        "smoking": _code(questionnaire.smoking),
        "alcohol": _code(questionnaire.alcohol),
    }


def build_assessment_record(
    questionnaire: Questionnaire,
    analysis: RiskAnalysis,
    user_id: Optional[str] = None,
    timestamp: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Build the document stored for one submission.

    Args:
        questionnaire: The analysed questionnaire
        analysis: Its result
        user_id: Owner of the record, when the caller is authenticated
        timestamp: Defaults to the current UTC time

    Returns:
        Flat dict ready for a document store
    """
    record: Dict[str, Any] = {}
    if user_id is not None:
        record["userId"] = user_id
    record.update(questionnaire_to_dict(questionnaire))
    record["riskScore"] = analysis.risk_score
    record["aiSource"] = analysis.source.value
    record["timestamp"] = (timestamp or datetime.now(timezone.utc)).isoformat()
    return record
