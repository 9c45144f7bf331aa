"""
Prompt Builder

Serialises a Questionnaire into the instruction block sent to Gemini.

The output contract is declared once, in ``RESPONSE_SCHEMA`` (JSON Schema),
and rendered verbatim into the prompt. ``validators.py`` reads the required
fields and value ranges from the same declaration, so the model is told
exactly what the parser will accept.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from vitaguard.core.questionnaire import (
    AlcoholIntake,
    ExerciseFrequency,
    Questionnaire,
    SleepDuration,
    SmokingStatus,
)
from vitaguard.core.risk import (
    CATEGORY_ORDER,
    GEMINI_SCORE_RANGE,
    LOW_RISK_CEILING,
    MAX_LIST_ITEMS,
    MODERATE_RISK_CEILING,
    CategoryRisk,
    RiskLevel,
)

# ── Human-readable labels ─────────────────────────────────────────────────────

SLEEP_LABELS: Dict[SleepDuration, str] = {
    SleepDuration.LESS_THAN_5: "Less than 5 hours",
    SleepDuration.FIVE_TO_7: "5-7 hours",
    SleepDuration.SEVEN_TO_9: "7-9 hours",
    SleepDuration.MORE_THAN_9: "More than 9 hours",
}

EXERCISE_LABELS: Dict[ExerciseFrequency, str] = {
    ExerciseFrequency.NEVER: "Rarely or never",
    ExerciseFrequency.SOMETIMES: "1-2 days/week",
    ExerciseFrequency.REGULAR: "3-4 days/week",
    ExerciseFrequency.DAILY: "Daily",
}

SMOKING_LABELS: Dict[SmokingStatus, str] = {
    SmokingStatus.NON_SMOKER: "Non-smoker",
    SmokingStatus.FORMER: "Former smoker",
    SmokingStatus.OCCASIONAL: "Occasional smoker",
    SmokingStatus.REGULAR: "Regular smoker",
}

ALCOHOL_LABELS: Dict[AlcoholIntake, str] = {
    AlcoholIntake.NONE: "None",
    AlcoholIntake.LOW: "Occasional / Low",
    AlcoholIntake.MODERATE: "Moderate",
    AlcoholIntake.HIGH: "High",
}

NOT_PROVIDED = "Not provided"

# ── Output contract ───────────────────────────────────────────────────────────

_STRING_LIST = {
    "type": "array",
    "items": {"type": "string"},
    "minItems": 1,
    "maxItems": MAX_LIST_ITEMS,
}

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "riskScore": {
            "type": "integer",
            "minimum": GEMINI_SCORE_RANGE[0],
            "maximum": GEMINI_SCORE_RANGE[1],
        },
        "riskLevel": {"type": "string", "enum": [level.value for level in RiskLevel]},
        "summary": {"type": "string", "description": "2-3 sentence personalized clinical summary"},
        "recommendations": _STRING_LIST,
        "tips": _STRING_LIST,
        "details": {
            "type": "array",
            "minItems": len(CATEGORY_ORDER),
            "maxItems": len(CATEGORY_ORDER),
            "items": {
                "type": "object",
                "properties": {
                    "category": {"type": "string", "enum": [c.value for c in CATEGORY_ORDER]},
                    "risk": {"type": "string", "enum": [r.value for r in CategoryRisk]},
                    "score": {"type": "integer", "minimum": 0, "maximum": 100},
                },
                "required": ["category", "risk", "score"],
            },
        },
        "dietOptions": _STRING_LIST,
    },
    "required": ["riskScore", "recommendations", "details"],
}


def required_fields(schema: Optional[Dict[str, Any]] = None) -> List[str]:
    return list((schema or RESPONSE_SCHEMA).get("required", []))


def score_bounds(schema: Optional[Dict[str, Any]] = None) -> tuple:
    score = (schema or RESPONSE_SCHEMA)["properties"]["riskScore"]
    return score["minimum"], score["maximum"]


# ── Patient data rendering ────────────────────────────────────────────────────

def bmi_category(bmi: float) -> str:
    if bmi < 18.5:
        return "Underweight"
    if bmi < 25:
        return "Normal"
    if bmi < 30:
        return "Overweight"
    return "Obese"


def describe_bmi(questionnaire: Questionnaire) -> str:
    """BMI with its category, only when both height and weight were given."""
    height, weight = questionnaire.height_cm, questionnaire.weight_kg
    if not height or not weight or height <= 0 or weight <= 0:
        return "Not calculable"
    height_m = height / 100
    bmi = round(weight / (height_m * height_m), 1)
    return f"{bmi:.1f} ({bmi_category(bmi)})"


def describe_symptoms(questionnaire: Questionnaire) -> str:
    reported = list(questionnaire.reported_symptoms)
    if questionnaire.has_other_symptoms:
        reported.append(questionnaire.other_symptoms)
    return ", ".join(reported) if reported else "None reported"


def _label(labels: Dict[Any, str], value: Any) -> str:
    return labels.get(value, NOT_PROVIDED)


def build_prompt(questionnaire: Questionnaire) -> str:
    """
    Build the full Gemini instruction for one questionnaire.

    Args:
        questionnaire: Submitted answers

    Returns:
        Prompt text ending with the JSON output schema
    """
    low_max = LOW_RISK_CEILING - 1
    score_min, score_max = score_bounds()
    schema_text = json.dumps(RESPONSE_SCHEMA, indent=2)
    categories = ", ".join(c.value for c in CATEGORY_ORDER)

    return f"""You are a clinical health AI assistant for VitaGuard, a preventive healthcare platform. \
Analyze the following patient data and provide a structured, evidence-based health risk assessment.

PATIENT DATA:
- Name: {questionnaire.name or "Anonymous"}
- Age: {questionnaire.age or NOT_PROVIDED}
- BMI: {describe_bmi(questionnaire)}
- Reported Symptoms: {describe_symptoms(questionnaire)}
- Sleep Duration: {_label(SLEEP_LABELS, questionnaire.sleep)}
- Exercise Frequency: {_label(EXERCISE_LABELS, questionnaire.exercise)}
- Smoking Status: {_label(SMOKING_LABELS, questionnaire.smoking)}
- Alcohol Consumption: {_label(ALCOHOL_LABELS, questionnaire.alcohol)}

STRICT SCORING CRITERIA:
1. ZERO SYMPTOMS + GOOD HABITS: if no symptoms are reported AND sleep is 7-9 hours AND exercise is \
regular or daily AND the patient is a non-smoker, riskScore MUST be below {LOW_RISK_CEILING} (Low).
2. RISK BANDS:
   - {score_min}-{low_max} (Low): healthy baseline, no major symptoms, proactive habits.
   - {LOW_RISK_CEILING}-{MODERATE_RISK_CEILING} (Moderate): minor lifestyle risks (poor sleep, no exercise) \
or 1-2 mild symptoms (Fatigue, Headache).
   - {MODERATE_RISK_CEILING + 1}+ (High): significant symptoms (Chest Pain, Shortness of Breath) or \
multiple chronic lifestyle risks.
3. CLINICAL REASONING: be objective. Do not default to high risk for "safety"; stay accurate to the data.

INSTRUCTIONS:
- Produce a riskScore between {score_min} and {score_max} and a riskLevel \
(Low < {LOW_RISK_CEILING}, Moderate {LOW_RISK_CEILING}-{MODERATE_RISK_CEILING}, High > {MODERATE_RISK_CEILING}).
- Provide {MAX_LIST_ITEMS} clinical recommendations based ONLY on the reported data.
- Provide {MAX_LIST_ITEMS} daily tips personalized to age and lifestyle.
- Provide {MAX_LIST_ITEMS} diet options tailored to the reported symptoms.
- Score each category ({categories}) from 0 to 100 and label it Low, Moderate or Elevated.
- Write a 2-3 sentence summary that references the exact metrics and any custom symptoms.

CUSTOM SYMPTOMS:
- If the patient typed their own symptom text, prioritize interpreting it.
- For example, "fever" suggests respiratory/metabolic concern and "stress" calls for lifestyle tips.
- Reference the patient's own words in the recommendations.

QUALITY GUIDELINES:
1. No repetition: every recommendation and tip must be distinct advice.
2. Clinical depth: name specific nutrients or tests rather than generic advice.
3. Concise: no filler text.

OUTPUT FORMAT:
Respond ONLY with a single valid JSON object. No markdown, no code fences, no extra text.
The object must validate against this JSON Schema:
{schema_text}
"""
