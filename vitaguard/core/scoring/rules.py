"""
Fallback Scoring Rules

Pure arithmetic over a Questionnaire. Each function is side-effect free and
never raises; missing answers contribute nothing and missing measurements
fall back to the healthy defaults.

Overall score:
    free-text bump + symptom weights + co-occurrence bonuses
    + lifestyle weights + age band + BMI band, clamped to [0, 95]

Category sub-scores start at 5 and accumulate independently, clamped to 100.
"""
from __future__ import annotations

from typing import Tuple

from vitaguard.core.questionnaire import (
    DEFAULT_HEIGHT_CM,
    ExerciseFrequency,
    Questionnaire,
)
from vitaguard.core.risk import (
    CATEGORY_ORDER,
    CATEGORY_SCORE_RANGE,
    FALLBACK_SCORE_RANGE,
    CategoryDetail,
    HealthCategory,
    classify_category_risk,
    clamp,
)
from . import tables


# ── Measurements ──────────────────────────────────────────────────────────────

def compute_bmi(questionnaire: Questionnaire) -> float:
    """
    Body-mass index used for scoring.

    Without a positive weight the assumed-healthy 22 is returned. A missing
    or non-positive height is taken as 170 cm.
    """
    weight = questionnaire.weight_kg
    if weight is None or weight <= 0:
        return tables.DEFAULT_BMI

    height_cm = questionnaire.height_cm
    if height_cm is None or height_cm <= 0:
        height_cm = DEFAULT_HEIGHT_CM
    height_m = height_cm / 100
    return weight / (height_m * height_m)


# ── Overall score components ──────────────────────────────────────────────────

def score_symptoms(questionnaire: Questionnaire) -> int:
    """Free-text bump, per-symptom weights and co-occurrence bonuses."""
    score = 0
    if questionnaire.has_other_symptoms:
        score += tables.OTHER_SYMPTOMS_WEIGHT

    for symptom in questionnaire.symptoms:
        score += tables.SYMPTOM_WEIGHTS.get(symptom, tables.UNKNOWN_SYMPTOM_WEIGHT)

    for first, second, bonus in tables.CO_OCCURRENCE_BONUSES:
        if questionnaire.has_symptom(first) and questionnaire.has_symptom(second):
            score += bonus

    return score


def score_lifestyle(questionnaire: Questionnaire) -> int:
    return (
        tables.SLEEP_WEIGHTS.get(questionnaire.sleep, 0)
        + tables.EXERCISE_WEIGHTS.get(questionnaire.exercise, 0)
        + tables.SMOKING_WEIGHTS.get(questionnaire.smoking, 0)
        + tables.ALCOHOL_WEIGHTS.get(questionnaire.alcohol, 0)
    )


def age_adjustment(age: int) -> int:
    for floor, weight in tables.AGE_BANDS:
        if age > floor:
            return weight
    return 0


def bmi_adjustment(bmi: float) -> int:
    if bmi > tables.BMI_OBESE:
        return tables.BMI_OBESE_WEIGHT
    if bmi > tables.BMI_OVERWEIGHT:
        return tables.BMI_OVERWEIGHT_WEIGHT
    if bmi < tables.BMI_UNDERWEIGHT:
        return tables.BMI_UNDERWEIGHT_WEIGHT
    return 0


def compute_risk_score(questionnaire: Questionnaire, bmi: float) -> int:
    raw = (
        score_symptoms(questionnaire)
        + score_lifestyle(questionnaire)
        + age_adjustment(questionnaire.effective_age)
        + bmi_adjustment(bmi)
    )
    return clamp(raw, *FALLBACK_SCORE_RANGE)


# ── Category sub-scores ───────────────────────────────────────────────────────

def _symptom_points(questionnaire: Questionnaire, weights) -> int:
    return sum(points for symptom, points in weights.items() if questionnaire.has_symptom(symptom))


def score_cardiovascular(questionnaire: Questionnaire, bmi: float) -> int:
    score = tables.CATEGORY_BASE_SCORE
    score += _symptom_points(questionnaire, tables.CARDIOVASCULAR_SYMPTOMS)
    score += tables.CARDIOVASCULAR_SMOKING.get(questionnaire.smoking, 0)
    if questionnaire.exercise == ExerciseFrequency.NEVER:
        score += tables.CARDIOVASCULAR_NO_EXERCISE
    if bmi > tables.BMI_OBESE:
        score += tables.CARDIOVASCULAR_BMI_OBESE
    elif bmi > tables.BMI_OVERWEIGHT:
        score += tables.CARDIOVASCULAR_BMI_OVERWEIGHT
    if questionnaire.effective_age > 50:
        score += tables.CARDIOVASCULAR_AGE_OVER_50
    return clamp(score, *CATEGORY_SCORE_RANGE)


def score_respiratory(questionnaire: Questionnaire) -> int:
    score = tables.CATEGORY_BASE_SCORE
    score += _symptom_points(questionnaire, tables.RESPIRATORY_SYMPTOMS)
    score += tables.RESPIRATORY_SMOKING.get(questionnaire.smoking, 0)
    return clamp(score, *CATEGORY_SCORE_RANGE)


def score_metabolic(questionnaire: Questionnaire, bmi: float) -> int:
    score = tables.CATEGORY_BASE_SCORE
    score += _symptom_points(questionnaire, tables.METABOLIC_SYMPTOMS)
    if questionnaire.exercise == ExerciseFrequency.NEVER:
        score += tables.METABOLIC_NO_EXERCISE
    if bmi > tables.BMI_OBESE:
        score += tables.METABOLIC_BMI_OBESE
    elif bmi > tables.BMI_OVERWEIGHT:
        score += tables.METABOLIC_BMI_OVERWEIGHT
    score += tables.METABOLIC_ALCOHOL.get(questionnaire.alcohol, 0)
    return clamp(score, *CATEGORY_SCORE_RANGE)


def category_details(questionnaire: Questionnaire, bmi: float) -> Tuple[CategoryDetail, ...]:
    """The three sub-scores in report order."""
    scores = {
        HealthCategory.CARDIOVASCULAR: score_cardiovascular(questionnaire, bmi),
        HealthCategory.RESPIRATORY: score_respiratory(questionnaire),
        HealthCategory.METABOLIC: score_metabolic(questionnaire, bmi),
    }
    return tuple(
        CategoryDetail(
            category=category,
            risk=classify_category_risk(scores[category]),
            score=scores[category],
        )
        for category in CATEGORY_ORDER
    )
