"""
Fallback Advice Generation

Turns a questionnaire (and the computed BMI / risk tier) into the textual
parts of a RiskAnalysis: recommendations, daily tips, diet options and the
summary paragraph. Output order is fixed so identical input always yields
identical text.
"""
from __future__ import annotations

from typing import List, Tuple

from vitaguard.core.questionnaire import (
    ExerciseFrequency,
    Questionnaire,
    SleepDuration,
    SmokingStatus,
    Symptom,
)
from vitaguard.core.risk import RiskLevel, first_items
from . import tables

# ── Recommendations ───────────────────────────────────────────────────────────

# Emitted in this order, one per symptom present
SYMPTOM_RECOMMENDATIONS: Tuple[Tuple[Symptom, str], ...] = (
    (Symptom.CHEST_PAIN,
     "Consult a cardiologist for a detailed ECG and stress test to evaluate your chest discomfort."),
    (Symptom.SHORTNESS_OF_BREATH,
     "Schedule a pulmonary function test (spirometry) to assess your respiratory capacity."),
    (Symptom.FATIGUE,
     "Get a complete blood panel to check for iron deficiency, Vitamin D, and thyroid markers (TSH)."),
    (Symptom.DIZZINESS,
     "Monitor blood pressure twice daily for a week and track hydration levels (target 2.5L+ daily)."),
    (Symptom.PERSISTENT_COUGH,
     "If your cough persists beyond 3 weeks, schedule a chest X-ray to rule out respiratory infections."),
    (Symptom.NAUSEA,
     "Review your current diet and medication list, as nausea can be triggered by drug interactions "
     "or food sensitivities."),
    (Symptom.FREQUENT_URINATION,
     "Get a fasting blood glucose and HbA1c test to screen for early metabolic risk markers."),
    (Symptom.HEADACHE,
     "Track headache frequency and triggers for 2 weeks; consult a neurologist if they occur 3+ times/week."),
)

SLEEP_RECOMMENDATION = (
    "Increase sleep to 7-8 hours: chronic sleep deprivation elevates cortisol and cardiovascular risk."
)
EXERCISE_RECOMMENDATION = (
    "Begin with 20 minutes of brisk walking daily; even light exercise reduces all-cause mortality by 20%."
)
SMOKING_RECOMMENDATION = (
    "Initiate a smoking cessation plan; even reducing by 50% significantly lowers respiratory "
    "and cardiovascular risk."
)
OBESITY_RECOMMENDATION = (
    "Your BMI of {bmi:.1f} indicates obesity. A structured nutrition plan with a 500 kcal/day "
    "deficit is recommended."
)

# (keywords, template): matched as case-insensitive substrings of the free text
FREE_TEXT_RECOMMENDATIONS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("pain", "ache"),
     'Regarding your "{text}": persistent pain should be evaluated for underlying inflammation.'),
    (("fever", "cold", "cough"),
     "For your respiratory/flu concern: monitor your temperature and stay hydrated."),
    (("stress", "anxiety", "mental"),
     "Note on your stress levels: we recommend exploring mindfulness or speaking with a counselor."),
)
FREE_TEXT_REVIEW_NOTE = 'Specific note: your report of "{text}" has been flagged for your review.'

HEALTHY_BASELINE_RECOMMENDATIONS: Tuple[str, ...] = (
    "Maintain your current balanced routine; your baseline metrics are within healthy ranges.",
    "Schedule an annual preventive health screening appropriate for your age group.",
    "Continue regular physical activity and adequate hydration (2-3L daily).",
    "Monitor any changes in energy levels, sleep quality, or unexplained symptoms.",
)

SMOKING_RISK_STATUSES = (SmokingStatus.REGULAR, SmokingStatus.OCCASIONAL)


def _free_text_recommendations(text: str) -> List[str]:
    lowered = text.lower()
    matched = [
        template.format(text=text)
        for keywords, template in FREE_TEXT_RECOMMENDATIONS
        if any(keyword in lowered for keyword in keywords)
    ]
    return matched or [FREE_TEXT_REVIEW_NOTE.format(text=text)]


def build_recommendations(questionnaire: Questionnaire, bmi: float) -> Tuple[str, ...]:
    """
    Symptom actions, then lifestyle advice, then free-text notes; first 4 kept.

    Falls back to the healthy-baseline set when nothing applies.
    """
    recommendations = [
        text for symptom, text in SYMPTOM_RECOMMENDATIONS
        if questionnaire.has_symptom(symptom)
    ]

    if questionnaire.sleep == SleepDuration.LESS_THAN_5:
        recommendations.append(SLEEP_RECOMMENDATION)
    if questionnaire.exercise == ExerciseFrequency.NEVER:
        recommendations.append(EXERCISE_RECOMMENDATION)
    if questionnaire.smoking in SMOKING_RISK_STATUSES:
        recommendations.append(SMOKING_RECOMMENDATION)
    if bmi > tables.BMI_OBESE:
        recommendations.append(OBESITY_RECOMMENDATION.format(bmi=bmi))

    if questionnaire.has_other_symptoms:
        recommendations.extend(_free_text_recommendations(questionnaire.other_symptoms))

    if not recommendations:
        recommendations = list(HEALTHY_BASELINE_RECOMMENDATIONS)

    return first_items(recommendations)


# ── Tips ──────────────────────────────────────────────────────────────────────

POOR_SLEEP_TIP = "Set a consistent sleep schedule: go to bed and wake up at the same time, even on weekends."
GOOD_SLEEP_TIP = "Maintain your healthy sleep routine and avoid screens 30 minutes before bed."
LOW_ACTIVITY_TIP = "Take a 10-minute walk after each meal; this improves blood sugar regulation by up to 30%."
ACTIVE_TIP = "Include both cardio and strength training in your weekly routine for comprehensive fitness."
OLDER_ADULT_TIP = "Prioritize calcium and Vitamin D intake to support bone density as you age."
YOUNGER_ADULT_TIP = "Build stress-management habits now; try 5 minutes of daily meditation or journaling."
VEGETABLE_DIVERSITY_TIP = (
    "Eat a variety of colorful vegetables daily; aim for at least 5 different colors per week "
    "for micronutrient diversity."
)

POOR_SLEEP = (SleepDuration.LESS_THAN_5, SleepDuration.FIVE_TO_7)
LOW_ACTIVITY = (ExerciseFrequency.NEVER, ExerciseFrequency.SOMETIMES)


def build_tips(questionnaire: Questionnaire) -> Tuple[str, ...]:
    """Always exactly four tips: sleep, activity, age, diet diversity."""
    return (
        POOR_SLEEP_TIP if questionnaire.sleep in POOR_SLEEP else GOOD_SLEEP_TIP,
        LOW_ACTIVITY_TIP if questionnaire.exercise in LOW_ACTIVITY else ACTIVE_TIP,
        OLDER_ADULT_TIP if questionnaire.effective_age > 40 else YOUNGER_ADULT_TIP,
        VEGETABLE_DIVERSITY_TIP,
    )


# ── Diet options ──────────────────────────────────────────────────────────────

ENERGY_DIET = (
    "Complex carbohydrates (oats, quinoa) for sustained energy release throughout the day.",
    "Iron-rich foods (spinach, lentils) to support healthy oxygen transport in the blood.",
)
BLOOD_SUGAR_DIET = (
    "Low glycemic index foods to maintain stable blood sugar levels.",
    "High-fiber vegetables (broccoli, leafy greens) to improve metabolic processing.",
)
NEURAL_DIET = (
    "Magnesium-rich foods (almonds, pumpkin seeds) which may help reduce headache frequency.",
    "Electrolyte-balanced hydration (coconut water) to maintain proper neural function.",
)
GENERIC_DIET = (
    "Increase intake of Omega-3 fatty acids (walnuts, chia seeds) to support systemic anti-inflammation.",
    "Prioritize high-quality protein (eggs, legumes) for tissue repair and immune support.",
)
MIN_DIET_OPTIONS = 3


def _free_text_mentions(questionnaire: Questionnaire, keyword: str) -> bool:
    return questionnaire.has_other_symptoms and keyword in questionnaire.other_symptoms.lower()


def build_diet_options(questionnaire: Questionnaire) -> Tuple[str, ...]:
    options: List[str] = []
    if questionnaire.has_symptom(Symptom.FATIGUE) or _free_text_mentions(questionnaire, "energy"):
        options.extend(ENERGY_DIET)
    if questionnaire.has_symptom(Symptom.FREQUENT_URINATION) or _free_text_mentions(questionnaire, "sugar"):
        options.extend(BLOOD_SUGAR_DIET)
    if questionnaire.has_symptom(Symptom.HEADACHE) or questionnaire.has_symptom(Symptom.DIZZINESS):
        options.extend(NEURAL_DIET)
    if len(options) < MIN_DIET_OPTIONS:
        options.extend(GENERIC_DIET)
    return first_items(options)


# ── Summary ───────────────────────────────────────────────────────────────────

def _pluralize(count: int, qualifier: str = "") -> str:
    noun = "symptom" if count == 1 else "symptoms"
    return f"{count} {qualifier} {noun}" if qualifier else f"{count} {noun}"


def build_summary(questionnaire: Questionnaire, risk_score: int, risk_level: RiskLevel) -> str:
    count = questionnaire.symptom_count

    if risk_level == RiskLevel.HIGH:
        return (
            f"Based on your {_pluralize(count, 'reported')} and lifestyle profile, your overall health risk "
            f"is categorized as High ({risk_score}%). "
            "We strongly recommend scheduling a consultation with a healthcare professional to discuss "
            "diagnostic testing and a personalized care plan."
        )
    if risk_level == RiskLevel.MODERATE:
        return (
            f"Your health profile shows {_pluralize(count)} that, combined with your lifestyle factors, "
            f"place you in the Moderate risk category ({risk_score}%). "
            "While not immediately critical, proactive lifestyle changes and symptom monitoring can "
            "significantly reduce your long-term risk."
        )

    reported = "no reported symptoms" if count == 0 else _pluralize(count)
    return (
        f"With {reported} and a generally healthy lifestyle, your risk profile is Low ({risk_score}%). "
        "Continue maintaining your current habits and stay consistent with regular preventive check-ups."
    )
