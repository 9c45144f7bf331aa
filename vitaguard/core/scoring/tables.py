"""
Scoring Tables

Every weight the fallback engine adds lives here as a constant mapping, so the
calibration can be reviewed without reading any logic.
"""
from typing import Dict, Tuple

from vitaguard.core.questionnaire import (
    AlcoholIntake,
    ExerciseFrequency,
    SleepDuration,
    SmokingStatus,
    Symptom,
)

# ── Symptoms ──────────────────────────────────────────────────────────────────

SYMPTOM_WEIGHTS: Dict[str, int] = {
    Symptom.CHEST_PAIN.value: 6,
    Symptom.SHORTNESS_OF_BREATH.value: 5,
    Symptom.DIZZINESS.value: 4,
    Symptom.FREQUENT_URINATION.value: 4,
    Symptom.FATIGUE.value: 3,
    Symptom.PERSISTENT_COUGH.value: 3,
    Symptom.NAUSEA.value: 3,
    Symptom.HEADACHE.value: 2,
    Symptom.NONE_OF_THE_ABOVE.value: 0,
}

# Symptom strings outside the form vocabulary
UNKNOWN_SYMPTOM_WEIGHT = 3

# Free-text description present
OTHER_SYMPTOMS_WEIGHT = 5

# Dangerous pairs, each applied independently
CO_OCCURRENCE_BONUSES: Tuple[Tuple[Symptom, Symptom, int], ...] = (
    (Symptom.CHEST_PAIN, Symptom.SHORTNESS_OF_BREATH, 5),
    (Symptom.FATIGUE, Symptom.DIZZINESS, 3),
    (Symptom.NAUSEA, Symptom.FREQUENT_URINATION, 3),
)

# ── Lifestyle ─────────────────────────────────────────────────────────────────

SLEEP_WEIGHTS: Dict[SleepDuration, int] = {
    SleepDuration.LESS_THAN_5: 5,
    SleepDuration.FIVE_TO_7: 2,
    SleepDuration.SEVEN_TO_9: 0,
    SleepDuration.MORE_THAN_9: 1,
}

EXERCISE_WEIGHTS: Dict[ExerciseFrequency, int] = {
    ExerciseFrequency.NEVER: 5,
    ExerciseFrequency.SOMETIMES: 2,
    ExerciseFrequency.REGULAR: 0,
    ExerciseFrequency.DAILY: -1,
}

SMOKING_WEIGHTS: Dict[SmokingStatus, int] = {
    SmokingStatus.NON_SMOKER: 0,
    SmokingStatus.FORMER: 2,
    SmokingStatus.OCCASIONAL: 4,
    SmokingStatus.REGULAR: 6,
}

ALCOHOL_WEIGHTS: Dict[AlcoholIntake, int] = {
    AlcoholIntake.NONE: 0,
    AlcoholIntake.LOW: 1,
    AlcoholIntake.MODERATE: 3,
    AlcoholIntake.HIGH: 5,
}

# ── Age / BMI adjustments (first matching band wins) ─────────────────────────

AGE_BANDS: Tuple[Tuple[int, int], ...] = (
    (50, 4),   # age > 50
    (40, 2),   # age > 40
    (30, 1),   # age > 30
)

DEFAULT_BMI = 22.0
BMI_OBESE = 30.0
BMI_OVERWEIGHT = 25.0
BMI_UNDERWEIGHT = 18.5

BMI_OBESE_WEIGHT = 4
BMI_OVERWEIGHT_WEIGHT = 2
BMI_UNDERWEIGHT_WEIGHT = 2

# ── Category sub-scores ───────────────────────────────────────────────────────

CATEGORY_BASE_SCORE = 5

CARDIOVASCULAR_SYMPTOMS: Dict[Symptom, int] = {
    Symptom.CHEST_PAIN: 25,
    Symptom.DIZZINESS: 10,
    Symptom.SHORTNESS_OF_BREATH: 10,
}
CARDIOVASCULAR_SMOKING: Dict[SmokingStatus, int] = {
    SmokingStatus.REGULAR: 15,
    SmokingStatus.OCCASIONAL: 8,
}
CARDIOVASCULAR_NO_EXERCISE = 10
CARDIOVASCULAR_BMI_OBESE = 10
CARDIOVASCULAR_BMI_OVERWEIGHT = 5
CARDIOVASCULAR_AGE_OVER_50 = 8

RESPIRATORY_SYMPTOMS: Dict[Symptom, int] = {
    Symptom.SHORTNESS_OF_BREATH: 25,
    Symptom.PERSISTENT_COUGH: 20,
    Symptom.CHEST_PAIN: 5,
}
RESPIRATORY_SMOKING: Dict[SmokingStatus, int] = {
    SmokingStatus.REGULAR: 20,
    SmokingStatus.OCCASIONAL: 10,
    SmokingStatus.FORMER: 5,
}

METABOLIC_SYMPTOMS: Dict[Symptom, int] = {
    Symptom.FREQUENT_URINATION: 20,
    Symptom.FATIGUE: 10,
    Symptom.NAUSEA: 8,
}
METABOLIC_NO_EXERCISE = 10
METABOLIC_BMI_OBESE = 15
METABOLIC_BMI_OVERWEIGHT = 8
METABOLIC_ALCOHOL: Dict[AlcoholIntake, int] = {
    AlcoholIntake.HIGH: 10,
    AlcoholIntake.MODERATE: 5,
}
