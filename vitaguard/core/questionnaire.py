"""
Questionnaire Model

Typed input contract for one self-reported health assessment: demographics,
symptoms and lifestyle answers.

Parsing is deliberately lenient. The form layer sends strings, blanks and the
occasional code we do not know; none of that is an error here. Unparseable
numbers become None and unknown lifestyle codes become None, which the
scoring engine treats as "contributes nothing".
"""
from __future__ import annotations

import math
from enum import Enum
from typing import Any, Optional, Tuple, Type

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Symptom(str, Enum):
    """Fixed symptom vocabulary offered by the assessment form."""
    CHEST_PAIN = "Chest Pain"
    SHORTNESS_OF_BREATH = "Shortness of Breath"
    FATIGUE = "Fatigue"
    DIZZINESS = "Dizziness"
    PERSISTENT_COUGH = "Persistent Cough"
    NAUSEA = "Nausea"
    FREQUENT_URINATION = "Frequent Urination"
    HEADACHE = "Headache"
    NONE_OF_THE_ABOVE = "None of the above"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class SleepDuration(str, Enum):
    LESS_THAN_5 = "less_5"
    FIVE_TO_7 = "5_7"
    SEVEN_TO_9 = "7_9"
    MORE_THAN_9 = "9_plus"


class ExerciseFrequency(str, Enum):
    NEVER = "never"
    SOMETIMES = "sometimes"
    REGULAR = "regular"
    DAILY = "daily"


class SmokingStatus(str, Enum):
    NON_SMOKER = "non"
    FORMER = "former"
    OCCASIONAL = "occasional"
    REGULAR = "regular"


class AlcoholIntake(str, Enum):
    NONE = "none"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


DEFAULT_AGE = 25
DEFAULT_HEIGHT_CM = 170.0


def _coerce_code(enum_cls: Type[Enum], value: Any) -> Optional[Enum]:
    if value is None or isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        code = value.strip().lower()
        for member in enum_cls:
            if member.value.lower() == code:
                return member
    return None


def _coerce_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        return None
    return float(value)


class Questionnaire(BaseModel):
    """
    One submitted health questionnaire. Immutable once constructed.

    Accepts both the Python attribute names and the camelCase names the UI
    posts (``heightCm``/``height``, ``weightKg``/``weight``, ``otherSymptoms``).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = ""
    age: Optional[int] = None
    gender: Optional[Gender] = None
    height_cm: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("height_cm", "heightCm", "height"),
    )
    weight_kg: Optional[float] = Field(
        default=None,
        validation_alias=AliasChoices("weight_kg", "weightKg", "weight"),
    )
    symptoms: Tuple[str, ...] = ()
    other_symptoms: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("other_symptoms", "otherSymptoms"),
    )
    sleep: Optional[SleepDuration] = None
    exercise: Optional[ExerciseFrequency] = None
    smoking: Optional[SmokingStatus] = None
    alcohol: Optional[AlcoholIntake] = None

    # ── Lenient field parsing ────────────────────────────────────────────

    @field_validator("name", mode="before")
    @classmethod
    def _parse_name(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("age", mode="before")
    @classmethod
    def _parse_age(cls, value: Any) -> Optional[int]:
        number = _coerce_number(value)
        return int(number) if number is not None else None

    @field_validator("height_cm", "weight_kg", mode="before")
    @classmethod
    def _parse_measurement(cls, value: Any) -> Optional[float]:
        """Zero or negative measurements count as not given."""
        number = _coerce_number(value)
        return number if number is not None and number > 0 else None

    @field_validator("symptoms", mode="before")
    @classmethod
    def _parse_symptoms(cls, value: Any) -> Tuple[str, ...]:
        if isinstance(value, (str, Enum)):
            value = [value]
        elif isinstance(value, (set, frozenset)):
            value = sorted(str(v.value if isinstance(v, Enum) else v) for v in value)
        elif not isinstance(value, (list, tuple)):
            return ()

        seen = []
        for item in value:
            if isinstance(item, Enum):
                item = item.value
            text = str(item).strip()
            if text and text not in seen:
                seen.append(text)
        return tuple(seen)

    @field_validator("other_symptoms", mode="before")
    @classmethod
    def _parse_other_symptoms(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @field_validator("gender", mode="before")
    @classmethod
    def _parse_gender(cls, value: Any) -> Optional[Gender]:
        return _coerce_code(Gender, value)

    @field_validator("sleep", mode="before")
    @classmethod
    def _parse_sleep(cls, value: Any) -> Optional[SleepDuration]:
        return _coerce_code(SleepDuration, value)

    @field_validator("exercise", mode="before")
    @classmethod
    def _parse_exercise(cls, value: Any) -> Optional[ExerciseFrequency]:
        return _coerce_code(ExerciseFrequency, value)

    @field_validator("smoking", mode="before")
    @classmethod
    def _parse_smoking(cls, value: Any) -> Optional[SmokingStatus]:
        return _coerce_code(SmokingStatus, value)

    @field_validator("alcohol", mode="before")
    @classmethod
    def _parse_alcohol(cls, value: Any) -> Optional[AlcoholIntake]:
        return _coerce_code(AlcoholIntake, value)

    # ── Derived views ────────────────────────────────────────────────────

    @property
    def display_name(self) -> str:
        return self.name or "User"

    @property
    def effective_age(self) -> int:
        """Age used for scoring; a missing or zero age counts as 25."""
        return self.age if self.age else DEFAULT_AGE

    @property
    def has_other_symptoms(self) -> bool:
        return bool(self.other_symptoms)

    @property
    def reported_symptoms(self) -> Tuple[str, ...]:
        """Selected symptoms without the "None of the above" marker."""
        return tuple(s for s in self.symptoms if s != Symptom.NONE_OF_THE_ABOVE.value)

    @property
    def symptom_count(self) -> int:
        """Selected symptoms plus one if free text was entered."""
        return len(self.reported_symptoms) + (1 if self.has_other_symptoms else 0)

    def has_symptom(self, symptom: Symptom) -> bool:
        return symptom.value in self.symptoms
