"""
Unit Tests for the Questionnaire model

Lenient parsing of form input and the derived views the scorer relies on.
"""
import pytest
from pydantic import ValidationError

from vitaguard.core.questionnaire import (
    AlcoholIntake,
    ExerciseFrequency,
    Gender,
    Questionnaire,
    SleepDuration,
    SmokingStatus,
    Symptom,
)


class TestParsing:
    """Tests for field coercion."""

    def test_camel_case_wire_names(self):
        q = Questionnaire.model_validate({
            "name": "Mei",
            "heightCm": 160,
            "weightKg": 55,
            "otherSymptoms": "back pain",
        })

        assert q.height_cm == 160.0
        assert q.weight_kg == 55.0
        assert q.other_symptoms == "back pain"

    def test_short_measurement_aliases(self):
        q = Questionnaire.model_validate({"height": "182", "weight": "90.5"})

        assert q.height_cm == 182.0
        assert q.weight_kg == 90.5

    def test_numeric_strings_are_parsed(self):
        q = Questionnaire.model_validate({"age": "42"})
        assert q.age == 42

    @pytest.mark.parametrize("raw", ["", "abc", None, "nan", "inf", True])
    def test_unparseable_numbers_become_none(self, raw):
        q = Questionnaire.model_validate({"age": raw, "height": raw, "weight": raw})

        assert q.age is None
        assert q.height_cm is None
        assert q.weight_kg is None

    def test_lifestyle_codes(self):
        q = Questionnaire.model_validate({
            "gender": "Male",
            "sleep": "LESS_5",
            "exercise": "daily",
            "smoking": "non",
            "alcohol": "moderate",
        })

        assert q.gender == Gender.MALE
        assert q.sleep == SleepDuration.LESS_THAN_5
        assert q.exercise == ExerciseFrequency.DAILY
        assert q.smoking == SmokingStatus.NON_SMOKER
        assert q.alcohol == AlcoholIntake.MODERATE

    def test_unknown_codes_are_ignored(self):
        q = Questionnaire.model_validate({
            "sleep": "all_night",
            "exercise": 3,
            "smoking": "",
            "alcohol": "lots",
        })

        assert q.sleep is None
        assert q.exercise is None
        assert q.smoking is None
        assert q.alcohol is None

    def test_symptoms_are_trimmed_and_deduplicated(self):
        q = Questionnaire(symptoms=["Fatigue", " Headache ", "Fatigue", ""])
        assert q.symptoms == ("Fatigue", "Headache")

    def test_symptom_enum_members_accepted(self):
        q = Questionnaire(symptoms=[Symptom.NAUSEA, "Headache"])
        assert q.symptoms == ("Nausea", "Headache")

    def test_single_symptom_string(self):
        q = Questionnaire(symptoms="Chest Pain")
        assert q.symptoms == ("Chest Pain",)

    def test_non_list_symptoms_ignored(self):
        q = Questionnaire.model_validate({"symptoms": 5})
        assert q.symptoms == ()

    def test_blank_other_symptoms(self):
        q = Questionnaire(other_symptoms="   ")

        assert q.other_symptoms is None
        assert not q.has_other_symptoms

    def test_extra_fields_ignored(self):
        q = Questionnaire.model_validate({"name": "Ola", "favouriteColour": "blue"})
        assert q.name == "Ola"

    def test_empty_questionnaire(self):
        q = Questionnaire()

        assert q.symptoms == ()
        assert q.age is None
        assert q.symptom_count == 0

    def test_immutable(self):
        q = Questionnaire(name="Ola")
        with pytest.raises(ValidationError):
            q.name = "Changed"


class TestDerivedViews:
    """Tests for properties used by scoring and prompting."""

    def test_display_name_default(self):
        assert Questionnaire().display_name == "User"
        assert Questionnaire(name=" Kofi ").display_name == "Kofi"

    @pytest.mark.parametrize("age,expected", [(None, 25), (0, 25), (63, 63), (-4, -4)])
    def test_effective_age(self, age, expected):
        assert Questionnaire(age=age).effective_age == expected

    def test_none_of_the_above_not_counted(self):
        q = Questionnaire(symptoms=["None of the above"])

        assert q.reported_symptoms == ()
        assert q.symptom_count == 0

    def test_symptom_count_includes_free_text(self):
        q = Questionnaire(symptoms=["Fatigue", "Nausea"], other_symptoms="night sweats")
        assert q.symptom_count == 3

    def test_has_symptom(self):
        q = Questionnaire(symptoms=["Persistent Cough"])

        assert q.has_symptom(Symptom.PERSISTENT_COUGH)
        assert not q.has_symptom(Symptom.CHEST_PAIN)
