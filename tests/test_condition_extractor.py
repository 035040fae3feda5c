"""Tests for mapping onboarding answers to condition tags."""
import pytest

from schemas.profile_schema import HealthProfile
from services.condition_extractor import (
    GENERAL_WELLNESS,
    extract_health_conditions,
    normalize_symptom,
)


def test_pcos_diagnosis_yields_pcos_only():
    profile = HealthProfile(medical_conditions=["PCOS"])
    assert extract_health_conditions(profile) == ["pcos"]


def test_empty_profile_falls_back_to_general_wellness():
    assert extract_health_conditions(HealthProfile()) == [GENERAL_WELLNESS]


def test_unknown_inputs_contribute_nothing():
    profile = HealthProfile(symptoms=["Itchy elbows"], medical_conditions=["Broken toe"], goals=["Run a marathon"])
    assert extract_health_conditions(profile) == [GENERAL_WELLNESS]


def test_diagnosis_matching_is_case_insensitive_substring():
    profile = HealthProfile(medical_conditions=["Polycystic Ovary Syndrome", "HypoThyroidism", "IBS-C"])
    assert extract_health_conditions(profile) == ["pcos", "thyroid_hypo", "digestive_health"]


def test_symptom_labels_are_normalized_before_lookup():
    assert normalize_symptom("Weight gain (or difficulty losing weight)") == "weight_gain_or_difficulty_losing_weight"
    profile = HealthProfile(symptoms=["Painful  periods", "Fatigue and low energy"])
    assert extract_health_conditions(profile) == ["endometriosis", "thyroid_hypo", "stress_adrenal"]


def test_results_are_deduplicated_in_first_seen_order():
    profile = HealthProfile(
        medical_conditions=["PCOS"],
        symptoms=["Irregular periods", "Mood swings"],
        stress_level="Very High",
        goals=["Regulate menstrual cycle"],
    )
    assert extract_health_conditions(profile) == ["pcos", "stress_adrenal"]


@pytest.mark.parametrize("sleep_hours,expected", [
    ("Less than 6", ["stress_adrenal"]),
    ("5", ["stress_adrenal"]),
    ("7-8", [GENERAL_WELLNESS]),
])
def test_short_sleep_adds_stress_adrenal(sleep_hours, expected):
    assert extract_health_conditions(HealthProfile(sleep_hours=sleep_hours)) == expected


def test_goal_keywords():
    profile = HealthProfile(goals=["Hormone balance", "Reduce inflammation", "Manage chronic conditions"])
    assert extract_health_conditions(profile) == ["hormone_balance", "anti_inflammatory", "general_chronic"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
