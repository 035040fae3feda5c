"""Map onboarding answers to canonical health-condition tags.

Three independent passes (diagnosed conditions, symptoms, lifestyle and
goals) are unioned. Unrecognized inputs contribute nothing; an empty result
becomes ``["general_wellness"]``.
"""

import re
from typing import Iterable, List

from core.logger import get_logger
from schemas.profile_schema import HealthProfile

logger = get_logger("services.condition_extractor")

GENERAL_WELLNESS = "general_wellness"

# (keywords, tag): any keyword contained in the diagnosis adds the tag
DIAGNOSIS_KEYWORDS = [
    (("pcos", "polycystic"), "pcos"),
    (("endometriosis",), "endometriosis"),
    (("thyroid", "hypo", "hyper"), "thyroid_hypo"),
    (("diabetes", "insulin"), "diabetes_insulin"),
    (("depression", "anxiety"), "mental_health"),
    (("ibs", "digestive", "celiac"), "digestive_health"),
    (("autoimmune",), "autoimmune"),
]

# keys are symptom labels after normalize_symptom()
SYMPTOM_CONDITIONS = {
    "irregular_periods": ["pcos"],
    "heavy_bleeding": ["endometriosis", "pcos"],
    "painful_periods": ["endometriosis"],
    "weight_gain_or_difficulty_losing_weight": ["pcos", "thyroid_hypo"],
    "fatigue_and_low_energy": ["thyroid_hypo", "stress_adrenal"],
    "mood_swings": ["pcos", "stress_adrenal"],
    "hair_loss_or_thinning": ["pcos", "thyroid_hypo"],
    "acne_or_skin_issues": ["pcos"],
    "bloating_and_digestive_issues": ["digestive_health"],
    "stress_and_anxiety": ["stress_adrenal"],
    "sleep_problems": ["stress_adrenal"],
    "food_cravings": ["pcos", "stress_adrenal"],
    "hot_flashes": ["hormone_imbalance"],
    "brain_fog_or_memory_issues": ["thyroid_hypo", "stress_adrenal"],
    "joint_pain_or_stiffness": ["autoimmune", "endometriosis"],
}

GOAL_KEYWORDS = [
    (("regulate menstrual", "pcos"), "pcos"),
    (("hormone balance",), "hormone_balance"),
    (("manage chronic",), "general_chronic"),
    (("reduce inflammation",), "anti_inflammatory"),
]

SHORT_SLEEP_HOURS = 6


def normalize_symptom(symptom: str) -> str:
    """'Weight gain (or difficulty losing weight)' -> 'weight_gain_or_difficulty_losing_weight'."""
    return re.sub(r"\s+", "_", symptom.strip().lower()).replace("(", "").replace(")", "")


def _match_keywords(values: Iterable[str], table) -> List[str]:
    tags = []
    for value in values:
        lowered = value.lower()
        for keywords, tag in table:
            if any(k in lowered for k in keywords):
                tags.append(tag)
    return tags


def _is_short_sleep(sleep_hours: str) -> bool:
    lowered = sleep_hours.lower()
    if "less than 6" in lowered:
        return True
    try:
        return float(lowered) < SHORT_SLEEP_HOURS
    except ValueError:
        return False


def conditions_from_diagnoses(medical_conditions: Iterable[str]) -> List[str]:
    return _match_keywords(medical_conditions, DIAGNOSIS_KEYWORDS)


def conditions_from_symptoms(symptoms: Iterable[str]) -> List[str]:
    tags = []
    for symptom in symptoms:
        tags.extend(SYMPTOM_CONDITIONS.get(normalize_symptom(symptom), []))
    return tags


def conditions_from_lifestyle(profile: HealthProfile) -> List[str]:
    tags = []
    if profile.stress_level and "high" in profile.stress_level.lower():
        tags.append("stress_adrenal")
    if profile.sleep_hours and _is_short_sleep(profile.sleep_hours):
        tags.append("stress_adrenal")
    tags.extend(_match_keywords(profile.goals, GOAL_KEYWORDS))
    return tags


def extract_health_conditions(profile: HealthProfile) -> List[str]:
    """Return the deduplicated condition tags for a profile, never empty.

    Order follows first appearance: diagnoses, then symptoms, then
    lifestyle and goals.
    """
    found = (
        conditions_from_diagnoses(profile.medical_conditions)
        + conditions_from_symptoms(profile.symptoms)
        + conditions_from_lifestyle(profile)
    )
    unique = list(dict.fromkeys(found))
    if not unique:
        return [GENERAL_WELLNESS]
    logger.debug("Extracted conditions: %s", unique)
    return unique
