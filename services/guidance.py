"""Read access to the static guidance tables.

Unknown condition tags contribute nothing and unknown cuisines fall back to
Mediterranean; lookups never raise.
"""

from typing import Dict, Iterable, List, Optional

from data.guidance_tables import (
    CUISINE_PROFILES,
    CYCLE_PHASES,
    DEFAULT_CUISINE,
    HEALTH_CONDITIONS,
    PHASE_MESSAGES,
)

INCORPORATION_STYLES = ("lazy", "tasty", "healthy")


def get_condition_guidance(tag: str) -> Optional[Dict]:
    return HEALTH_CONDITIONS.get(tag)


def get_phase_guidance(phase) -> Dict:
    """Guidance for a phase (enum or plain string)."""
    key = getattr(phase, "value", phase)
    return CYCLE_PHASES[key]


def get_phase_message(phase) -> str:
    return PHASE_MESSAGES[getattr(phase, "value", phase)]


def normalize_cuisine(cuisine: Optional[str]) -> str:
    key = (cuisine or "").strip().lower()
    return key if key in CUISINE_PROFILES else DEFAULT_CUISINE


def get_cuisine_profile(cuisine: Optional[str]) -> Dict:
    return CUISINE_PROFILES[normalize_cuisine(cuisine)]


def merge_condition_guidance(tags: Iterable[str]) -> Dict[str, List[str]]:
    """Concatenate the guidance of every known tag, skipping unknown ones.

    Returns:
        Dict with `dietary_focus`, `foods_to_include`, `foods_to_avoid` and
        `meal_timing_considerations` lists (possibly empty).
    """
    merged = {
        "dietary_focus": [],
        "foods_to_include": [],
        "foods_to_avoid": [],
        "meal_timing_considerations": [],
    }
    for tag in tags:
        guidance = get_condition_guidance(tag)
        if guidance is None:
            continue
        for key in merged:
            merged[key].extend(guidance[key])
    return merged


def incorporation_methods(phase) -> Dict[str, List[str]]:
    """Seed-cycling incorporation ideas per style for the given phase."""
    data = get_phase_guidance(phase)
    return {style: list(data[f"{style}_incorporation"]) for style in INCORPORATION_STYLES}
