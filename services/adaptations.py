"""Threshold rules turning yesterday's feedback into plan adaptations.

A rating below 3 (on the 1-5 scale) triggers the matching nutritional
adjustment; disliked meals trigger a replacement note. Missing ratings
trigger nothing.
"""

from typing import Any, List, Mapping, Optional

RATING_THRESHOLD = 3

ENERGY_ADAPTATION = "Adding more iron-rich foods and B-vitamins for energy support"
DIGESTION_ADAPTATION = "Including more fiber and gut-friendly foods for digestive comfort"
MOOD_ADAPTATION = "Incorporating mood-supporting omega-3s and magnesium-rich foods"


def _field(feedback: Any, name: str, default=None):
    if isinstance(feedback, Mapping):
        return feedback.get(name, default)
    return getattr(feedback, name, default)


def _below_threshold(rating: Optional[int]) -> bool:
    return rating is not None and rating < RATING_THRESHOLD


def derive_adaptations(feedback: Any) -> List[str]:
    """Return adaptation strings for a feedback record.

    `feedback` may be a `FeedbackInput` or a plain dict with snake_case
    keys.
    """
    if feedback is None:
        return []

    adaptations = []
    if _below_threshold(_field(feedback, "energy_level")):
        adaptations.append(ENERGY_ADAPTATION)
    if _below_threshold(_field(feedback, "digestive_health")):
        adaptations.append(DIGESTION_ADAPTATION)
    if _below_threshold(_field(feedback, "mood_rating")):
        adaptations.append(MOOD_ADAPTATION)

    disliked = _field(feedback, "disliked_meals") or []
    if disliked:
        adaptations.append(f"Replacing {' and '.join(disliked)} with alternatives you'll enjoy more")
    return adaptations
