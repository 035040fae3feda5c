"""Tests for turning feedback ratings into plan adaptations."""
import pytest

from schemas.daily_schema import FeedbackInput
from services.adaptations import (
    DIGESTION_ADAPTATION,
    ENERGY_ADAPTATION,
    MOOD_ADAPTATION,
    derive_adaptations,
)


def test_low_energy_and_mood_with_disliked_dinner():
    feedback = FeedbackInput(energy_level=1, digestive_health=5, mood_rating=2, disliked_meals=["dinner"])
    adaptations = derive_adaptations(feedback)

    assert ENERGY_ADAPTATION in adaptations
    assert MOOD_ADAPTATION in adaptations
    assert DIGESTION_ADAPTATION not in adaptations
    assert "Replacing dinner with alternatives you'll enjoy more" in adaptations
    assert "iron" in ENERGY_ADAPTATION and "B-vitamins" in ENERGY_ADAPTATION


def test_threshold_is_strictly_below_three():
    assert derive_adaptations(FeedbackInput(energy_level=3, digestive_health=3, mood_rating=3)) == []
    assert derive_adaptations(FeedbackInput(digestive_health=2)) == [DIGESTION_ADAPTATION]


def test_missing_ratings_produce_nothing():
    assert derive_adaptations(FeedbackInput()) == []
    assert derive_adaptations(None) == []


def test_multiple_disliked_meals_joined_with_and():
    adaptations = derive_adaptations({"disliked_meals": ["breakfast", "lunch"]})
    assert adaptations == ["Replacing breakfast and lunch with alternatives you'll enjoy more"]


def test_camel_case_payload_is_accepted():
    feedback = FeedbackInput.model_validate({"energyLevel": 2, "dislikedMeals": []})
    assert derive_adaptations(feedback) == [ENERGY_ADAPTATION]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
