"""Tests for the feedback progress summary."""
from datetime import date, timedelta
from types import SimpleNamespace

import pytest

from services.progress import summarize_feedback

START = date(2026, 10, 1)


def _row(offset, followed=True, energy=None, digestion=None, mood=None):
    return SimpleNamespace(
        feedback_date=START + timedelta(days=offset),
        followed_plan=followed,
        energy_level=energy,
        digestive_health=digestion,
        mood_rating=mood,
    )


def test_empty_window():
    summary = summarize_feedback([], 7)
    assert summary.entries == 0
    assert summary.adherence_rate is None
    assert summary.averages.model_dump() == {"energy_level": None, "digestive_health": None, "mood_rating": None}
    assert set(summary.trends.model_dump().values()) == {"steady"}


def test_averages_adherence_and_trends():
    rows = [
        _row(0, True, energy=1, digestion=4, mood=3),
        _row(1, False, energy=2, digestion=4, mood=3),
        _row(2, True, energy=4, digestion=2, mood=3),
        _row(3, True, energy=5, digestion=2, mood=3),
    ]
    summary = summarize_feedback(rows, 7)

    assert summary.entries == 4
    assert summary.adherence_rate == 0.75
    assert summary.averages.energy_level == 3.0
    assert summary.trends.model_dump() == {
        "energy_level": "improving",
        "digestive_health": "declining",
        "mood_rating": "steady",
    }


def test_unanswered_values_are_ignored():
    rows = [_row(0, None, energy=3), _row(1, True), _row(2, None, energy=4)]
    summary = summarize_feedback(rows, 3)
    assert summary.adherence_rate == 1.0
    assert summary.averages.energy_level == 3.5
    assert summary.averages.mood_rating is None
    assert summary.trends.mood_rating == "steady"


def test_rows_are_ordered_by_date_before_trending():
    rows = [_row(3, energy=5), _row(0, energy=1)]
    assert summarize_feedback(rows, 7).trends.energy_level == "improving"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
