"""Tests for resolving the current menstrual cycle phase."""
from datetime import date, timedelta

import pytest

from schemas.profile_schema import HealthProfile
from services.cycle_phase import (
    CyclePhase,
    REFERENCE_NEW_MOON,
    lunar_cycle_phase,
    phase_for_cycle_day,
    resolve_cycle_phase,
    resolve_profile_phase,
)

TODAY = date(2026, 10, 19)


def test_ten_days_into_28_day_cycle_is_follicular():
    profile = HealthProfile(last_period_date=(TODAY - timedelta(days=10)).isoformat(), cycle_length="28")
    assert resolve_profile_phase(profile, TODAY) == CyclePhase.FOLLICULAR


@pytest.mark.parametrize("day,expected", [
    (0, CyclePhase.MENSTRUAL),
    (5, CyclePhase.MENSTRUAL),
    (6, CyclePhase.FOLLICULAR),
    (14, CyclePhase.FOLLICULAR),
    (15, CyclePhase.OVULATORY),
    (16, CyclePhase.LUTEAL),
    (27, CyclePhase.LUTEAL),
])
def test_phase_boundaries_for_28_day_cycle(day, expected):
    assert phase_for_cycle_day(day, 28) == expected


def test_irregular_periods_use_lunar_cycle():
    last_period = TODAY - timedelta(days=2)
    result = resolve_cycle_phase(last_period, irregular_periods=True, cycle_length=28, today=TODAY)
    assert result == lunar_cycle_phase(TODAY)
    # the cycle length is irrelevant once the lunar path is taken
    assert resolve_cycle_phase(None, True, 45, TODAY) == result


def test_missing_or_unparsable_date_uses_lunar_cycle():
    assert resolve_cycle_phase(None, today=TODAY) == lunar_cycle_phase(TODAY)
    assert resolve_cycle_phase("not a date", today=TODAY) == lunar_cycle_phase(TODAY)


def test_stale_period_data_uses_lunar_cycle():
    stale = TODAY - timedelta(days=61)
    assert resolve_cycle_phase(stale, today=TODAY) == lunar_cycle_phase(TODAY)
    # 60 days is still within the window: 60 % 28 == 4
    assert resolve_cycle_phase(TODAY - timedelta(days=60), today=TODAY) == CyclePhase.MENSTRUAL


@pytest.mark.parametrize("days_ahead", [1, 2, 3])
def test_future_period_date_is_menstrual(days_ahead):
    upcoming = TODAY + timedelta(days=days_ahead)
    assert resolve_cycle_phase(upcoming, cycle_length=28, today=TODAY) == CyclePhase.MENSTRUAL


def test_lunar_buckets_follow_moon_age():
    assert lunar_cycle_phase(REFERENCE_NEW_MOON) == CyclePhase.MENSTRUAL
    assert lunar_cycle_phase(REFERENCE_NEW_MOON + timedelta(days=7)) == CyclePhase.FOLLICULAR
    assert lunar_cycle_phase(REFERENCE_NEW_MOON + timedelta(days=14)) == CyclePhase.OVULATORY
    assert lunar_cycle_phase(REFERENCE_NEW_MOON + timedelta(days=21)) == CyclePhase.LUTEAL
    assert lunar_cycle_phase(REFERENCE_NEW_MOON + timedelta(days=30)) == CyclePhase.MENSTRUAL


@pytest.mark.parametrize("cycle_length", ["abc", "0", "-3", None])
def test_bad_cycle_length_defaults_to_28(cycle_length):
    last_period = TODAY - timedelta(days=15)
    # day 15 of 28 is ovulatory; with a 30-day cycle it would still be follicular
    assert resolve_cycle_phase(last_period, cycle_length=cycle_length, today=TODAY) == CyclePhase.OVULATORY


def test_resolution_is_deterministic_for_fixed_today():
    profile = HealthProfile(last_period_date="2026-10-01", cycle_length="30")
    assert {resolve_profile_phase(profile, TODAY) for _ in range(5)} == {resolve_profile_phase(profile, TODAY)}


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
