"""Menstrual cycle phase resolution.

The phase is derived from the last period date and cycle length. When
that data is missing, flagged irregular, or older than 60 days, the lunar
month stands in as a proxy cycle. Every input maps to exactly one of the
four phases.
"""

import math
from datetime import date
from enum import Enum
from typing import Any, Optional

from core.logger import get_logger
from schemas.profile_schema import DEFAULT_CYCLE_LENGTH, HealthProfile, parse_cycle_length, parse_profile_date

logger = get_logger("services.cycle_phase")

LUNAR_MONTH_DAYS = 29.53
REFERENCE_NEW_MOON = date(2024, 1, 11)
STALE_PERIOD_DAYS = 60
MENSTRUAL_DAYS = 5


class CyclePhase(str, Enum):
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATORY = "ovulatory"
    LUTEAL = "luteal"


def lunar_cycle_phase(today: date) -> CyclePhase:
    """Map the moon's age on `today` onto a cycle phase.

    New moon -> menstrual, waxing -> follicular, full -> ovulatory,
    waning -> luteal, in 7-day buckets with the remainder going to luteal.
    """
    days_since_new_moon = (today - REFERENCE_NEW_MOON).days
    lunar_day = days_since_new_moon % LUNAR_MONTH_DAYS
    if lunar_day < 7:
        return CyclePhase.MENSTRUAL
    if lunar_day < 14:
        return CyclePhase.FOLLICULAR
    if lunar_day < 21:
        return CyclePhase.OVULATORY
    return CyclePhase.LUTEAL


def phase_for_cycle_day(cycle_day: int, cycle_length: int) -> CyclePhase:
    """Bucket a zero-based day within the cycle into a phase.

    Days 0-5 are menstrual, then follicular up to half the cycle, ovulatory
    up to 55% of it, luteal for the rest.
    """
    if cycle_day <= MENSTRUAL_DAYS:
        return CyclePhase.MENSTRUAL
    if cycle_day <= math.floor(cycle_length * 0.5):
        return CyclePhase.FOLLICULAR
    if cycle_day <= math.floor(cycle_length * 0.55):
        return CyclePhase.OVULATORY
    return CyclePhase.LUTEAL


def resolve_cycle_phase(
    last_period_date: Any = None,
    irregular_periods: bool = False,
    cycle_length: Any = DEFAULT_CYCLE_LENGTH,
    today: Optional[date] = None,
) -> CyclePhase:
    """Return the user's current phase.

    Args:
        last_period_date: First day of the last period (date or ISO string).
            Unparsable values are treated as missing.
        irregular_periods: When set, cycle data is ignored entirely.
        cycle_length: Cycle length in days; defaults to 28 if unusable.
        today: Reference date, defaults to `date.today()`.
    """
    today = today or date.today()
    last_period = parse_profile_date(last_period_date)

    if last_period is None or irregular_periods:
        return lunar_cycle_phase(today)

    days_since = (today - last_period).days
    if days_since > STALE_PERIOD_DAYS:
        logger.debug("Period data is %s days old; using lunar cycle", days_since)
        return lunar_cycle_phase(today)
    # a period logged ahead of today counts as day 0
    days_since = max(days_since, 0)

    length = parse_cycle_length(cycle_length)
    return phase_for_cycle_day(days_since % length, length)


def resolve_profile_phase(profile: HealthProfile, today: Optional[date] = None) -> CyclePhase:
    """Convenience wrapper taking a normalized profile."""
    return resolve_cycle_phase(
        last_period_date=profile.last_period_date,
        irregular_periods=profile.irregular_periods,
        cycle_length=profile.cycle_length,
        today=today,
    )
