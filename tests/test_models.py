"""Tests for ORM timestamp defaults."""
from datetime import timezone

import pytest

from core.repository import ProfileRepository, UserRepository
from database.models import utcnow
from schemas.profile_schema import HealthProfileRequest


def test_utcnow_is_timezone_aware():
    assert utcnow().tzinfo == timezone.utc


def test_timestamps_are_filled_on_save(db_session):
    user = UserRepository(db_session).create("Maya", None)
    assert user.created_at is not None

    row = ProfileRepository(db_session).save_profile(user.id, HealthProfileRequest(age="29"))
    assert row.completed_at is not None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
