"""Tests for the daily check-in / plan / feedback loop against a real session."""
from datetime import date, timedelta

import pytest

from core.exceptions import MealPlanNotFoundError, ProfileRequiredError
from core.repository import (
    DailyFeedbackRepository,
    DailyMealPlanRepository,
    ProfileRepository,
    UserRepository,
)
from schemas.daily_schema import DailyFeedbackRequest, FeedbackInput
from schemas.profile_schema import HealthProfileRequest
from services.adaptations import ENERGY_ADAPTATION
from services.adaptive_planner import (
    FEEDBACK_GIVEN_MESSAGE,
    NO_FEEDBACK_MESSAGE,
    NO_PLAN_MESSAGE,
    AdaptivePlanner,
)
from services.guidance import get_phase_message
from services.meal_plan_requester import MealPlanRequester

TODAY = date(2026, 10, 19)
YESTERDAY = TODAY - timedelta(days=1)


def _planner(db, generator):
    return AdaptivePlanner(
        profiles=ProfileRepository(db),
        plans=DailyMealPlanRepository(db),
        feedback=DailyFeedbackRepository(db),
        requester=MealPlanRequester(generator),
    )


@pytest.fixture
def user_id(db_session):
    user = UserRepository(db_session).create("Maya", "maya@example.com")
    ProfileRepository(db_session).save_profile(user.id, HealthProfileRequest(
        medical_conditions=["PCOS"],
        last_period_date=(TODAY - timedelta(days=10)).isoformat(),
        cycle_length="28",
    ))
    return user.id


def test_plan_requires_profile(db_session, fake_generator):
    user = UserRepository(db_session).create("No Profile")
    with pytest.raises(ProfileRequiredError) as exc_info:
        _planner(db_session, fake_generator).generate_todays_meal_plan(user.id, TODAY)
    assert exc_info.value.status_code == 400


def test_generated_plan_carries_phase_adaptations_and_message(db_session, user_id, fake_generator):
    planner = _planner(db_session, fake_generator)
    plan = planner.generate_todays_meal_plan(user_id, TODAY, FeedbackInput(energy_level=2))

    assert plan.menstrual_phase == "follicular"
    assert plan.adaptations == [ENERGY_ADAPTATION]
    assert plan.personalized_message.startswith(get_phase_message("follicular"))
    assert ENERGY_ADAPTATION in plan.personalized_message
    assert "salmon" in plan.shopping_list["proteins"]
    assert "PREVIOUS DAY FEEDBACK" in fake_generator.prompts[-1]


def test_generation_failure_serves_default_plan_without_adaptations(db_session, user_id, failing_generator):
    plan = _planner(db_session, failing_generator).generate_todays_meal_plan(
        user_id, TODAY, FeedbackInput(energy_level=1, mood_rating=1)
    )
    assert plan.adaptations == []
    assert plan.breakfast.name == "Iron-Rich Spinach Smoothie Bowl"
    assert plan.menstrual_phase == "follicular"
    assert "follicular phase" in plan.personalized_message


def test_saving_twice_overwrites_the_same_day(db_session, user_id, fake_generator, failing_generator):
    plans = DailyMealPlanRepository(db_session)
    first = _planner(db_session, fake_generator).generate_todays_meal_plan(user_id, TODAY)
    second = _planner(db_session, failing_generator).generate_todays_meal_plan(user_id, TODAY)

    row_one = plans.upsert(user_id, first)
    row_two = plans.upsert(user_id, second)

    assert row_one.id == row_two.id
    assert plans.count() == 1
    assert plans.get_by_user_date(user_id, TODAY) == second


def test_check_in_states(db_session, user_id, fake_generator):
    planner = _planner(db_session, fake_generator)
    assert planner.generate_check_in_questions(user_id, TODAY).message == NO_PLAN_MESSAGE

    planner.save_todays_meal_plan(user_id, planner.generate_todays_meal_plan(user_id, YESTERDAY))
    no_feedback = planner.generate_check_in_questions(user_id, TODAY)
    assert no_feedback.message == NO_FEEDBACK_MESSAGE
    assert no_feedback.adaptive_recommendations is None

    planner.save_daily_feedback(user_id, DailyFeedbackRequest(date=YESTERDAY, energy_level=1))
    given = planner.generate_check_in_questions(user_id, TODAY)
    assert given.message == FEEDBACK_GIVEN_MESSAGE
    assert given.adaptive_recommendations == [ENERGY_ADAPTATION]


def test_feedback_requires_a_plan_for_that_date(db_session, user_id, fake_generator):
    with pytest.raises(MealPlanNotFoundError) as exc_info:
        _planner(db_session, fake_generator).save_daily_feedback(user_id, DailyFeedbackRequest(date=YESTERDAY))
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "No meal plan found for this date"


def test_feedback_resubmission_is_upserted(db_session, user_id, fake_generator):
    planner = _planner(db_session, fake_generator)
    planner.save_todays_meal_plan(user_id, planner.generate_todays_meal_plan(user_id, TODAY))

    first = planner.save_daily_feedback(user_id, DailyFeedbackRequest(date=TODAY, mood_rating=2))
    second = planner.save_daily_feedback(
        user_id, DailyFeedbackRequest(date=TODAY, mood_rating=5, disliked_meals=["lunch"])
    )

    assert first.id == second.id
    stored = planner.stored_feedback_for(user_id, TODAY)
    assert stored.mood_rating == 5
    assert stored.disliked_meals == ["lunch"]


def test_profile_is_replaced_wholesale(db_session, user_id):
    profiles = ProfileRepository(db_session)
    profiles.save_profile(user_id, HealthProfileRequest(symptoms=["Painful periods"], cycle_length="oops"))

    profile = profiles.get_profile(user_id)
    assert profile.medical_conditions == []
    assert profile.symptoms == ["Painful periods"]
    assert profile.cycle_length == 28
    assert profile.last_period_date is None
    assert profiles.count() == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
