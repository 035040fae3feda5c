"""Daily check-in, adaptive meal plan and feedback API router."""

from datetime import date, timedelta
from typing import Optional

from fastapi import APIRouter, Depends, Query

from core.logger import get_logger
from core.repository import DailyFeedbackRepository
from database.deps import get_adaptive_planner, get_feedback_repository
from schemas.daily_schema import (
    CheckInResponse,
    DailyFeedbackRequest,
    DailyMealPlanRequest,
    DailyMealPlanResponse,
    FeedbackSavedResponse,
    ProgressSummary,
    TodaysMealPlanLookup,
)
from services.adaptive_planner import AdaptivePlanner
from services.progress import summarize_feedback

logger = get_logger("api.daily")
router = APIRouter(prefix="/api/users/{user_id}/daily", tags=["daily"])


@router.get("/check-in", response_model=CheckInResponse, response_model_exclude_none=True)
def check_in(user_id: int, planner: AdaptivePlanner = Depends(get_adaptive_planner)):
    """Morning check-in based on yesterday's plan and feedback."""
    return planner.generate_check_in_questions(user_id)


@router.post("/meal-plan", response_model=DailyMealPlanResponse)
def create_todays_meal_plan(
    user_id: int,
    payload: Optional[DailyMealPlanRequest] = None,
    planner: AdaptivePlanner = Depends(get_adaptive_planner),
):
    """Generate, store and return today's plan.

    When the request carries no feedback, yesterday's stored feedback (if
    any) drives the adaptations instead.

    Raises:
        ProfileRequiredError: If onboarding has not been completed.
    """
    today = date.today()
    previous = payload.previous_feedback if payload is not None else None
    if previous is None:
        previous = planner.stored_feedback_for(user_id, today - timedelta(days=1))
    plan = planner.generate_todays_meal_plan(user_id, today, previous)
    planner.save_todays_meal_plan(user_id, plan)
    return DailyMealPlanResponse(meal_plan=plan, message="Today's personalized meal plan is ready!")


@router.get("/meal-plan/today", response_model=TodaysMealPlanLookup, response_model_exclude_none=True)
def get_todays_meal_plan(user_id: int, planner: AdaptivePlanner = Depends(get_adaptive_planner)):
    """Look up the stored plan for today.

    Returns:
        `TodaysMealPlanLookup` with the plan, or `success=False` and a prompt
        to create one when nothing is stored yet.
    """
    plan = planner.plans.get_by_user_date(user_id, date.today())
    if plan is None:
        return TodaysMealPlanLookup(success=False, message="No meal plan found for today. Let's create one!")
    return TodaysMealPlanLookup(success=True, meal_plan=plan)


@router.post("/feedback", response_model=FeedbackSavedResponse)
def submit_feedback(
    user_id: int,
    payload: DailyFeedbackRequest,
    planner: AdaptivePlanner = Depends(get_adaptive_planner),
):
    """Store feedback for the plan of `payload.date`.

    Raises:
        MealPlanNotFoundError: If there is no plan for that date (404).
    """
    row = planner.save_daily_feedback(user_id, payload)
    logger.info("Saved feedback %s for user %s on %s", row.id, user_id, payload.date)
    return FeedbackSavedResponse(
        feedback_id=row.id,
        message="Thank you for your feedback! I'll use this to personalize tomorrow's meal plan.",
    )


@router.get("/progress", response_model=ProgressSummary)
def get_progress(
    user_id: int,
    days: int = Query(7, ge=1, le=90),
    feedback: DailyFeedbackRepository = Depends(get_feedback_repository),
):
    """Adherence, average ratings and trends over the last `days` days."""
    return summarize_feedback(feedback.list_recent(user_id, days), days)
