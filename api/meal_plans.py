"""Cuisine meal plan API router (daily, weekly and monthly)."""

from fastapi import APIRouter, Depends

from core.logger import get_logger
from core.repository import ProfileRepository
from database.deps import get_nutritionist, get_profile_repository
from schemas.meal_plan_schema import (
    MealPlanRequest,
    MealPlanResponse,
    MonthlyMealPlanResponse,
    WeeklyMealPlanResponse,
)
from services.condition_extractor import extract_health_conditions
from services.guidance import get_cuisine_profile
from services.nutritionist import NutritionistService

logger = get_logger("api.meal_plans")
router = APIRouter(prefix="/api/users/{user_id}", tags=["meal-plans"])


@router.post("/meal-plan", response_model=MealPlanResponse)
def create_meal_plan(
    user_id: int,
    payload: MealPlanRequest,
    profiles: ProfileRepository = Depends(get_profile_repository),
    nutritionist: NutritionistService = Depends(get_nutritionist),
):
    """Generate a one-day meal plan in the requested cuisine.

    Generation failures are absorbed (a static plan is served), so this only
    fails when the user has no profile.

    Raises:
        ProfileRequiredError: If onboarding has not been completed.
    """
    profile = profiles.require_profile(user_id)
    plan, shopping_list, conditions = nutritionist.generate_with_shopping_list(profile, payload.cuisine_preference)
    cuisine_name = get_cuisine_profile(payload.cuisine_preference)["name"]
    return MealPlanResponse(
        meal_plan=plan,
        shopping_list=shopping_list,
        detected_conditions=conditions,
        message=f"Generated {cuisine_name} meal plan for your health profile",
    )


@router.post("/meal-plan/weekly", response_model=WeeklyMealPlanResponse)
def create_weekly_meal_plan(
    user_id: int,
    payload: MealPlanRequest,
    profiles: ProfileRepository = Depends(get_profile_repository),
    nutritionist: NutritionistService = Depends(get_nutritionist),
):
    """Generate a 7-day plan starting today, built on one base plan.

    Each day is labelled with its real weekday name and ISO date, and the
    shopping list is consolidated across all seven days.

    Args:
        user_id: Owner of the health profile.
        payload: `MealPlanRequest` carrying the cuisine preference.

    Returns:
        `WeeklyMealPlanResponse` with the plan and its shopping list.

    Raises:
        ProfileRequiredError: If onboarding has not been completed.
    """
    profile = profiles.require_profile(user_id)
    weekly = nutritionist.generate_weekly_meal_plan(profile, payload.cuisine_preference)
    cuisine_name = get_cuisine_profile(payload.cuisine_preference)["name"]
    return WeeklyMealPlanResponse(
        weekly_plan=weekly,
        shopping_list=weekly.weekly_shopping_list,
        detected_conditions=extract_health_conditions(profile),
        message=f"Generated 7-day {cuisine_name} meal plan for your health profile",
    )


@router.post("/meal-plan/monthly", response_model=MonthlyMealPlanResponse)
def create_monthly_meal_plan(
    user_id: int,
    payload: MealPlanRequest,
    profiles: ProfileRepository = Depends(get_profile_repository),
    nutritionist: NutritionistService = Depends(get_nutritionist),
):
    """Generate a 4-week plan with a nutritional summary.

    Args:
        user_id: Owner of the health profile.
        payload: `MealPlanRequest` carrying the cuisine preference.

    Returns:
        `MonthlyMealPlanResponse` with the weeks, merged shopping list and
        focus areas derived from the profile.

    Raises:
        ProfileRequiredError: If onboarding has not been completed.
    """
    profile = profiles.require_profile(user_id)
    monthly = nutritionist.generate_monthly_meal_plan(profile, payload.cuisine_preference)
    cuisine_name = get_cuisine_profile(payload.cuisine_preference)["name"]
    logger.info("Monthly %s plan built for user %s", cuisine_name, user_id)
    return MonthlyMealPlanResponse(
        monthly_plan=monthly,
        shopping_list=monthly.monthly_shopping_list,
        detected_conditions=extract_health_conditions(profile),
        message=f"Generated 4-week {cuisine_name} meal plan for your health profile",
    )
