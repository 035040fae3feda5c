"""Pydantic schema package for request and response models."""

from .profile_schema import (
    HealthProfile,
    HealthProfileRequest,
    HealthProfileResponse,
    UserCreateRequest,
    UserResponse,
)
from .meal_plan_schema import (
    DailyGuidelines,
    GeneratedMealPlan,
    MealPlanItem,
    MealPlanRequest,
    MealPlanResponse,
)
from .daily_schema import (
    CheckInResponse,
    DailyFeedbackRequest,
    DailyMealPlanRequest,
    FeedbackInput,
    TodaysMealPlan,
)

__all__ = [
    "HealthProfile",
    "HealthProfileRequest",
    "HealthProfileResponse",
    "UserCreateRequest",
    "UserResponse",
    "DailyGuidelines",
    "GeneratedMealPlan",
    "MealPlanItem",
    "MealPlanRequest",
    "MealPlanResponse",
    "CheckInResponse",
    "DailyFeedbackRequest",
    "DailyMealPlanRequest",
    "FeedbackInput",
    "TodaysMealPlan",
]
