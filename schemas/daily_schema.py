"""Schemas for the daily check-in / adaptive meal plan / feedback flow."""

from datetime import date as date_type
from typing import Dict, List, Optional

from pydantic import Field

from schemas.base import CamelModel
from schemas.meal_plan_schema import DailyGuidelines, MealPlanItem


class FeedbackInput(CamelModel):
    """How yesterday's plan went, as reported by the user."""

    followed_plan: Optional[bool] = Field(None, examples=[True])
    enjoyed_meals: List[str] = Field(default_factory=list, examples=[["breakfast", "lunch"]])
    disliked_meals: List[str] = Field(default_factory=list, examples=[["dinner"]])
    symptoms_improvement: Dict[str, int] = Field(default_factory=dict)
    energy_level: Optional[int] = Field(None, ge=1, le=5, description="1 (low) to 5 (high)")
    digestive_health: Optional[int] = Field(None, ge=1, le=5, description="1 (poor) to 5 (great)")
    mood_rating: Optional[int] = Field(None, ge=1, le=5, description="1 (low) to 5 (great)")
    feedback: Optional[str] = Field(None, examples=["Dinner was too spicy"])


class DailyFeedbackRequest(FeedbackInput):
    """Feedback submission for the plan of a given date."""

    date: date_type = Field(..., examples=["2026-10-18"])


class DailyMealPlanRequest(CamelModel):
    previous_feedback: Optional[FeedbackInput] = None


class TodaysMealPlan(CamelModel):
    date: date_type
    menstrual_phase: str
    personalized_message: str
    breakfast: MealPlanItem
    lunch: MealPlanItem
    dinner: MealPlanItem
    snacks: List[MealPlanItem] = Field(default_factory=list)
    daily_guidelines: DailyGuidelines
    shopping_list: Dict[str, List[str]] = Field(default_factory=dict)
    adaptations: List[str] = Field(default_factory=list)


class DailyMealPlanResponse(CamelModel):
    success: bool = True
    meal_plan: TodaysMealPlan
    message: str


class TodaysMealPlanLookup(CamelModel):
    success: bool
    meal_plan: Optional[TodaysMealPlan] = None
    message: Optional[str] = None


class CheckInResponse(CamelModel):
    message: str
    follow_up_questions: List[str]
    adaptive_recommendations: Optional[List[str]] = None


class FeedbackSavedResponse(CamelModel):
    success: bool = True
    feedback_id: int
    message: str


class RatingAverages(CamelModel):
    energy_level: Optional[float] = None
    digestive_health: Optional[float] = None
    mood_rating: Optional[float] = None


class RatingTrends(CamelModel):
    """Per-rating direction: improving, declining or steady."""

    energy_level: str = "steady"
    digestive_health: str = "steady"
    mood_rating: str = "steady"


class ProgressSummary(CamelModel):
    """Aggregate of recent daily feedback."""

    days: int
    entries: int
    adherence_rate: Optional[float] = None
    averages: RatingAverages
    trends: RatingTrends
