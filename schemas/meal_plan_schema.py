"""Schemas for generated meal plans.

`GeneratedMealPlan` is the strict contract for what the text generator must
return; anything that does not validate against it is treated as a failed
generation. Its fields keep the snake_case names used in the prompt. The
request/response wrappers below are regular camelCase API payloads.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.base import CamelModel


class MealPlanItem(BaseModel):
    """A single meal or snack."""

    model_config = ConfigDict(extra="ignore")

    name: str = Field(..., min_length=1)
    ingredients: List[str] = Field(..., min_length=1)
    preparation_time: str
    cooking_method: str
    nutritional_focus: List[str] = Field(default_factory=list)
    health_benefits: List[str] = Field(default_factory=list)
    cultural_authenticity: str = ""


class DailyGuidelines(BaseModel):
    model_config = ConfigDict(extra="ignore")

    foods_to_emphasize: List[str] = Field(default_factory=list)
    foods_to_limit: List[str] = Field(default_factory=list)
    hydration_tips: List[str] = Field(default_factory=list)
    timing_recommendations: List[str] = Field(default_factory=list)
    cycle_support: Optional[List[str]] = None


class CycleRecommendations(BaseModel):
    model_config = ConfigDict(extra="ignore")

    phase: str
    seed_cycling: List[str] = Field(default_factory=list)
    hormone_support_foods: List[str] = Field(default_factory=list)
    phase_benefits: List[str] = Field(default_factory=list)


class GeneratedMealPlan(BaseModel):
    """One day of meals as produced by the generator (or the static fallback)."""

    model_config = ConfigDict(extra="ignore")

    condition_focus: List[str] = Field(default_factory=list)
    cuisine_style: str = ""
    menstrual_phase: Optional[str] = None
    cycle_specific_recommendations: Optional[CycleRecommendations] = None
    breakfast: MealPlanItem
    lunch: MealPlanItem
    dinner: MealPlanItem
    snacks: List[MealPlanItem] = Field(default_factory=list)
    daily_guidelines: DailyGuidelines


class MealPlanRequest(CamelModel):
    """Body of the meal plan endpoints."""

    cuisine_preference: str = Field("mediterranean", min_length=1, examples=["indian"])


class MealPlanResponse(CamelModel):
    success: bool = True
    meal_plan: GeneratedMealPlan
    shopping_list: Dict[str, List[str]]
    detected_conditions: List[str]
    message: str


class WeeklyDay(CamelModel):
    day_name: str
    date: str
    meals: GeneratedMealPlan


class WeeklyMealPlan(CamelModel):
    week: int = 1
    days: List[WeeklyDay]
    weekly_shopping_list: Dict[str, List[str]]
    weekly_notes: List[str] = Field(default_factory=list)


class NutritionalSummary(CamelModel):
    focus_areas: List[str]
    key_nutrients: List[str]
    health_goals: List[str]


class MonthlyMealPlan(CamelModel):
    month: str
    year: int
    weeks: List[WeeklyMealPlan]
    monthly_shopping_list: Dict[str, List[str]]
    nutritional_summary: NutritionalSummary


class WeeklyMealPlanResponse(CamelModel):
    success: bool = True
    weekly_plan: WeeklyMealPlan
    shopping_list: Dict[str, List[str]]
    detected_conditions: List[str]
    message: str


class MonthlyMealPlanResponse(CamelModel):
    success: bool = True
    monthly_plan: MonthlyMealPlan
    shopping_list: Dict[str, List[str]]
    detected_conditions: List[str]
    message: str
