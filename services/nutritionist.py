"""Cuisine-based meal plan generation (single day, week and month).

Weekly and monthly plans reuse a single generated day, so a week costs one
generator call and a month costs one as well.
"""

from datetime import date, timedelta
from typing import List, Optional, Tuple

from core.logger import get_logger
from schemas.meal_plan_schema import (
    GeneratedMealPlan,
    MonthlyMealPlan,
    NutritionalSummary,
    WeeklyDay,
    WeeklyMealPlan,
)
from schemas.profile_schema import HealthProfile
from services.condition_extractor import extract_health_conditions
from services.cycle_phase import CyclePhase, resolve_profile_phase
from services.meal_plan_requester import MealPlanRequester
from services.prompt_builder import build_meal_plan_prompt
from services.shopping_list import build_shopping_list, merge_shopping_lists, plan_ingredients

logger = get_logger("services.nutritionist")

DAYS_PER_WEEK = 7
WEEKS_PER_MONTH = 4
KEY_NUTRIENTS = ["protein", "fiber", "omega-3", "vitamins", "minerals"]
HEALTH_GOALS = ["hormonal balance", "energy optimization", "digestive health"]


class NutritionistService:
    """Build cuisine meal plans for a user profile."""

    def __init__(self, requester: MealPlanRequester):
        self.requester = requester

    def generate_meal_plan(
        self,
        profile: HealthProfile,
        cuisine: Optional[str],
        today: Optional[date] = None,
        conditions: Optional[List[str]] = None,
        phase: Optional[CyclePhase] = None,
    ) -> GeneratedMealPlan:
        """Generate one day of meals; falls back to the static plan on failure."""
        conditions = conditions or extract_health_conditions(profile)
        phase = phase or resolve_profile_phase(profile, today)
        logger.info("Generating %s meal plan for conditions=%s phase=%s", cuisine, conditions, phase.value)
        prompt = build_meal_plan_prompt(conditions, phase, profile, cuisine)
        return self.requester.request_or_fallback(prompt, cuisine, conditions)

    def generate_with_shopping_list(
        self, profile: HealthProfile, cuisine: Optional[str], today: Optional[date] = None
    ) -> Tuple[GeneratedMealPlan, dict, List[str]]:
        conditions = extract_health_conditions(profile)
        plan = self.generate_meal_plan(profile, cuisine, today=today, conditions=conditions)
        return plan, build_shopping_list(plan_ingredients(plan)), conditions

    def generate_weekly_meal_plan(
        self, profile: HealthProfile, cuisine: Optional[str], today: Optional[date] = None
    ) -> WeeklyMealPlan:
        today = today or date.today()
        base_plan = self.generate_meal_plan(profile, cuisine, today=today)
        days = []
        for offset in range(DAYS_PER_WEEK):
            day = today + timedelta(days=offset)
            days.append(WeeklyDay(day_name=day.strftime("%A"), date=day.isoformat(), meals=base_plan))
        shopping_list = merge_shopping_lists(
            build_shopping_list(plan_ingredients(d.meals)) for d in days
        )
        return WeeklyMealPlan(week=1, days=days, weekly_shopping_list=shopping_list, weekly_notes=[])

    def generate_monthly_meal_plan(
        self, profile: HealthProfile, cuisine: Optional[str], today: Optional[date] = None
    ) -> MonthlyMealPlan:
        today = today or date.today()
        base_week = self.generate_weekly_meal_plan(profile, cuisine, today=today)
        weeks = [base_week.model_copy(update={"week": n}) for n in range(1, WEEKS_PER_MONTH + 1)]
        return MonthlyMealPlan(
            month=today.strftime("%B"),
            year=today.year,
            weeks=weeks,
            monthly_shopping_list=merge_shopping_lists(w.weekly_shopping_list for w in weeks),
            nutritional_summary=NutritionalSummary(
                focus_areas=extract_health_conditions(profile),
                key_nutrients=list(KEY_NUTRIENTS),
                health_goals=list(HEALTH_GOALS),
            ),
        )
