"""Daily check-in, adaptive daily meal plan and feedback persistence.

State lives in the repositories: the plan and the feedback stored for a
given (user, date). Yesterday's rows decide what the morning check-in says.
"""

from datetime import date, timedelta
from typing import List, Optional

from core.exceptions import MealPlanNotFoundError
from core.logger import get_logger
from core.repository import DailyFeedbackRepository, DailyMealPlanRepository, ProfileRepository
from database import models
from schemas.daily_schema import CheckInResponse, DailyFeedbackRequest, FeedbackInput, TodaysMealPlan
from services.adaptations import derive_adaptations
from services.condition_extractor import extract_health_conditions
from services.cycle_phase import CyclePhase, resolve_profile_phase
from services.guidance import get_phase_message
from services.meal_plan_requester import MealPlanRequester, daily_fallback_plan
from services.prompt_builder import build_meal_plan_prompt
from services.shopping_list import build_shopping_list, plan_ingredients

logger = get_logger("services.adaptive_planner")

NO_PLAN_MESSAGE = (
    "Good morning! Ready to start your personalized nutrition journey? We'll create today's meal plan "
    "based on your current menstrual cycle phase and health goals. Would you like that?"
)
NO_PLAN_QUESTIONS = [
    "How are you feeling today?",
    "Any specific symptoms or cravings?",
    "What's your energy level like this morning?",
]
NO_FEEDBACK_MESSAGE = (
    "Good morning! How did yesterday's meal plan work for you? "
    "Your feedback helps me personalize today's recommendations."
)
NO_FEEDBACK_QUESTIONS = [
    "Did you follow the meal plan?",
    "Which meals did you enjoy most?",
    "How was your energy and mood?",
    "Any digestive issues or improvements?",
]
FEEDBACK_GIVEN_MESSAGE = (
    "Good morning! Based on your feedback from yesterday, I've got some personalized adjustments for today's plan."
)
FEEDBACK_GIVEN_QUESTIONS = [
    "How are you feeling this morning?",
    "Ready for today's adapted meal plan?",
]


def personalized_message(phase: CyclePhase, adaptations: List[str]) -> str:
    message = get_phase_message(phase)
    if adaptations:
        message += f". Today's plan includes these personalized adjustments: {', '.join(adaptations)}."
    return message


def fallback_message(phase: CyclePhase) -> str:
    return (
        f"Here's your personalized meal plan for your {phase.value} phase, "
        "designed to support your body's natural rhythms."
    )


class AdaptivePlanner:
    """Coordinates the daily loop for one request."""

    def __init__(
        self,
        profiles: ProfileRepository,
        plans: DailyMealPlanRepository,
        feedback: DailyFeedbackRepository,
        requester: MealPlanRequester,
    ):
        self.profiles = profiles
        self.plans = plans
        self.feedback = feedback
        self.requester = requester

    def generate_check_in_questions(self, user_id: int, today: Optional[date] = None) -> CheckInResponse:
        """Morning check-in keyed on yesterday's plan and feedback."""
        yesterday = (today or date.today()) - timedelta(days=1)
        if self.plans.get_row(user_id, yesterday) is None:
            return CheckInResponse(message=NO_PLAN_MESSAGE, follow_up_questions=list(NO_PLAN_QUESTIONS))

        previous = self.feedback.get_by_user_date(user_id, yesterday)
        if previous is None:
            return CheckInResponse(message=NO_FEEDBACK_MESSAGE, follow_up_questions=list(NO_FEEDBACK_QUESTIONS))

        return CheckInResponse(
            message=FEEDBACK_GIVEN_MESSAGE,
            follow_up_questions=list(FEEDBACK_GIVEN_QUESTIONS),
            adaptive_recommendations=derive_adaptations(previous),
        )

    def generate_todays_meal_plan(
        self,
        user_id: int,
        plan_date: Optional[date] = None,
        previous_feedback: Optional[FeedbackInput] = None,
    ) -> TodaysMealPlan:
        """Build (but do not store) the plan for `plan_date`.

        Raises:
            ProfileRequiredError: If the user has not completed onboarding.
        """
        plan_date = plan_date or date.today()
        profile = self.profiles.require_profile(user_id)

        phase = resolve_profile_phase(profile, plan_date)
        adaptations = derive_adaptations(previous_feedback)
        conditions = extract_health_conditions(profile)
        prompt = build_meal_plan_prompt(
            conditions, phase, profile, previous_feedback=previous_feedback, adaptations=adaptations
        )

        generated = self.requester.request_daily(prompt)
        if generated is None:
            generated = daily_fallback_plan()
            adaptations = []
            message = fallback_message(phase)
        else:
            logger.info("Generated daily plan for user %s (%s, %d adaptations)", user_id, phase.value, len(adaptations))
            message = personalized_message(phase, adaptations)

        return TodaysMealPlan(
            date=plan_date,
            menstrual_phase=phase.value,
            personalized_message=message,
            breakfast=generated.breakfast,
            lunch=generated.lunch,
            dinner=generated.dinner,
            snacks=generated.snacks,
            daily_guidelines=generated.daily_guidelines,
            shopping_list=build_shopping_list(plan_ingredients(generated)),
            adaptations=adaptations,
        )

    def save_todays_meal_plan(self, user_id: int, plan: TodaysMealPlan) -> models.DailyMealPlan:
        return self.plans.upsert(user_id, plan)

    def stored_feedback_for(self, user_id: int, feedback_date: date) -> Optional[FeedbackInput]:
        return self.feedback.get_by_user_date(user_id, feedback_date)

    def save_daily_feedback(self, user_id: int, feedback: DailyFeedbackRequest) -> models.DailyFeedback:
        """Store feedback against the plan of `feedback.date`.

        Raises:
            MealPlanNotFoundError: If no plan exists for that date.
        """
        plan_row = self.plans.get_row(user_id, feedback.date)
        if plan_row is None:
            raise MealPlanNotFoundError(user_id, feedback.date)
        return self.feedback.upsert(user_id, plan_row.id, feedback)
