"""FastAPI dependencies: DB sessions, repositories and service objects.

`get_db_write` / `get_db_read` route to the write and read engines. The text
generator is a process-wide `LLMClient`; tests replace `get_text_generator`
through `app.dependency_overrides`.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from core.repository import (
    DailyFeedbackRepository,
    DailyMealPlanRepository,
    ProfileRepository,
    UserRepository,
)
from services.adaptive_planner import AdaptivePlanner
from services.evaluation import EvaluationService
from services.llm_client import LLMClient
from services.meal_plan_requester import MealPlanRequester
from services.nutritionist import NutritionistService
from .database import get_read_session, get_write_session


def get_db_write():
    """Yield a write-capable DB session for FastAPI dependency injection."""
    yield from get_write_session()


def get_db_read():
    """Yield a read-only DB session for FastAPI dependency injection."""
    yield from get_read_session()


@lru_cache(maxsize=1)
def get_text_generator() -> LLMClient:
    return LLMClient()


def get_meal_plan_requester(generator=Depends(get_text_generator)) -> MealPlanRequester:
    return MealPlanRequester(generator)


def get_nutritionist(requester: MealPlanRequester = Depends(get_meal_plan_requester)) -> NutritionistService:
    return NutritionistService(requester)


def get_evaluation_service(
    nutritionist: NutritionistService = Depends(get_nutritionist),
    generator=Depends(get_text_generator),
) -> EvaluationService:
    return EvaluationService(nutritionist, generator)


def get_adaptive_planner(
    db: Session = Depends(get_db_write),
    requester: MealPlanRequester = Depends(get_meal_plan_requester),
) -> AdaptivePlanner:
    return AdaptivePlanner(
        profiles=ProfileRepository(db),
        plans=DailyMealPlanRepository(db),
        feedback=DailyFeedbackRepository(db),
        requester=requester,
    )


def get_user_repository(db: Session = Depends(get_db_write)) -> UserRepository:
    return UserRepository(db)


def get_profile_repository(db: Session = Depends(get_db_write)) -> ProfileRepository:
    return ProfileRepository(db)


def get_feedback_repository(db: Session = Depends(get_db_read)) -> DailyFeedbackRepository:
    return DailyFeedbackRepository(db)
