"""Self-evaluation diagnostics API router.

These endpoints make many generator calls and return heuristic scores; they
are meant for operators checking output quality, not for end users.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from core.logger import get_logger
from core.repository import ProfileRepository
from database.deps import get_evaluation_service, get_profile_repository
from schemas.evaluation_schema import AdaptiveResponseMetrics, EvaluationReport, MealPlanQualityMetrics
from services.evaluation import EvaluationService

logger = get_logger("api.evaluation")
router = APIRouter(prefix="/api/users/{user_id}/evaluation", tags=["evaluation"])


@router.get("/meal-plan-quality", response_model=MealPlanQualityMetrics)
def meal_plan_quality(
    user_id: int,
    conditions: Optional[List[str]] = Query(None),
    profiles: ProfileRepository = Depends(get_profile_repository),
    evaluator: EvaluationService = Depends(get_evaluation_service),
):
    """Score one generated plan per condition on a 1-10 scale.

    Args:
        user_id: Owner of the health profile used as the base.
        conditions: Condition tags to evaluate; defaults to PCOS and
            endometriosis.

    Returns:
        `MealPlanQualityMetrics` averaged over the generated samples.

    Raises:
        ProfileRequiredError: If onboarding has not been completed.
    """
    profile = profiles.require_profile(user_id)
    return evaluator.evaluate_meal_plan_quality(profile, conditions)


@router.get("/adaptive-responses", response_model=AdaptiveResponseMetrics)
def adaptive_responses(user_id: int, evaluator: EvaluationService = Depends(get_evaluation_service)):
    """Score adaptations produced for the built-in feedback scenarios."""
    return evaluator.evaluate_adaptive_responses()


@router.get("/report", response_model=EvaluationReport)
def evaluation_report(
    user_id: int,
    conditions: Optional[List[str]] = Query(None),
    profiles: ProfileRepository = Depends(get_profile_repository),
    evaluator: EvaluationService = Depends(get_evaluation_service),
):
    """Combined meal plan and adaptation scores with improvement hints."""
    profile = profiles.require_profile(user_id)
    report = evaluator.generate_report(profile, conditions)
    logger.info("Evaluation report for user %s: overall=%.2f", user_id, report.overall_score)
    return report
