"""Schemas for the self-evaluation diagnostics.

Scores come from asking the generator to grade its own output. They are a
rough heuristic signal and every payload says so via `heuristic=True`.
"""

from typing import List

from schemas.base import CamelModel


class MealPlanQualityMetrics(CamelModel):
    nutritional_completeness: float = 0.0
    variety_score: float = 0.0
    cultural_authenticity: float = 0.0
    health_condition_alignment: float = 0.0
    cycle_phase_precision: float = 0.0
    overall_quality: float = 0.0
    samples: int = 0
    heuristic: bool = True


class AdaptiveResponseMetrics(CamelModel):
    response_accuracy: float = 0.0
    personalization_depth: float = 0.0
    feedback_integration: float = 0.0
    adaptation_relevance: float = 0.0
    user_satisfaction_predict: float = 0.0
    samples: int = 0
    heuristic: bool = True


class EvaluationReport(CamelModel):
    meal_plan_quality: MealPlanQualityMetrics
    adaptive_responses: AdaptiveResponseMetrics
    overall_score: float
    recommendations: List[str]
    heuristic: bool = True
