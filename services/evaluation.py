"""Self-evaluation diagnostics.

The generator is asked to grade sample meal plans and the adaptations
derived from canned feedback. The numbers are an LLM's opinion of its own
output, not a correctness measure; every result is flagged `heuristic`.
"""

import json
from typing import Dict, List, Optional, Sequence

import pandas as pd

from core.exceptions import GenerationError
from core.logger import get_logger
from schemas.evaluation_schema import AdaptiveResponseMetrics, EvaluationReport, MealPlanQualityMetrics
from schemas.meal_plan_schema import GeneratedMealPlan
from schemas.profile_schema import HealthProfile
from services.adaptations import derive_adaptations
from services.cycle_phase import CyclePhase
from services.meal_plan_requester import TextGenerator, parse_json_object
from services.nutritionist import NutritionistService

logger = get_logger("services.evaluation")

EVALUATION_TEMPERATURE = 0.3
SAMPLE_CUISINE = "mediterranean"
DEFAULT_TEST_CONDITIONS = ("pcos", "endometriosis")

MEAL_PLAN_CRITERIA = (
    "nutritional_completeness",
    "variety_score",
    "cultural_authenticity",
    "health_condition_alignment",
    "cycle_phase_precision",
)
ADAPTATION_CRITERIA = {
    "accuracy": "response_accuracy",
    "personalization": "personalization_depth",
    "integration": "feedback_integration",
    "relevance": "adaptation_relevance",
    "satisfaction": "user_satisfaction_predict",
}
DEFAULT_MEAL_PLAN_SCORE = 7.0
DEFAULT_ADAPTATION_SCORE = 5.0

MEAL_PLAN_QUALITY_TARGET = 8
FEEDBACK_INTEGRATION_TARGET = 7

SAMPLE_FEEDBACK = [
    {"energy_level": 1, "digestive_health": 5, "mood_rating": 2,
     "disliked_meals": ["dinner"], "feedback": "Too spicy, felt exhausted"},
    {"energy_level": 4, "digestive_health": 2, "mood_rating": 4,
     "disliked_meals": ["breakfast"], "feedback": "Stomach issues with dairy"},
    {"energy_level": 5, "digestive_health": 5, "mood_rating": 5,
     "disliked_meals": [], "feedback": "Loved everything, felt amazing"},
]


def _score(value, default: float) -> float:
    try:
        score = float(value)
    except (TypeError, ValueError):
        return default
    return min(max(score, 1.0), 10.0)


class EvaluationService:
    """Score generated plans and adaptations with the text generator."""

    def __init__(self, nutritionist: NutritionistService, generator: TextGenerator):
        self.nutritionist = nutritionist
        self.generator = generator

    def _ask_for_scores(self, prompt: str, keys: Sequence[str], default: float) -> Dict[str, float]:
        try:
            raw = self.generator.complete_json(prompt, temperature=EVALUATION_TEMPERATURE, role="user")
            data = parse_json_object(raw)
        except GenerationError as exc:
            logger.warning("Evaluation call failed, using default scores: %s", exc)
            return {key: default for key in keys}
        return {key: _score(data.get(key), default) for key in keys}

    def score_meal_plan(self, plan: GeneratedMealPlan, condition: str, phase: CyclePhase) -> Dict[str, float]:
        prompt = (
            f"Evaluate this meal plan for a woman with {condition} in her {phase.value} phase:\n"
            f"{plan.model_dump_json(indent=2)}\n\n"
            "Rate on a scale of 1-10:\n"
            "- Nutritional completeness (macros, micros, fiber)\n"
            "- Variety (different foods, cooking methods)\n"
            "- Cultural authenticity (if applicable)\n"
            f"- Health condition alignment (specific to {condition})\n"
            f"- Cycle phase precision (appropriate for {phase.value})\n\n"
            "Return JSON: " + json.dumps({key: "X" for key in MEAL_PLAN_CRITERIA})
        )
        return self._ask_for_scores(prompt, MEAL_PLAN_CRITERIA, DEFAULT_MEAL_PLAN_SCORE)

    def score_adaptations(self, feedback: dict, adaptations: List[str]) -> Dict[str, float]:
        prompt = (
            "Evaluate how well these adaptations respond to user feedback:\n"
            f"Feedback: {json.dumps(feedback)}\n"
            f"Adaptations: {', '.join(adaptations) or 'none'}\n\n"
            "Rate on a scale of 1-10:\n"
            "- Accuracy (do adaptations address the issues?)\n"
            "- Personalization (how specific to this user?)\n"
            "- Integration (how well feedback was understood?)\n"
            "- Relevance (are suggestions practical?)\n"
            "- Satisfaction (likely user satisfaction?)\n\n"
            "Return JSON: " + json.dumps({key: "X" for key in ADAPTATION_CRITERIA})
        )
        scores = self._ask_for_scores(prompt, list(ADAPTATION_CRITERIA), DEFAULT_ADAPTATION_SCORE)
        return {ADAPTATION_CRITERIA[key]: value for key, value in scores.items()}

    def evaluate_meal_plan_quality(
        self, profile: HealthProfile, conditions: Optional[Sequence[str]] = None
    ) -> MealPlanQualityMetrics:
        """Score one plan per (condition, phase) over all four phases."""
        conditions = list(conditions or DEFAULT_TEST_CONDITIONS)
        samples = []
        for condition in conditions:
            for phase in CyclePhase:
                plan = self.nutritionist.generate_meal_plan(
                    profile, SAMPLE_CUISINE, conditions=[condition], phase=phase
                )
                samples.append(self.score_meal_plan(plan, condition, phase))

        averages = pd.DataFrame(samples, columns=list(MEAL_PLAN_CRITERIA)).mean()
        metrics = {key: round(float(averages[key]), 2) for key in MEAL_PLAN_CRITERIA}
        return MealPlanQualityMetrics(
            **metrics,
            overall_quality=round(float(averages.mean()), 2),
            samples=len(samples),
        )

    def evaluate_adaptive_responses(self) -> AdaptiveResponseMetrics:
        """Run the canned feedback scenarios through the adaptation rules."""
        columns = list(ADAPTATION_CRITERIA.values())
        samples = [
            self.score_adaptations(feedback, derive_adaptations(feedback)) for feedback in SAMPLE_FEEDBACK
        ]
        averages = pd.DataFrame(samples, columns=columns).mean()
        return AdaptiveResponseMetrics(
            **{column: round(float(averages[column]), 2) for column in columns},
            samples=len(samples),
        )

    def generate_report(
        self, profile: HealthProfile, conditions: Optional[Sequence[str]] = None
    ) -> EvaluationReport:
        meal_plan_quality = self.evaluate_meal_plan_quality(profile, conditions)
        adaptive_responses = self.evaluate_adaptive_responses()
        overall = pd.Series(
            [meal_plan_quality.overall_quality, adaptive_responses.user_satisfaction_predict]
        ).mean()

        recommendations = []
        if meal_plan_quality.overall_quality < MEAL_PLAN_QUALITY_TARGET:
            recommendations.append("Enhance meal plan nutritional completeness and variety")
        if adaptive_responses.feedback_integration < FEEDBACK_INTEGRATION_TARGET:
            recommendations.append("Strengthen feedback processing and adaptation algorithms")

        return EvaluationReport(
            meal_plan_quality=meal_plan_quality,
            adaptive_responses=adaptive_responses,
            overall_score=round(float(overall), 2),
            recommendations=recommendations,
        )
