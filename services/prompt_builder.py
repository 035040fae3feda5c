"""Assemble the meal plan instruction sent to the text generator.

The builder is pure string assembly: condition guidance, cycle-phase
guidance, cuisine elements, profile details and (optionally) yesterday's
feedback plus the adaptations derived from it. It also returns the exact
JSON shape the generator must answer with; `GeneratedMealPlan` validates
the answer against the same shape.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

from schemas.daily_schema import FeedbackInput
from schemas.profile_schema import HealthProfile
from services.guidance import (
    get_cuisine_profile,
    get_phase_guidance,
    incorporation_methods,
    merge_condition_guidance,
)


@dataclass(frozen=True)
class MealPlanPrompt:
    instruction: str
    response_shape: Dict[str, Any] = field(default_factory=dict)


def _meal_shape(prep_time: str, focus_count: int = 2) -> Dict[str, Any]:
    return {
        "name": "Meal name",
        "ingredients": ["ingredient1", "ingredient2"],
        "preparation_time": prep_time,
        "cooking_method": "method",
        "nutritional_focus": [f"focus{i + 1}" for i in range(focus_count)],
        "health_benefits": [f"benefit{i + 1}" for i in range(focus_count)],
        "cultural_authenticity": "explanation",
    }


def build_response_shape(conditions: Sequence[str], cuisine_name: str, phase) -> Dict[str, Any]:
    """The JSON object the generator must return, with placeholders."""
    phase_data = get_phase_guidance(phase)
    methods = incorporation_methods(phase)
    return {
        "condition_focus": list(conditions),
        "cuisine_style": cuisine_name,
        "menstrual_phase": phase_data["name"],
        "cycle_specific_recommendations": {
            "phase": phase_data["name"],
            "seed_cycling": list(phase_data["seed_cycling"]),
            "hormone_support_foods": list(phase_data["supporting_foods"]),
            "phase_benefits": list(phase_data["benefits"]),
        },
        "breakfast": _meal_shape("15 minutes"),
        "lunch": _meal_shape("20 minutes"),
        "dinner": _meal_shape("25 minutes"),
        "snacks": [_meal_shape("5 minutes", focus_count=1)],
        "daily_guidelines": {
            "foods_to_emphasize": ["food1", "food2"],
            "foods_to_limit": ["food1", "food2"],
            "hydration_tips": ["tip1", "tip2"],
            "timing_recommendations": ["timing1", "timing2"],
            "cycle_support": methods["lazy"] + methods["tasty"] + methods["healthy"],
        },
    }


def _listing(values: Sequence[str], empty: str) -> str:
    return ", ".join(values) if values else empty


def format_feedback_context(feedback: FeedbackInput, adaptations: Sequence[str]) -> str:
    """Structured summary of yesterday's feedback for the prompt."""
    if feedback.followed_plan is None:
        followed = "Not specified"
    else:
        followed = "Yes" if feedback.followed_plan else "No"

    def rating(value: Optional[int]) -> str:
        return f"{value}/5" if value is not None else "Not rated"

    lines = [
        "PREVIOUS DAY FEEDBACK (adapt based on this):",
        f"- Followed plan: {followed}",
        f"- Enjoyed meals: {_listing(feedback.enjoyed_meals, 'None specified')}",
        f"- Disliked meals: {_listing(feedback.disliked_meals, 'None')}",
        f"- Energy level: {rating(feedback.energy_level)}",
        f"- Digestive health: {rating(feedback.digestive_health)}",
        f"- Mood: {rating(feedback.mood_rating)}",
        f"- Additional feedback: {feedback.feedback or 'None'}",
    ]
    if adaptations:
        lines.append("")
        lines.append(f"ADAPTATIONS TO MAKE: {', '.join(adaptations)}")
    return "\n".join(lines)


def build_meal_plan_prompt(
    conditions: Sequence[str],
    phase,
    profile: HealthProfile,
    cuisine: Optional[str] = None,
    previous_feedback: Optional[FeedbackInput] = None,
    adaptations: Optional[List[str]] = None,
) -> MealPlanPrompt:
    """Build the instruction and the required response shape.

    Args:
        conditions: Condition tags from the extractor; unknown tags are
            listed but add no guidance.
        phase: The resolved `CyclePhase`.
        profile: Normalized user profile.
        cuisine: Cuisine preference; unknown values mean Mediterranean.
        previous_feedback: Yesterday's feedback, if any.
        adaptations: Adaptation strings derived from that feedback.
    """
    cuisine_profile = get_cuisine_profile(cuisine)
    phase_data = get_phase_guidance(phase)
    methods = incorporation_methods(phase)
    guidance = merge_condition_guidance(conditions)
    shape = build_response_shape(conditions, cuisine_profile["name"], phase)

    sections = [
        "You are an expert nutritionist specializing in women's health conditions. "
        "Create a personalized daily meal plan with menstrual cycle phase-specific recommendations.",
        "",
        f"HEALTH CONDITIONS: {', '.join(conditions)}",
        f"CUISINE PREFERENCE: {cuisine_profile['name']}",
        f"DIETARY FOCUS: {_listing(guidance['dietary_focus'], 'balanced whole-food nutrition')}",
        "",
        f"MENSTRUAL CYCLE PHASE: {phase_data['name']} (days {phase_data['days']})",
        f"- Nutritional focus: {phase_data['focus']}",
        f"- Foods to limit this phase: {phase_data['avoid']}",
        f"PHASE-SPECIFIC SEED CYCLING: {', '.join(phase_data['seed_cycling'])}",
        f"HORMONE SUPPORT: {', '.join(phase_data['supporting_foods'])}",
        f"PHASE BENEFITS: {' | '.join(phase_data['benefits'])}",
        "",
        "SEED CYCLING INCORPORATION METHODS:",
        f"- Lazy: {' | '.join(methods['lazy'])}",
        f"- Tasty: {' | '.join(methods['tasty'])}",
        f"- Healthy: {' | '.join(methods['healthy'])}",
        "",
        f"FOODS TO EMPHASIZE: {', '.join(guidance['foods_to_include'] + list(phase_data['supporting_foods']))}",
        f"FOODS TO AVOID/LIMIT: {_listing(guidance['foods_to_avoid'], 'highly processed foods')}",
        f"MEAL TIMING: {_listing(guidance['meal_timing_considerations'], 'regular meals')}",
        "",
        "CUISINE ELEMENTS TO INCLUDE:",
        f"- Common ingredients: {', '.join(cuisine_profile['common_ingredients'])}",
        f"- Cooking methods: {', '.join(cuisine_profile['cooking_methods'])}",
        f"- Healthy adaptations: {', '.join(cuisine_profile['healthy_adaptations'])}",
        "",
        "USER PROFILE:",
        f"- Age: {profile.age or 'Not specified'}",
        f"- Diet type: {profile.diet or 'omnivore'}",
        f"- Current symptoms: {_listing(profile.symptoms, 'None')}",
        f"- Health goals: {_listing(profile.goals, 'General wellness')}",
        f"- Allergies (never include): {_listing(profile.allergies, 'None')}",
    ]

    if previous_feedback is not None:
        sections.extend(["", format_feedback_context(previous_feedback, adaptations or [])])

    sections.extend([
        "",
        "Create a complete daily meal plan that is:",
        "1. Therapeutically appropriate for the health conditions",
        "2. Includes menstrual cycle phase-specific seed cycling recommendations",
        f"3. Culturally authentic to {cuisine_profile['name']} cuisine",
        "4. Practical and accessible",
        "5. Nutritionally balanced",
        "",
        "CRITICAL: Respond with ONLY valid JSON, no markdown formatting, no explanations. "
        "Use this exact format:",
        "",
        json.dumps(shape, ensure_ascii=False),
    ])
    return MealPlanPrompt(instruction="\n".join(sections), response_shape=shape)
