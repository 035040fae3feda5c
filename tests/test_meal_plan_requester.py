"""Tests for parsing generator output and falling back on failure."""
import json

import pytest

from core.exceptions import GenerationError
from schemas.profile_schema import HealthProfile
from services.cycle_phase import CyclePhase
from services.meal_plan_requester import (
    MealPlanRequester,
    clean_response,
    daily_fallback_plan,
    fallback_plan,
    parse_meal_plan,
)
from services.prompt_builder import build_meal_plan_prompt


@pytest.fixture
def prompt():
    return build_meal_plan_prompt(["pcos"], CyclePhase.FOLLICULAR, HealthProfile(), "indian")


def test_parses_fenced_json_with_stray_tags(sample_plan):
    raw = "<think>planning</think>\n```json\n" + json.dumps(sample_plan) + "\n```\nEnjoy!"
    plan = parse_meal_plan(raw)
    assert plan.breakfast.name == "Greek Yogurt Bowl"
    assert plan.daily_guidelines.foods_to_emphasize == ["leafy greens"]


def test_clean_response_keeps_outer_braces():
    assert clean_response('Sure! {"a": {"b": 1}} hope that helps') == '{"a": {"b": 1}}'


def test_angle_brackets_inside_values_are_preserved(sample_plan):
    sample_plan["daily_guidelines"]["foods_to_limit"] = ["sodium <2300mg"]
    sample_plan["daily_guidelines"]["hydration_tips"] = ["drink >2L water"]
    plan = parse_meal_plan(json.dumps(sample_plan))
    assert plan.daily_guidelines.foods_to_limit == ["sodium <2300mg"]
    assert plan.daily_guidelines.hydration_tips == ["drink >2L water"]


def test_tagged_draft_is_skipped_by_permissive_retry(sample_plan):
    # the draft's brace makes the first `{` .. last `}` span invalid
    raw = '<think>draft {"breakfast": </think>\n' + json.dumps(sample_plan)
    with pytest.raises(json.JSONDecodeError):
        json.loads(clean_response(raw))
    plan = parse_meal_plan(raw)
    assert plan.breakfast.name == "Greek Yogurt Bowl"


@pytest.mark.parametrize("raw", [
    "",
    "no json here",
    "{not valid json}",
    "[1, 2, 3]",
    json.dumps({"breakfast": {"name": "Toast"}}),
])
def test_invalid_output_raises_generation_error(raw):
    with pytest.raises(GenerationError):
        parse_meal_plan(raw)


def test_meal_without_ingredients_fails_validation(sample_plan):
    sample_plan["lunch"]["ingredients"] = []
    with pytest.raises(GenerationError):
        parse_meal_plan(json.dumps(sample_plan))


def test_generator_failure_returns_cuisine_fallback(failing_generator, prompt):
    plan = MealPlanRequester(failing_generator).request_or_fallback(prompt, "indian", ["pcos"])
    assert plan.cuisine_style == "Indian"
    assert plan.condition_focus == ["pcos"]


def test_cuisine_without_fallback_gets_mediterranean(failing_generator, prompt):
    plan = MealPlanRequester(failing_generator).request_or_fallback(prompt, "japanese")
    assert plan.cuisine_style == "Mediterranean"


def test_fallback_is_identical_across_calls():
    assert fallback_plan("indian", ["pcos"]) == fallback_plan("indian", ["pcos"])
    first = daily_fallback_plan()
    first.snacks.clear()
    assert daily_fallback_plan().snacks, "fallback templates must not be shared between calls"


def test_successful_generation_passes_prompt_through(fake_generator, prompt):
    plan = MealPlanRequester(fake_generator).request_or_fallback(prompt, "indian")
    assert plan.lunch.name == "Chickpea Salad"
    assert fake_generator.prompts == [prompt.instruction]


def test_daily_request_reports_failure_as_none(failing_generator, prompt):
    assert MealPlanRequester(failing_generator).request_daily(prompt) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
