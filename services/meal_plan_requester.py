"""Turn a prompt into a validated meal plan, or a static fallback.

The requester owns the whole "generate" step: it calls the text generator,
cleans up whatever comes back, validates it against `GeneratedMealPlan` and
absorbs every failure by returning the matching hand-authored plan.
"""

import copy
import json
import re
from typing import Optional, Protocol, Sequence

from pydantic import ValidationError as PydanticValidationError

from core.exceptions import GenerationError
from core.logger import get_logger
from data.fallback_plans import CUISINE_FALLBACK_PLANS, DAILY_FALLBACK
from schemas.meal_plan_schema import GeneratedMealPlan
from services.guidance import normalize_cuisine
from services.prompt_builder import MealPlanPrompt

logger = get_logger("services.meal_plan_requester")

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)
_TAG_BLOCK_RE = re.compile(r"<(\w+)[^<>]*>[\s\S]*?</\1>")
_TAG_RE = re.compile(r"<[^<>]*>")
_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


class TextGenerator(Protocol):
    def complete_json(self, prompt: str, temperature: Optional[float] = None, role: str = "system") -> str:
        ...


def clean_response(raw: str) -> str:
    """Strip code fences and keep the first `{` .. last `}` span.

    Text inside the span is left alone, so `<` and `>` in string values
    survive; anything around the span (prose, stray tags) is dropped.
    """
    text = _FENCE_RE.sub("", raw).strip()
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        return text
    return text[start:end + 1]


def strip_tags(raw: str) -> str:
    """Remove `<tag>...</tag>` blocks, then any remaining stray tags."""
    text = _TAG_BLOCK_RE.sub("", raw)
    return _TAG_RE.sub("", text)


def parse_json_object(raw: str) -> dict:
    """Parse a JSON object out of generator output.

    Raises:
        GenerationError: If neither the cleaned text nor the outermost
            `{...}` of the tag-stripped raw text parses to an object.
    """
    try:
        parsed = json.loads(clean_response(raw))
    except json.JSONDecodeError:
        match = _OBJECT_RE.search(strip_tags(raw))
        if match is None:
            raise GenerationError("No JSON object found in generated text")
        try:
            parsed = json.loads(match.group(0))
        except json.JSONDecodeError as exc:
            raise GenerationError("Generated text is not valid JSON", cause=exc) from exc

    if not isinstance(parsed, dict):
        raise GenerationError("Generated JSON is not an object")
    return parsed


def parse_meal_plan(raw: str) -> GeneratedMealPlan:
    """Parse and validate generator output as a `GeneratedMealPlan`."""
    data = parse_json_object(raw)
    try:
        return GeneratedMealPlan.model_validate(data)
    except PydanticValidationError as exc:
        raise GenerationError(f"Generated meal plan failed validation: {exc.error_count()} errors", cause=exc) from exc


def fallback_plan(cuisine: Optional[str], conditions: Sequence[str] = ()) -> GeneratedMealPlan:
    """The hand-authored plan for `cuisine` (Mediterranean when there is none)."""
    key = normalize_cuisine(cuisine)
    template = CUISINE_FALLBACK_PLANS.get(key, CUISINE_FALLBACK_PLANS["mediterranean"])
    data = copy.deepcopy(template)
    data["condition_focus"] = list(conditions)
    return GeneratedMealPlan.model_validate(data)


def daily_fallback_plan() -> GeneratedMealPlan:
    """The menstrual-phase default served by the daily planner."""
    return GeneratedMealPlan.model_validate(copy.deepcopy(DAILY_FALLBACK))


class MealPlanRequester:
    """Run a `MealPlanPrompt` through the text generator."""

    def __init__(self, generator: TextGenerator):
        self.generator = generator

    def request(self, prompt: MealPlanPrompt) -> GeneratedMealPlan:
        """Generate and validate one plan. Raises `GenerationError`."""
        raw = self.generator.complete_json(prompt.instruction)
        return parse_meal_plan(raw)

    def request_or_fallback(
        self,
        prompt: MealPlanPrompt,
        cuisine: Optional[str],
        conditions: Sequence[str] = (),
    ) -> GeneratedMealPlan:
        try:
            plan = self.request(prompt)
        except GenerationError as exc:
            logger.warning("Meal plan generation failed, serving %s fallback: %s", normalize_cuisine(cuisine), exc)
            return fallback_plan(cuisine, conditions)
        logger.info("Generated %s meal plan", plan.cuisine_style or normalize_cuisine(cuisine))
        return plan

    def request_daily(self, prompt: MealPlanPrompt) -> Optional[GeneratedMealPlan]:
        """Generate a daily plan, returning None when generation fails.

        The daily planner needs to know whether it is serving the fallback
        (fallback plans carry no adaptations), so the failure is reported as
        None instead of being replaced here.
        """
        try:
            return self.request(prompt)
        except GenerationError as exc:
            logger.warning("Daily meal plan generation failed, serving default plan: %s", exc)
            return None
