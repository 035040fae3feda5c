"""Tests for grouping ingredients into grocery categories."""
import pytest

from schemas.meal_plan_schema import GeneratedMealPlan
from services.shopping_list import (
    CATEGORIES,
    build_shopping_list,
    categorize_ingredient,
    merge_shopping_lists,
    plan_ingredients,
)


def test_every_ingredient_lands_in_exactly_one_category():
    ingredients = ["salmon", "spinach", "blueberries", "quinoa", "greek yogurt", "olive oil", "oregano", "za'atar"]
    shopping_list = build_shopping_list(ingredients)

    assert list(shopping_list) == CATEGORIES
    flattened = [item for items in shopping_list.values() for item in items]
    assert sorted(flattened) == sorted(ingredients)


def test_first_matching_category_wins():
    # "chickpeas" is a protein even though nothing else would claim it
    assert categorize_ingredient("Roasted chickpeas") == "proteins"
    # "almond milk" hits dairy ("milk") before pantry ("almonds")
    assert categorize_ingredient("almond milk") == "dairy"


def test_unmatched_ingredients_go_to_catch_all():
    assert build_shopping_list(["sumac"])["herbs_spices"] == ["sumac"]
    custom = build_shopping_list(["sumac"], catch_all="other")
    assert custom["other"] == ["sumac"]
    assert custom["herbs_spices"] == []


def test_duplicates_collapse_keeping_first_seen_order():
    shopping_list = build_shopping_list(["kale", "carrot", "kale", "broccoli", "carrot"])
    assert shopping_list["vegetables"] == ["kale", "carrot", "broccoli"]


def test_plan_ingredients_and_weekly_merge(sample_plan):
    plan = GeneratedMealPlan.model_validate(sample_plan)
    ingredients = plan_ingredients(plan)
    assert ingredients[:3] == ["greek yogurt", "blueberries", "flax seeds"]
    assert ingredients[-2:] == ["apple", "almonds"]

    daily = build_shopping_list(ingredients)
    merged = merge_shopping_lists([daily] * 7)
    assert merged == daily


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
