"""Group plan ingredients into grocery categories.

Categorization is a first-match keyword lookup and is only advisory;
anything unmatched goes to a catch-all bucket. Each ingredient ends up in
exactly one category, duplicates collapsed, first-seen order kept.
"""

from typing import Dict, Iterable, List

CATEGORY_KEYWORDS = [
    ("proteins", ("chicken", "fish", "salmon", "eggs", "tofu", "beans", "lentils", "chickpeas", "turkey", "tempeh")),
    ("vegetables", ("lettuce", "spinach", "broccoli", "carrot", "onion", "tomato", "kale", "zucchini",
                    "pepper", "cucumber", "cauliflower", "celery", "sweet potato", "vegetable")),
    ("fruits", ("berry", "berries", "apple", "banana", "citrus", "orange", "lemon", "lime", "dates", "avocado")),
    ("grains", ("rice", "quinoa", "oats", "bread", "cereal", "millet", "tortilla", "pasta")),
    ("dairy", ("milk", "yogurt", "cheese", "feta", "paneer", "ghee")),
    ("pantry", ("oil", "vinegar", "seeds", "nuts", "almonds", "walnuts", "honey", "tahini", "broth", "chocolate")),
]

CATEGORIES = [name for name, _ in CATEGORY_KEYWORDS] + ["herbs_spices"]


def categorize_ingredient(ingredient: str, catch_all: str = "herbs_spices") -> str:
    lowered = ingredient.lower()
    for category, keywords in CATEGORY_KEYWORDS:
        if any(k in lowered for k in keywords):
            return category
    return catch_all


def build_shopping_list(ingredients: Iterable[str], catch_all: str = "herbs_spices") -> Dict[str, List[str]]:
    """Partition ingredient strings into the fixed category buckets."""
    shopping_list = {category: [] for category in CATEGORIES}
    if catch_all not in shopping_list:
        shopping_list[catch_all] = []
    for ingredient in ingredients:
        bucket = shopping_list[categorize_ingredient(ingredient, catch_all)]
        if ingredient not in bucket:
            bucket.append(ingredient)
    return shopping_list


def plan_ingredients(plan) -> List[str]:
    """Ingredients of breakfast, lunch, dinner and snacks, in that order.

    Accepts anything exposing those attributes (`GeneratedMealPlan`,
    `TodaysMealPlan`).
    """
    meals = [plan.breakfast, plan.lunch, plan.dinner] + list(plan.snacks or [])
    return [ingredient for meal in meals for ingredient in meal.ingredients]


def merge_shopping_lists(lists: Iterable[Dict[str, List[str]]]) -> Dict[str, List[str]]:
    """Consolidate several category lists, deduplicating per category."""
    merged = {category: [] for category in CATEGORIES}
    for shopping_list in lists:
        for category, items in shopping_list.items():
            bucket = merged.setdefault(category, [])
            for item in items:
                if item not in bucket:
                    bucket.append(item)
    return merged
