"""Static nutrition guidance keyed by condition tag, cycle phase and cuisine.

These tables are read-only reference data. Access them through
`services.guidance`, which handles unknown keys.
"""

HEALTH_CONDITIONS = {
    "pcos": {
        "name": "PCOS (Polycystic Ovary Syndrome)",
        "dietary_focus": ["insulin_sensitivity", "anti_inflammatory", "hormone_balance"],
        "foods_to_include": [
            "low_glycemic_carbs", "lean_proteins", "omega3_fats", "fiber_rich_foods",
            "anti_inflammatory_spices", "chromium_rich_foods", "spearmint_tea",
        ],
        "foods_to_avoid": [
            "refined_sugars", "processed_foods", "high_glycemic_carbs",
            "trans_fats", "excessive_dairy", "inflammatory_oils",
        ],
        "meal_timing_considerations": [
            "eat_protein_with_carbs", "smaller_frequent_meals", "avoid_skipping_breakfast",
            "limit_late_night_eating",
        ],
    },
    "endometriosis": {
        "name": "Endometriosis",
        "dietary_focus": ["anti_inflammatory", "estrogen_balance", "pain_management"],
        "foods_to_include": [
            "omega3_fatty_acids", "antioxidant_rich_foods", "cruciferous_vegetables",
            "turmeric", "ginger", "green_tea", "fiber_rich_foods",
        ],
        "foods_to_avoid": [
            "red_meat", "processed_foods", "caffeine_excess", "alcohol",
            "high_fat_dairy", "refined_sugars", "gluten_potentially",
        ],
        "meal_timing_considerations": [
            "regular_meal_times", "avoid_inflammatory_foods_during_cycle",
        ],
    },
    "thyroid_hypo": {
        "name": "Hypothyroidism",
        "dietary_focus": ["thyroid_support", "metabolism_boost", "nutrient_density"],
        "foods_to_include": [
            "iodine_rich_foods", "selenium_sources", "zinc_foods", "vitamin_d_foods",
            "lean_proteins", "complex_carbs", "brazil_nuts",
        ],
        "foods_to_avoid": [
            "excessive_soy", "raw_cruciferous_excess", "gluten_potentially",
            "processed_foods", "excess_fiber_with_meds",
        ],
        "meal_timing_considerations": [
            "take_meds_empty_stomach", "wait_before_eating", "consistent_meal_times",
        ],
    },
    "stress_adrenal": {
        "name": "Chronic Stress & Adrenal Support",
        "dietary_focus": ["cortisol_regulation", "blood_sugar_stability", "nervous_system_support"],
        "foods_to_include": [
            "adaptogenic_herbs", "magnesium_rich_foods", "b_vitamin_sources",
            "complex_carbs", "healthy_fats", "protein_each_meal",
        ],
        "foods_to_avoid": [
            "caffeine_excess", "refined_sugars", "alcohol", "processed_foods",
            "skipping_meals", "inflammatory_foods",
        ],
        "meal_timing_considerations": [
            "eat_within_hour_of_waking", "protein_rich_breakfast", "regular_intervals",
        ],
    },
}

# Seed cycling: flax + pumpkin for the first half of the cycle, sesame +
# sunflower for the second. The three incorporation styles are
# convenience-first (lazy), flavor-first (tasty) and efficacy-first (healthy).
CYCLE_PHASES = {
    "menstrual": {
        "name": "Menstrual Phase",
        "days": "1-5",
        "description": "Rest and renewal - Support iron replenishment and comfort",
        "seed_cycling": ["Ground flax seeds (1-2 tbsp daily)", "Raw pumpkin seeds (1 oz daily)"],
        "supporting_foods": ["Iron-rich leafy greens", "Warming ginger and turmeric", "Dark chocolate", "Red meat or lentils"],
        "benefits": ["Replenish iron stores", "Reduce menstrual cramps", "Support hormone detoxification", "Combat fatigue"],
        "focus": "Iron-rich foods, warming spices, comfort foods, anti-inflammatory ingredients",
        "avoid": "Cold foods, excessive caffeine, refined sugars",
        "lazy_incorporation": ["Sprinkle ground flax on cereal", "Grab handful of pumpkin seeds as snack", "Add flax to store-bought smoothies"],
        "tasty_incorporation": ["Chocolate flax energy balls", "Spiced pumpkin seed granola", "Flax banana bread"],
        "healthy_incorporation": ["Fresh ground flax daily (store in fridge)", "Soak pumpkin seeds overnight", "Take with vitamin C for iron absorption"],
    },
    "follicular": {
        "name": "Follicular Phase",
        "days": "6-13",
        "description": "Energy building - Support estrogen with lignans and healthy fats",
        "seed_cycling": ["Ground flax seeds (1-2 tbsp daily)", "Raw pumpkin seeds (1-2 oz daily)"],
        "supporting_foods": ["Fresh vegetables", "Lean proteins", "Sprouted foods", "Citrus fruits", "Fermented foods"],
        "benefits": ["Support healthy estrogen levels", "Boost energy and mood", "Enhance metabolism", "Improve skin health"],
        "focus": "Fresh vegetables, light proteins, energizing foods, liver-supporting ingredients",
        "avoid": "Heavy, greasy foods, excess dairy",
        "lazy_incorporation": ["Buy pre-ground flax from health store", "Keep roasted pumpkin seeds in purse", "Add to existing meals without prep"],
        "tasty_incorporation": ["Pumpkin seed pesto pasta", "Flax crusted chicken", "Green goddess salad with pumpkin seeds"],
        "healthy_incorporation": ["Grind flax fresh daily for maximum lignans", "Combine with healthy fats", "Track energy improvements"],
    },
    "ovulatory": {
        "name": "Ovulatory Phase",
        "days": "14-16",
        "description": "Peak energy - Support ovulation with zinc and vitamin E",
        "seed_cycling": ["Raw sesame seeds/tahini (1-2 tbsp daily)", "Raw sunflower seeds (1-2 oz daily)"],
        "supporting_foods": ["Antioxidant berries", "Leafy greens", "Avocados", "Wild-caught fish", "Colorful vegetables"],
        "benefits": ["Support healthy ovulation", "Maintain peak energy", "Enhance fertility", "Reduce inflammation"],
        "focus": "Antioxidant-rich foods, zinc sources, healthy fats, colorful vegetables",
        "avoid": "Inflammatory foods, excess alcohol",
        "lazy_incorporation": ["Tahini on toast or fruit", "Sunflower seed butter as snack", "Pre-made sesame seed bars"],
        "tasty_incorporation": ["Sesame crusted salmon", "Tahini chocolate truffles", "Sunflower seed brittle"],
        "healthy_incorporation": ["Raw unhulled sesame seeds", "Soak sunflower seeds for digestion", "Combine with zinc-rich foods"],
    },
    "luteal": {
        "name": "Luteal Phase",
        "days": "17-28",
        "description": "Preparation - Support progesterone and reduce PMS symptoms",
        "seed_cycling": ["Raw sesame seeds/tahini (1-2 tbsp daily)", "Raw sunflower seeds (1-2 oz daily)"],
        "supporting_foods": ["Complex carbs like sweet potato", "Magnesium-rich dark chocolate", "B-vitamin nutritional yeast", "Calming chamomile tea"],
        "benefits": ["Support progesterone production", "Reduce PMS and bloating", "Stabilize mood and cravings", "Improve sleep quality"],
        "focus": "Magnesium-rich foods, complex carbs, mood-supporting nutrients, B-vitamins",
        "avoid": "Caffeine excess, high sodium foods",
        "lazy_incorporation": ["Tahini packets for on-the-go", "Sunflower seed trail mix", "Ready-made sesame energy bars"],
        "tasty_incorporation": ["Sesame halva for sweet cravings", "Sunflower banana bread", "Tahini date balls"],
        "healthy_incorporation": ["Increase seeds to 2 tbsp/2 oz this phase", "Pair with magnesium foods", "Track PMS improvements over 3 months"],
    },
}

PHASE_MESSAGES = {
    "menstrual": "Nourishing your body during menstruation with iron-rich, comforting foods",
    "follicular": "Supporting your body's renewal phase with fresh, energizing nutrition",
    "ovulatory": "Optimizing your peak energy phase with antioxidant-rich, vibrant foods",
    "luteal": "Balancing your pre-menstrual phase with mood-supporting, satisfying meals",
}

CUISINE_PROFILES = {
    "indian": {
        "name": "Indian",
        "common_ingredients": [
            "turmeric", "cumin", "coriander", "ginger", "garlic", "cardamom",
            "lentils", "chickpeas", "yogurt", "ghee", "coconut",
        ],
        "cooking_methods": ["tempering", "slow_cooking", "steaming", "roasting"],
        "staple_foods": ["rice", "roti", "dal", "vegetables", "paneer"],
        "healthy_adaptations": [
            "use_brown_rice", "reduce_oil", "increase_vegetables", "use_greek_yogurt",
            "add_more_spices", "include_millets",
        ],
    },
    "mediterranean": {
        "name": "Mediterranean",
        "common_ingredients": [
            "olive_oil", "tomatoes", "garlic", "herbs", "lemon", "olives",
            "fish", "nuts", "seeds", "whole_grains",
        ],
        "cooking_methods": ["grilling", "roasting", "sautéing", "steaming"],
        "staple_foods": ["fish", "vegetables", "legumes", "whole_grains", "fruits"],
        "healthy_adaptations": [
            "emphasize_fish", "use_extra_virgin_olive_oil", "increase_vegetables",
            "choose_whole_grains", "add_nuts_seeds",
        ],
    },
    "japanese": {
        "name": "Japanese",
        "common_ingredients": [
            "miso", "seaweed", "fish", "soy", "rice", "vegetables",
            "mushrooms", "green_tea", "sesame", "ginger",
        ],
        "cooking_methods": ["steaming", "grilling", "simmering", "fermenting"],
        "staple_foods": ["rice", "fish", "vegetables", "miso_soup", "tofu"],
        "healthy_adaptations": [
            "use_brown_rice", "increase_vegetables", "moderate_sodium",
            "emphasize_omega3_fish", "add_fermented_foods",
        ],
    },
    "mexican": {
        "name": "Mexican",
        "common_ingredients": [
            "beans", "corn", "tomatoes", "peppers", "cilantro", "lime",
            "avocado", "onions", "garlic", "cumin", "chili",
        ],
        "cooking_methods": ["grilling", "roasting", "sautéing", "steaming"],
        "staple_foods": ["beans", "corn", "vegetables", "lean_proteins", "avocado"],
        "healthy_adaptations": [
            "use_whole_grain_tortillas", "increase_vegetables", "use_lean_proteins",
            "add_more_beans", "reduce_cheese", "increase_herbs_spices",
        ],
    },
    "american": {
        "name": "American",
        "common_ingredients": [
            "lean_meats", "poultry", "fish", "eggs", "dairy", "whole_grains",
            "vegetables", "fruits", "nuts", "seeds", "herbs",
        ],
        "cooking_methods": ["grilling", "baking", "roasting", "steaming", "sautéing"],
        "staple_foods": ["lean_proteins", "whole_grains", "vegetables", "fruits", "healthy_fats"],
        "healthy_adaptations": [
            "choose_grass_fed_meats", "use_organic_produce", "whole_grain_alternatives",
            "increase_plant_proteins", "reduce_processed_foods", "emphasize_local_seasonal",
        ],
    },
}

DEFAULT_CUISINE = "mediterranean"
