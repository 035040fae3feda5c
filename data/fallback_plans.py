"""Hand-authored meal plans served when generation fails.

Keyed by cuisine; anything without its own entry gets the Mediterranean
plan. `DAILY_FALLBACK` is the menstrual-phase default used by the daily
adaptive planner regardless of the resolved phase.
"""

CUISINE_FALLBACK_PLANS = {
    "indian": {
        "cuisine_style": "Indian",
        "breakfast": {
            "name": "Turmeric Golden Milk Oats",
            "ingredients": ["steel cut oats", "turmeric", "ginger", "coconut milk", "almonds", "cinnamon"],
            "preparation_time": "10 minutes",
            "cooking_method": "simmering",
            "nutritional_focus": ["anti_inflammatory", "fiber_rich", "protein"],
            "health_benefits": ["Reduces inflammation", "Supports digestion", "Provides sustained energy"],
            "cultural_authenticity": "Traditional Indian spices like turmeric and ginger with modern breakfast format",
        },
        "lunch": {
            "name": "Quinoa Dal with Vegetables",
            "ingredients": ["quinoa", "red lentils", "spinach", "tomatoes", "cumin", "turmeric", "ghee"],
            "preparation_time": "25 minutes",
            "cooking_method": "pressure cooking",
            "nutritional_focus": ["complete_protein", "iron_rich", "low_glycemic"],
            "health_benefits": ["Complete amino acid profile", "High in iron and folate", "Supports blood sugar stability"],
            "cultural_authenticity": "Classic dal preparation with protein-rich quinoa adaptation",
        },
        "dinner": {
            "name": "Grilled Fish with Coconut Curry",
            "ingredients": ["salmon", "coconut milk", "curry leaves", "mustard seeds", "green chilies", "cauliflower"],
            "preparation_time": "20 minutes",
            "cooking_method": "grilling and simmering",
            "nutritional_focus": ["omega3_fatty_acids", "anti_inflammatory", "low_carb"],
            "health_benefits": ["Rich in omega-3s", "Supports heart health", "Anti-inflammatory properties"],
            "cultural_authenticity": "South Indian coconut-based curry with therapeutic spices",
        },
        "snacks": [{
            "name": "Spiced Roasted Chickpeas",
            "ingredients": ["chickpeas", "turmeric", "cumin", "chaat masala", "olive oil"],
            "preparation_time": "15 minutes",
            "cooking_method": "roasting",
            "nutritional_focus": ["plant_protein", "fiber"],
            "health_benefits": ["High in protein and fiber", "Supports digestive health"],
            "cultural_authenticity": "Traditional Indian street food adapted for health",
        }],
        "daily_guidelines": {
            "foods_to_emphasize": ["turmeric", "ginger", "lentils", "leafy greens", "coconut"],
            "foods_to_limit": ["refined sugar", "processed foods", "excessive oil"],
            "hydration_tips": ["Drink warm water with lemon", "Include herbal teas", "Coconut water for electrolytes"],
            "timing_recommendations": ["Eat largest meal at lunch", "Light dinner before 7 PM", "Include protein with each meal"],
        },
    },
    "mediterranean": {
        "cuisine_style": "Mediterranean",
        "breakfast": {
            "name": "Greek Yogurt Bowl with Nuts",
            "ingredients": ["Greek yogurt", "walnuts", "berries", "honey", "chia seeds", "cinnamon"],
            "preparation_time": "5 minutes",
            "cooking_method": "assembly",
            "nutritional_focus": ["protein_rich", "omega3", "antioxidants"],
            "health_benefits": ["High in protein", "Rich in omega-3s", "Supports gut health"],
            "cultural_authenticity": "Traditional Greek breakfast with therapeutic additions",
        },
        "lunch": {
            "name": "Mediterranean Quinoa Salad",
            "ingredients": ["quinoa", "olive oil", "tomatoes", "cucumber", "feta", "olives", "herbs"],
            "preparation_time": "15 minutes",
            "cooking_method": "boiling and mixing",
            "nutritional_focus": ["complete_protein", "healthy_fats", "anti_inflammatory"],
            "health_benefits": ["Complete amino acids", "Heart-healthy fats", "Anti-inflammatory"],
            "cultural_authenticity": "Classic Mediterranean flavors with modern super grain",
        },
        "dinner": {
            "name": "Herb-Crusted Salmon with Vegetables",
            "ingredients": ["salmon", "olive oil", "herbs", "zucchini", "bell peppers", "lemon"],
            "preparation_time": "20 minutes",
            "cooking_method": "baking",
            "nutritional_focus": ["omega3_fatty_acids", "lean_protein", "vegetables"],
            "health_benefits": ["Rich in omega-3s", "Supports brain health", "Anti-inflammatory"],
            "cultural_authenticity": "Mediterranean herb preparation with therapeutic focus",
        },
        "snacks": [{
            "name": "Hummus with Vegetables",
            "ingredients": ["chickpeas", "tahini", "olive oil", "lemon", "vegetables"],
            "preparation_time": "10 minutes",
            "cooking_method": "blending",
            "nutritional_focus": ["plant_protein", "fiber", "healthy_fats"],
            "health_benefits": ["High in protein", "Supports digestive health", "Provides sustained energy"],
            "cultural_authenticity": "Traditional Middle Eastern dip with fresh vegetables",
        }],
        "daily_guidelines": {
            "foods_to_emphasize": ["olive oil", "fish", "vegetables", "nuts", "herbs"],
            "foods_to_limit": ["processed foods", "refined sugars", "trans fats"],
            "hydration_tips": ["Drink plenty of water", "Include herbal teas", "Limit caffeine"],
            "timing_recommendations": ["Eat regular meals", "Include healthy fats", "Focus on whole foods"],
        },
    },
}

DAILY_FALLBACK = {
    "breakfast": {
        "name": "Iron-Rich Spinach Smoothie Bowl",
        "ingredients": ["spinach", "banana", "iron-fortified cereal", "almond milk", "pumpkin seeds"],
        "preparation_time": "10 min",
        "cooking_method": "blending",
        "nutritional_focus": ["iron", "vitamin C", "fiber"],
        "health_benefits": ["energy support", "iron absorption", "hormone balance"],
        "cultural_authenticity": "modern",
    },
    "lunch": {
        "name": "Lentil and Vegetable Soup",
        "ingredients": ["red lentils", "carrots", "celery", "onion", "vegetable broth", "turmeric"],
        "preparation_time": "25 min",
        "cooking_method": "simmering",
        "nutritional_focus": ["protein", "iron", "anti-inflammatory"],
        "health_benefits": ["sustained energy", "digestive support", "warmth"],
        "cultural_authenticity": "comfort food",
    },
    "dinner": {
        "name": "Baked Salmon with Sweet Potato",
        "ingredients": ["salmon fillet", "sweet potato", "broccoli", "olive oil", "herbs"],
        "preparation_time": "30 min",
        "cooking_method": "baking",
        "nutritional_focus": ["omega-3", "beta-carotene", "protein"],
        "health_benefits": ["anti-inflammatory", "hormone support", "muscle recovery"],
        "cultural_authenticity": "healthy comfort",
    },
    "snacks": [{
        "name": "Flax Seed Energy Balls",
        "ingredients": ["ground flax seeds", "dates", "almonds", "dark chocolate chips"],
        "preparation_time": "15 min",
        "cooking_method": "no-cook",
        "nutritional_focus": ["omega-3", "fiber", "natural sugars"],
        "health_benefits": ["sustained energy", "hormone support", "satisfaction"],
        "cultural_authenticity": "healthy snack",
    }],
    "daily_guidelines": {
        "foods_to_emphasize": ["Iron-rich leafy greens", "Warming spices", "Anti-inflammatory foods"],
        "foods_to_limit": ["Excessive caffeine", "Refined sugars", "Cold foods"],
        "hydration_tips": ["Warm herbal teas", "Room temperature water", "Bone broth"],
        "timing_recommendations": ["Eat regular meals", "Include protein with each meal", "Light dinner"],
        "cycle_support": ["Ground flax and pumpkin seeds daily", "Gentle movement", "Adequate rest"],
    },
}
