"""Static lookup tables for food search and exercise suggestions."""

from fitness_tracker.domain.food import FoodSearchResult

_FOODS: dict[str, FoodSearchResult] = {
    "apple": FoodSearchResult("Apple (medium)", 95, 0.5, 25, 0.3),
    "banana": FoodSearchResult("Banana (medium)", 105, 1.3, 27, 0.4),
    "chicken": FoodSearchResult("Chicken Breast (100g)", 165, 31, 0, 3.6),
    "rice": FoodSearchResult("White Rice (1 cup cooked)", 205, 4.3, 45, 0.4),
    "broccoli": FoodSearchResult("Broccoli (1 cup)", 25, 3, 5, 0.3),
    "egg": FoodSearchResult("Egg (large)", 70, 6, 0.6, 5),
    "salmon": FoodSearchResult("Salmon (100g)", 208, 22, 0, 13),
    "oatmeal": FoodSearchResult("Oatmeal (1 cup cooked)", 154, 6, 28, 3),
    "avocado": FoodSearchResult("Avocado (half)", 160, 2, 9, 15),
    "yogurt": FoodSearchResult("Greek Yogurt (1 cup)", 130, 23, 9, 0),
}

_EXERCISES_BY_BODY_PART: dict[str, list[str]] = {
    "chest": ["Push-ups", "Bench Press", "Dumbbell Flyes", "Incline Press", "Dips"],
    "back": ["Pull-ups", "Rows", "Lat Pulldown", "Deadlifts", "Face Pulls"],
    "shoulders": [
        "Shoulder Press",
        "Lateral Raises",
        "Front Raises",
        "Rear Delt Flyes",
        "Shrugs",
    ],
    "arms": [
        "Bicep Curls",
        "Tricep Extensions",
        "Hammer Curls",
        "Tricep Dips",
        "Preacher Curls",
    ],
    "legs": ["Squats", "Lunges", "Leg Press", "Calf Raises", "Leg Curls"],
    "core": ["Planks", "Crunches", "Russian Twists", "Mountain Climbers", "Dead Bugs"],
}

_EXERCISES_BY_KEYWORD: dict[str, list[str]] = {
    "push": ["Push-ups", "Push Press", "Chest Press"],
    "pull": ["Pull-ups", "Cable Pulls", "Face Pulls"],
    "squat": ["Squats", "Goblet Squats", "Jump Squats"],
}

ESTIMATED_CALORIES = 150
ESTIMATED_PROTEIN_G = 5
ESTIMATED_CARBS_G = 20
ESTIMATED_FAT_G = 6


def search_foods(query: str, limit: int = 5) -> list[FoodSearchResult]:
    """Match foods by key or name; unknown foods get a generic estimate."""
    cleaned = query.strip()
    if not cleaned:
        return []
    needle = cleaned.lower()
    results = [
        food
        for key, food in _FOODS.items()
        if needle in key or needle in food.name.lower()
    ]
    if not results:
        results.append(
            FoodSearchResult(
                name=f"{cleaned} (estimated)",
                calories=ESTIMATED_CALORIES,
                protein=ESTIMATED_PROTEIN_G,
                carbs=ESTIMATED_CARBS_G,
                fat=ESTIMATED_FAT_G,
            )
        )
    return results[:limit]


def suggest_exercises(text: str, limit: int = 5) -> list[str]:
    """Suggest exercise names for a body part, exercise or movement keyword."""
    needle = text.strip().lower()
    if not needle:
        return []
    suggestions: list[str] = []
    for body_part, exercises in _EXERCISES_BY_BODY_PART.items():
        if body_part in needle or any(
            needle in exercise.lower() for exercise in exercises
        ):
            suggestions.extend(exercises)
    for keyword, exercises in _EXERCISES_BY_KEYWORD.items():
        if keyword in needle:
            suggestions.extend(exercises)
    return list(dict.fromkeys(suggestions))[:limit]
