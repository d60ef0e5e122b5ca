"""API routes package"""

from . import (
    health,
    meals,
    ingredients,
    ingredient_templates,
    meal_templates,
    daily_targets,
)

__all__ = [
    "health",
    "meals",
    "ingredients",
    "ingredient_templates",
    "meal_templates",
    "daily_targets",
]
