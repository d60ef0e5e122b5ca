"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.meal_repository import MealRepository
from repositories.meal_template_repository import MealTemplateRepository
from repositories.ingredient_repository import IngredientRepository
from repositories.ingredient_template_repository import IngredientTemplateRepository
from repositories.daily_targets_repository import DailyTargetsRepository

__all__ = [
    "BaseRepository",
    "MealRepository",
    "MealTemplateRepository",
    "IngredientRepository",
    "IngredientTemplateRepository",
    "DailyTargetsRepository",
]
