"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.base import CamelModel
from domain.schemas.meal_schemas import (
    IngredientCreate,
    IngredientResponse,
    MealCreate,
    MealResponse,
)
from domain.schemas.template_schemas import (
    IngredientTemplateCreate,
    IngredientTemplateResponse,
    MealTemplateIngredientLink,
    MealTemplateCreate,
    MealTemplateIngredientResponse,
    MealTemplateResponse,
)
from domain.schemas.target_schemas import (
    MacroRange,
    DailyTargetsCreate,
    DailyTargetsResponse,
    MacroTotals,
    MacroProgress,
    DailyProgressResponse,
)

__all__ = [
    "CamelModel",
    # Meal schemas
    "IngredientCreate",
    "IngredientResponse",
    "MealCreate",
    "MealResponse",
    # Template schemas
    "IngredientTemplateCreate",
    "IngredientTemplateResponse",
    "MealTemplateIngredientLink",
    "MealTemplateCreate",
    "MealTemplateIngredientResponse",
    "MealTemplateResponse",
    # Target schemas
    "MacroRange",
    "DailyTargetsCreate",
    "DailyTargetsResponse",
    "MacroTotals",
    "MacroProgress",
    "DailyProgressResponse",
]
