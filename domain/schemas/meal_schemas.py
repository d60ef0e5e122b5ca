import datetime as dt
from typing import List
from pydantic import Field

from domain.enums import MacroUnit
from domain.schemas.base import CamelModel


class IngredientCreate(CamelModel):
    """Ingredient as submitted on its own or inside a meal"""

    name: str
    quantity: float = Field(default=1, description="Portions eaten")
    carbs: float = 0
    fat: float = 0
    protein: float = 0
    kcal: float = 0
    macro_unit: str = Field(
        default=MacroUnit.PER_UNIT.value,
        description="What amount the macro values refer to (per_unit or per_100g)",
    )


class IngredientResponse(IngredientCreate):
    """Stored ingredient row"""

    id: int


class MealCreate(CamelModel):
    """Meal payload for create and full-replace update"""

    name: str
    datetime: dt.datetime
    ingredients: List[IngredientCreate] = Field(default_factory=list)


class MealResponse(CamelModel):
    """Meal with its ingredients nested"""

    id: int
    name: str
    datetime: dt.datetime
    ingredients: List[IngredientResponse] = Field(default_factory=list)
