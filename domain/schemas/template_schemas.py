from datetime import datetime
from typing import List, Optional
from pydantic import Field

from domain.enums import MacroUnit
from domain.schemas.base import CamelModel


class IngredientTemplateCreate(CamelModel):
    """Schema for creating or replacing an ingredient template"""

    name: str
    carbs: float = 0
    fat: float = 0
    protein: float = 0
    kcal: float = 0
    macro_unit: str = Field(
        default=MacroUnit.PER_UNIT.value,
        description="per_unit or per_100g; enforced by the database",
    )


class IngredientTemplateResponse(IngredientTemplateCreate):
    """Stored ingredient template"""

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MealTemplateIngredientLink(CamelModel):
    """Reference to an ingredient template inside a meal template payload"""

    id: int = Field(..., description="Ingredient template id")
    quantity: Optional[float] = Field(
        default=None, description="Portions of the template; unset or 0 means 1"
    )


class MealTemplateCreate(CamelModel):
    """Meal template payload for create and full-replace update"""

    name: str
    description: Optional[str] = None
    ingredients: List[MealTemplateIngredientLink] = Field(default_factory=list)


class MealTemplateIngredientResponse(IngredientTemplateResponse):
    """Ingredient template as linked into a meal template"""

    quantity: float = 1


class MealTemplateResponse(CamelModel):
    """Meal template with its ingredient templates nested"""

    id: int
    name: str
    description: Optional[str] = None
    ingredients: List[MealTemplateIngredientResponse] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
