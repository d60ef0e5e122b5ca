"""
Ingredient Repository - Flat access to logged ingredient rows
"""

from typing import List
from sqlalchemy import select
from sqlalchemy.orm import Session

from domain.models import Ingredient
from domain.schemas import IngredientCreate
from repositories.base import BaseRepository


class IngredientRepository(BaseRepository[Ingredient]):
    """Repository for ingredient rows, without meal linkage"""

    def __init__(self, db: Session):
        super().__init__(db, Ingredient)

    def list_ingredients(self) -> List[Ingredient]:
        """All ingredient rows ordered by name"""
        with self.storage_guard():
            return list(
                self.db.scalars(select(Ingredient).order_by(Ingredient.name, Ingredient.id))
            )

    def create_ingredient(self, payload: IngredientCreate) -> Ingredient:
        """Insert a standalone ingredient row"""
        return self.create(Ingredient(**payload.model_dump()))
