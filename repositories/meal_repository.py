"""
Meal Repository - Meals together with their ingredient rows.

Ingredient rows are never shared between meals. Creating or updating a meal
inserts a fresh row per submitted ingredient and links it through
meal_ingredients. An update only removes the old links; the detached
ingredient rows stay in the ingredients table.
"""

import logging
from typing import List, Optional
from sqlalchemy import select, update, delete
from sqlalchemy.orm import Session

from domain.models import Meal, Ingredient, MealIngredient
from domain.mappers import MealMapper
from domain.schemas import IngredientCreate, MealCreate, MealResponse
from repositories.base import BaseRepository, to_naive_utc

logger = logging.getLogger("macrotracker.repositories.meals")


class MealRepository(BaseRepository[Meal]):
    """Aggregate repository for meals and their ingredients"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    @staticmethod
    def _joined_rows():
        return (
            select(
                Meal.id.label("meal_id"),
                Meal.name.label("meal_name"),
                Meal.datetime.label("meal_datetime"),
                Ingredient.id.label("ingredient_id"),
                Ingredient.name.label("ingredient_name"),
                Ingredient.quantity,
                Ingredient.carbs,
                Ingredient.fat,
                Ingredient.protein,
                Ingredient.kcal,
                Ingredient.macro_unit,
            )
            .select_from(Meal)
            .outerjoin(MealIngredient, Meal.id == MealIngredient.meal_id)
            .outerjoin(Ingredient, MealIngredient.ingredient_id == Ingredient.id)
        )

    def list_meals(self) -> List[MealResponse]:
        """All meals, newest first, each with its ingredients"""
        stmt = self._joined_rows().order_by(
            Meal.datetime.desc(), Meal.id, Ingredient.id
        )
        with self.storage_guard():
            rows = self.db.execute(stmt).all()
        return MealMapper.from_rows(rows)

    def list_meals_between(self, start, end) -> List[MealResponse]:
        """Meals with start <= datetime < end, oldest first"""
        stmt = (
            self._joined_rows()
            .where(Meal.datetime >= to_naive_utc(start), Meal.datetime < to_naive_utc(end))
            .order_by(Meal.datetime, Meal.id, Ingredient.id)
        )
        with self.storage_guard():
            rows = self.db.execute(stmt).all()
        return MealMapper.from_rows(rows)

    def get_meal(self, meal_id: int) -> Optional[MealResponse]:
        """
        Get one meal with its ingredients.

        Returns None only when no meal row exists; a meal without ingredients
        still comes back with an empty list.
        """
        stmt = self._joined_rows().where(Meal.id == meal_id).order_by(Ingredient.id)
        with self.storage_guard():
            rows = self.db.execute(stmt).all()
        meals = MealMapper.from_rows(rows)
        return meals[0] if meals else None

    def _insert_ingredients(self, meal_id: int, ingredients: List[IngredientCreate]) -> None:
        for item in ingredients:
            ingredient = Ingredient(
                name=item.name,
                quantity=item.quantity,
                carbs=item.carbs,
                fat=item.fat,
                protein=item.protein,
                kcal=item.kcal,
                macro_unit=item.macro_unit,
            )
            self.db.add(ingredient)
            self.db.flush()
            self.db.add(MealIngredient(meal_id=meal_id, ingredient_id=ingredient.id))
            self.db.flush()

    def create_meal(self, payload: MealCreate) -> MealResponse:
        """
        Insert a meal, one ingredient row per submitted ingredient, and the links.

        All rows commit together; any failure rolls the whole meal back.

        Raises:
            StorageError: if any insert or the commit fails
        """
        with self.storage_guard():
            meal = Meal(name=payload.name, datetime=to_naive_utc(payload.datetime))
            self.db.add(meal)
            self.db.flush()
            self._insert_ingredients(meal.id, payload.ingredients)
            self.db.commit()

        logger.info(
            f"meal_created meal_id={meal.id} ingredients={len(payload.ingredients)}"
        )
        return self.get_meal(meal.id)

    def update_meal(self, meal_id: int, payload: MealCreate) -> Optional[MealResponse]:
        """
        Replace a meal's fields and its whole ingredient list.

        Existing links are deleted and the submitted ingredients are inserted as
        new rows, so every ingredient gets a new id. Nothing changes unless the
        whole replacement commits.

        Returns:
            The updated meal, or None if no meal has this id

        Raises:
            StorageError: if any statement or the commit fails
        """
        with self.storage_guard():
            result = self.execute_write(
                update(Meal)
                .where(Meal.id == meal_id)
                .values(name=payload.name, datetime=to_naive_utc(payload.datetime))
            )
            if result.rowcount == 0:
                self.db.rollback()
                return None
            self.execute_write(delete(MealIngredient).where(MealIngredient.meal_id == meal_id))
            self._insert_ingredients(meal_id, payload.ingredients)
            self.db.commit()

        logger.info(
            f"meal_updated meal_id={meal_id} ingredients={len(payload.ingredients)}"
        )
        return self.get_meal(meal_id)

    def delete_meal(self, meal_id: int) -> None:
        """Delete a meal; its links are removed by ON DELETE CASCADE"""
        self.delete(meal_id)
        logger.info(f"meal_deleted meal_id={meal_id}")
