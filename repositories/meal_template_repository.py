"""
Meal Template Repository - Meal templates linked to ingredient templates.

Unlike meals, the children here are shared ingredient templates: create and
update only write rows to meal_template_ingredients.
"""

import logging
from typing import List, Optional
from sqlalchemy import select, update, delete, func
from sqlalchemy.orm import Session

from domain.models import MealTemplate, IngredientTemplate, MealTemplateIngredient
from domain.mappers import MealTemplateMapper
from domain.schemas import (
    MealTemplateCreate,
    MealTemplateIngredientLink,
    MealTemplateResponse,
)
from repositories.base import BaseRepository

logger = logging.getLogger("macrotracker.repositories.meal_templates")

DEFAULT_LINK_QUANTITY = 1.0


class MealTemplateRepository(BaseRepository[MealTemplate]):
    """Aggregate repository for meal templates and their ingredient links"""

    def __init__(self, db: Session):
        super().__init__(db, MealTemplate)

    @staticmethod
    def _joined_rows():
        return (
            select(
                MealTemplate.id.label("template_id"),
                MealTemplate.name.label("template_name"),
                MealTemplate.description,
                MealTemplate.created_at.label("template_created_at"),
                MealTemplate.updated_at.label("template_updated_at"),
                IngredientTemplate.id.label("ingredient_template_id"),
                IngredientTemplate.name.label("ingredient_name"),
                IngredientTemplate.carbs,
                IngredientTemplate.fat,
                IngredientTemplate.protein,
                IngredientTemplate.kcal,
                IngredientTemplate.macro_unit,
                IngredientTemplate.created_at.label("ingredient_created_at"),
                IngredientTemplate.updated_at.label("ingredient_updated_at"),
                MealTemplateIngredient.quantity,
            )
            .select_from(MealTemplate)
            .outerjoin(
                MealTemplateIngredient,
                MealTemplate.id == MealTemplateIngredient.meal_template_id,
            )
            .outerjoin(
                IngredientTemplate,
                MealTemplateIngredient.ingredient_template_id == IngredientTemplate.id,
            )
        )

    def list_templates(self) -> List[MealTemplateResponse]:
        """All meal templates by name, ingredients by name"""
        stmt = self._joined_rows().order_by(
            MealTemplate.name, MealTemplate.id, IngredientTemplate.name
        )
        with self.storage_guard():
            rows = self.db.execute(stmt).all()
        return MealTemplateMapper.from_rows(rows)

    def get_template(self, template_id: int) -> Optional[MealTemplateResponse]:
        """Get one meal template with its ingredients, or None if it does not exist"""
        stmt = (
            self._joined_rows()
            .where(MealTemplate.id == template_id)
            .order_by(IngredientTemplate.name)
        )
        with self.storage_guard():
            rows = self.db.execute(stmt).all()
        templates = MealTemplateMapper.from_rows(rows)
        return templates[0] if templates else None

    def _insert_links(
        self, template_id: int, links: List[MealTemplateIngredientLink]
    ) -> None:
        for link in links:
            self.db.add(
                MealTemplateIngredient(
                    meal_template_id=template_id,
                    ingredient_template_id=link.id,
                    quantity=link.quantity or DEFAULT_LINK_QUANTITY,
                )
            )
            self.db.flush()

    def create_template(self, payload: MealTemplateCreate) -> MealTemplateResponse:
        """
        Insert a meal template and link the referenced ingredient templates.

        Raises:
            StorageError: if any insert fails (e.g. unknown ingredient template id)
        """
        with self.storage_guard():
            template = MealTemplate(name=payload.name, description=payload.description)
            self.db.add(template)
            self.db.flush()
            self._insert_links(template.id, payload.ingredients)
            self.db.commit()

        logger.info(
            f"meal_template_created template_id={template.id} "
            f"ingredients={len(payload.ingredients)}"
        )
        return self.get_template(template.id)

    def update_template(
        self, template_id: int, payload: MealTemplateCreate
    ) -> Optional[MealTemplateResponse]:
        """
        Replace a meal template's fields and all of its ingredient links.

        Returns:
            The updated template, or None if no template has this id
        """
        with self.storage_guard():
            result = self.execute_write(
                update(MealTemplate)
                .where(MealTemplate.id == template_id)
                .values(
                    name=payload.name,
                    description=payload.description,
                    updated_at=func.now(),
                )
            )
            if result.rowcount == 0:
                self.db.rollback()
                return None
            self.execute_write(
                delete(MealTemplateIngredient).where(
                    MealTemplateIngredient.meal_template_id == template_id
                )
            )
            self._insert_links(template_id, payload.ingredients)
            self.db.commit()

        logger.info(
            f"meal_template_updated template_id={template_id} "
            f"ingredients={len(payload.ingredients)}"
        )
        return self.get_template(template_id)

    def delete_template(self, template_id: int) -> None:
        self.delete(template_id)
        logger.info(f"meal_template_deleted template_id={template_id}")
