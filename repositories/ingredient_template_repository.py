"""
Ingredient Template Repository - Data access for reusable ingredient macro profiles
"""

import logging
from typing import List, Optional
from sqlalchemy import select, update, func
from sqlalchemy.orm import Session

from domain.models import IngredientTemplate
from domain.schemas import IngredientTemplateCreate
from repositories.base import BaseRepository

logger = logging.getLogger("macrotracker.repositories.ingredient_templates")


class IngredientTemplateRepository(BaseRepository[IngredientTemplate]):
    """Repository for ingredient templates"""

    def __init__(self, db: Session):
        super().__init__(db, IngredientTemplate)

    def list_templates(self) -> List[IngredientTemplate]:
        """All ingredient templates ordered by name"""
        with self.storage_guard():
            return list(
                self.db.scalars(select(IngredientTemplate).order_by(IngredientTemplate.name))
            )

    def create_template(self, payload: IngredientTemplateCreate) -> IngredientTemplate:
        """
        Insert an ingredient template.

        The database rejects duplicate names and macro units other than
        per_unit/per_100g; both surface as StorageError.
        """
        template = self.create(IngredientTemplate(**payload.model_dump()))
        logger.info(f"ingredient_template_created template_id={template.id}")
        return template

    def update_template(
        self, template_id: int, payload: IngredientTemplateCreate
    ) -> Optional[IngredientTemplate]:
        """Overwrite a template's fields and bump updated_at. None if it does not exist."""
        with self.storage_guard():
            result = self.execute_write(
                update(IngredientTemplate)
                .where(IngredientTemplate.id == template_id)
                .values(**payload.model_dump(), updated_at=func.now())
            )
            if result.rowcount == 0:
                self.db.rollback()
                return None
            self.db.commit()
        return self.get_by_id(template_id)

    def delete_template(self, template_id: int) -> None:
        """Delete a template; meal template links to it are cascaded away"""
        self.delete(template_id)
        logger.info(f"ingredient_template_deleted template_id={template_id}")
