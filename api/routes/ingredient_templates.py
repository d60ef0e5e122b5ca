"""Ingredient template routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import List

from domain.models import get_db_session
from domain.schemas import IngredientTemplateCreate, IngredientTemplateResponse
from repositories import IngredientTemplateRepository
from app.exceptions import NotFoundError

router = APIRouter(prefix="/ingredient-templates", tags=["Ingredient Templates"])
logger = logging.getLogger("macrotracker.api.ingredient_templates")


@router.get("", response_model=List[IngredientTemplateResponse])
def list_ingredient_templates(db: Session = Depends(get_db_session)):
    return IngredientTemplateRepository(db).list_templates()


@router.get("/{template_id}", response_model=IngredientTemplateResponse)
def get_ingredient_template(template_id: int, db: Session = Depends(get_db_session)):
    template = IngredientTemplateRepository(db).get_by_id(template_id)
    if template is None:
        raise NotFoundError("Ingredient template not found")
    return template


@router.post(
    "", response_model=IngredientTemplateResponse, status_code=status.HTTP_201_CREATED
)
def create_ingredient_template(
    template: IngredientTemplateCreate, db: Session = Depends(get_db_session)
):
    """
    Create an ingredient template.

    macroUnit must be per_unit or per_100g and names must be unique; the
    database enforces both and a violation is reported as a 500.
    """
    return IngredientTemplateRepository(db).create_template(template)


@router.put("/{template_id}", response_model=IngredientTemplateResponse)
def update_ingredient_template(
    template_id: int,
    template: IngredientTemplateCreate,
    db: Session = Depends(get_db_session),
):
    updated = IngredientTemplateRepository(db).update_template(template_id, template)
    if updated is None:
        raise NotFoundError("Ingredient template not found")
    return updated


@router.delete("/{template_id}")
def delete_ingredient_template(template_id: int, db: Session = Depends(get_db_session)):
    """Delete a template; meal templates lose their link to it"""
    IngredientTemplateRepository(db).delete_template(template_id)
    return {"message": "Ingredient template deleted successfully"}
