"""Meal template routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import List

from domain.models import get_db_session
from domain.schemas import MealTemplateCreate, MealTemplateResponse
from repositories import MealTemplateRepository
from app.exceptions import NotFoundError

router = APIRouter(prefix="/meal-templates", tags=["Meal Templates"])
logger = logging.getLogger("macrotracker.api.meal_templates")


@router.get("", response_model=List[MealTemplateResponse])
def list_meal_templates(db: Session = Depends(get_db_session)):
    """All meal templates with their ingredient templates and quantities"""
    return MealTemplateRepository(db).list_templates()


@router.get("/{template_id}", response_model=MealTemplateResponse)
def get_meal_template(template_id: int, db: Session = Depends(get_db_session)):
    template = MealTemplateRepository(db).get_template(template_id)
    if template is None:
        raise NotFoundError("Meal template not found")
    return template


@router.post("", response_model=MealTemplateResponse, status_code=status.HTTP_201_CREATED)
def create_meal_template(
    template: MealTemplateCreate, db: Session = Depends(get_db_session)
):
    """
    Create a meal template from existing ingredient templates.

    Body ingredients are references: ``[{"id": <ingredient template id>, "quantity": 2}]``.
    A missing or zero quantity is stored as 1.
    """
    return MealTemplateRepository(db).create_template(template)


@router.put("/{template_id}", response_model=MealTemplateResponse)
def update_meal_template(
    template_id: int,
    template: MealTemplateCreate,
    db: Session = Depends(get_db_session),
):
    """Replace a meal template and all of its ingredient links"""
    updated = MealTemplateRepository(db).update_template(template_id, template)
    if updated is None:
        raise NotFoundError("Meal template not found")
    return updated


@router.delete("/{template_id}")
def delete_meal_template(template_id: int, db: Session = Depends(get_db_session)):
    MealTemplateRepository(db).delete_template(template_id)
    return {"message": "Meal template deleted successfully"}
