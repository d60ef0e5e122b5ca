"""Meal routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from typing import List

from domain.models import get_db_session
from domain.schemas import MealCreate, MealResponse
from repositories import MealRepository
from app.exceptions import NotFoundError

router = APIRouter(prefix="/meals", tags=["Meals"])
logger = logging.getLogger("macrotracker.api.meals")


@router.get("", response_model=List[MealResponse])
def list_meals(db: Session = Depends(get_db_session)):
    """All meals, newest first, with their ingredients nested"""
    return MealRepository(db).list_meals()


@router.get("/{meal_id}", response_model=MealResponse)
def get_meal(meal_id: int, db: Session = Depends(get_db_session)):
    meal = MealRepository(db).get_meal(meal_id)
    if meal is None:
        raise NotFoundError("Meal not found")
    return meal


@router.post("", response_model=MealResponse, status_code=status.HTTP_201_CREATED)
def create_meal(meal: MealCreate, db: Session = Depends(get_db_session)):
    """Create a meal together with its ingredients in one transaction"""
    return MealRepository(db).create_meal(meal)


@router.put("/{meal_id}", response_model=MealResponse)
def update_meal(meal_id: int, meal: MealCreate, db: Session = Depends(get_db_session)):
    """
    Replace a meal and its full ingredient list.

    The submitted ingredients are stored as new rows, so they come back with
    new ids even when unchanged.
    """
    updated = MealRepository(db).update_meal(meal_id, meal)
    if updated is None:
        raise NotFoundError("Meal not found")
    return updated


@router.delete("/{meal_id}")
def delete_meal(meal_id: int, db: Session = Depends(get_db_session)):
    MealRepository(db).delete_meal(meal_id)
    return {"message": "Meal deleted successfully"}
