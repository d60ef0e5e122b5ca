"""Ingredient routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from domain.models import get_db_session
from domain.schemas import IngredientCreate, IngredientResponse
from repositories import IngredientRepository

router = APIRouter(prefix="/ingredients", tags=["Ingredients"])


@router.get("", response_model=List[IngredientResponse])
def list_ingredients(db: Session = Depends(get_db_session)):
    """Every stored ingredient row by name, without meal linkage"""
    return IngredientRepository(db).list_ingredients()


@router.post("", response_model=IngredientResponse, status_code=status.HTTP_201_CREATED)
def create_ingredient(ingredient: IngredientCreate, db: Session = Depends(get_db_session)):
    return IngredientRepository(db).create_ingredient(ingredient)
