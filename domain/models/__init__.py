"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    create_db_engine,
    init_database,
    get_db_session,
)
from domain.models.meal import Meal, Ingredient, MealIngredient
from domain.models.template import (
    IngredientTemplate,
    MealTemplate,
    MealTemplateIngredient,
)
from domain.models.daily_targets import DailyTargets

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "create_db_engine",
    "init_database",
    "get_db_session",
    # Meal models
    "Meal",
    "Ingredient",
    "MealIngredient",
    # Template models
    "IngredientTemplate",
    "MealTemplate",
    "MealTemplateIngredient",
    # Targets
    "DailyTargets",
]
