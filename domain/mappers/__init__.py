"""
Domain mappers package.
Handles transformation between ORM rows and DTOs (Data Transfer Objects).
"""

from domain.mappers.aggregate_mapper import (
    fold_rows,
    MealMapper,
    MealTemplateMapper,
    DailyTargetsMapper,
)

__all__ = ["fold_rows", "MealMapper", "MealTemplateMapper", "DailyTargetsMapper"]
