"""
Aggregate mappers.
Fold flat parent/junction/child join rows into nested response objects.
"""

from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional, TypeVar

from domain.models import DailyTargets
from domain.enums import MACROS
from domain.schemas import (
    IngredientResponse,
    MealResponse,
    MealTemplateIngredientResponse,
    MealTemplateResponse,
    MacroRange,
    DailyTargetsCreate,
    DailyTargetsResponse,
)

ParentType = TypeVar("ParentType")


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Attach UTC to a naive timestamp read back from the store"""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def fold_rows(
    rows: Iterable,
    parent_key: str,
    child_key: str,
    make_parent: Callable[[object], ParentType],
    make_child: Callable[[object], object],
) -> List[ParentType]:
    """
    Fold LEFT JOIN rows into parents carrying an ``ingredients`` list.

    Parents keep the order in which they first appear in ``rows`` and the field
    values of that first row. A child is appended for every row whose
    ``child_key`` column is not NULL, so a parent without children (one row of
    NULL child columns) ends up with an empty list.

    Args:
        rows: result rows exposing columns as attributes
        parent_key: label of the parent id column
        child_key: label of the child id column
        make_parent: builds a parent object with an empty ``ingredients`` list
        make_child: builds a child object from a row

    Returns:
        Parents in first-seen order
    """
    parents: List[ParentType] = []
    positions: dict = {}
    for row in rows:
        parent_id = getattr(row, parent_key)
        position = positions.get(parent_id)
        if position is None:
            position = len(parents)
            positions[parent_id] = position
            parents.append(make_parent(row))
        if getattr(row, child_key) is not None:
            parents[position].ingredients.append(make_child(row))
    return parents


class MealMapper:
    """Mapper for meal join rows."""

    @staticmethod
    def _parent(row) -> MealResponse:
        return MealResponse(
            id=row.meal_id,
            name=row.meal_name,
            datetime=as_utc(row.meal_datetime),
            ingredients=[],
        )

    @staticmethod
    def _child(row) -> IngredientResponse:
        return IngredientResponse(
            id=row.ingredient_id,
            name=row.ingredient_name,
            quantity=row.quantity,
            carbs=row.carbs,
            fat=row.fat,
            protein=row.protein,
            kcal=row.kcal,
            macro_unit=row.macro_unit,
        )

    @staticmethod
    def from_rows(rows: Iterable) -> List[MealResponse]:
        return fold_rows(
            rows, "meal_id", "ingredient_id", MealMapper._parent, MealMapper._child
        )


class MealTemplateMapper:
    """Mapper for meal template join rows."""

    @staticmethod
    def _parent(row) -> MealTemplateResponse:
        return MealTemplateResponse(
            id=row.template_id,
            name=row.template_name,
            description=row.description,
            created_at=row.template_created_at,
            updated_at=row.template_updated_at,
            ingredients=[],
        )

    @staticmethod
    def _child(row) -> MealTemplateIngredientResponse:
        return MealTemplateIngredientResponse(
            id=row.ingredient_template_id,
            name=row.ingredient_name,
            carbs=row.carbs,
            fat=row.fat,
            protein=row.protein,
            kcal=row.kcal,
            macro_unit=row.macro_unit,
            created_at=row.ingredient_created_at,
            updated_at=row.ingredient_updated_at,
            quantity=row.quantity,
        )

    @staticmethod
    def from_rows(rows: Iterable) -> List[MealTemplateResponse]:
        return fold_rows(
            rows,
            "template_id",
            "ingredient_template_id",
            MealTemplateMapper._parent,
            MealTemplateMapper._child,
        )


class DailyTargetsMapper:
    """Maps between the flat targets row and the nested min/max payload."""

    @staticmethod
    def to_response(targets: DailyTargets) -> DailyTargetsResponse:
        ranges = {}
        for macro in MACROS:
            low = getattr(targets, f"{macro}_min")
            high = getattr(targets, f"{macro}_max")
            ranges[macro] = (
                MacroRange(min=low, max=high)
                if low is not None or high is not None
                else None
            )
        return DailyTargetsResponse(
            id=targets.id,
            created_at=targets.created_at,
            updated_at=targets.updated_at,
            **ranges,
        )

    @staticmethod
    def to_columns(payload: DailyTargetsCreate) -> dict:
        columns = {}
        for macro in MACROS:
            bounds: Optional[MacroRange] = getattr(payload, macro)
            columns[f"{macro}_min"] = bounds.min if bounds else None
            columns[f"{macro}_max"] = bounds.max if bounds else None
        return columns
