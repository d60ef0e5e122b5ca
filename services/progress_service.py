from datetime import date, datetime, time, timedelta
from typing import Iterable, Optional
from sqlalchemy.orm import Session
import logging

from domain.enums import MACROS, ProgressStatus
from domain.mappers import DailyTargetsMapper
from domain.schemas import (
    DailyProgressResponse,
    IngredientResponse,
    MacroProgress,
    MacroRange,
    MacroTotals,
)
from repositories import DailyTargetsRepository, MealRepository

logger = logging.getLogger("macrotracker.progress")


def _ratio_percent(value: float, bound: float) -> float:
    """value / bound as a percentage; a zero bound counts as already reached"""
    if bound == 0:
        return 100.0
    return value / bound * 100


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return max(low, min(high, value))


class ProgressService:
    @staticmethod
    def macro_totals(ingredients: Iterable[IngredientResponse]) -> MacroTotals:
        """Sum each macro multiplied by the ingredient quantity"""
        totals = {macro: 0.0 for macro in MACROS}
        for ingredient in ingredients:
            for macro in MACROS:
                totals[macro] += getattr(ingredient, macro) * ingredient.quantity
        return MacroTotals(**totals)

    @staticmethod
    def calculate_macro_progress(
        current: float, target: Optional[MacroRange]
    ) -> MacroProgress:
        """
        Place a macro total relative to its target range.

        - Below the minimum: percentage of the minimum reached (0-100).
        - Above the maximum: 100 plus the overshoot in percent of the maximum,
          capped at 150.
        - Between both bounds: how far through the range the total is (0-100).
        - Above a lone minimum: 100 plus a fifth of the overshoot, capped at 120.
        - Below a lone maximum: percentage of the maximum reached (0-100).
        """
        low = target.min if target else None
        high = target.max if target else None

        if low is None and high is None:
            return MacroProgress(
                current=current, percentage=0, status=ProgressStatus.NO_TARGET
            )

        if low is not None and current < low:
            return MacroProgress(
                current=current,
                min=low,
                max=high,
                percentage=_clamp(_ratio_percent(current, low)),
                status=ProgressStatus.BELOW_MIN,
            )

        if high is not None and current > high:
            overshoot = _ratio_percent(current - high, high)
            return MacroProgress(
                current=current,
                min=low,
                max=high,
                percentage=100 + min(50.0, overshoot),
                status=ProgressStatus.ABOVE_MAX,
            )

        if low is not None and high is not None:
            span = high - low
            percentage = _clamp((current - low) / span * 100) if span > 0 else 100.0
        elif low is not None:
            overshoot = (current - low) / low * 20 if low else 0.0
            percentage = min(120.0, 100 + overshoot)
        else:
            percentage = _clamp(_ratio_percent(current, high))

        return MacroProgress(
            current=current,
            min=low,
            max=high,
            percentage=percentage,
            status=ProgressStatus.WITHIN_RANGE,
        )

    @staticmethod
    def daily_progress(db: Session, day: date) -> DailyProgressResponse:
        """
        Compare the macros of every meal logged on ``day`` with the current targets.

        Days are UTC calendar days. Without saved targets every macro reports
        no_target.
        """
        start = datetime.combine(day, time.min)
        meals = MealRepository(db).list_meals_between(start, start + timedelta(days=1))
        totals = ProgressService.macro_totals(
            ingredient for meal in meals for ingredient in meal.ingredients
        )

        targets = DailyTargetsRepository(db).get_current()
        ranges = DailyTargetsMapper.to_response(targets) if targets else None
        logger.info(
            f"daily_progress date={day.isoformat()} meals={len(meals)} "
            f"targets={'yes' if ranges else 'no'}"
        )

        progress = {
            macro: ProgressService.calculate_macro_progress(
                getattr(totals, macro), getattr(ranges, macro) if ranges else None
            )
            for macro in MACROS
        }
        return DailyProgressResponse(date=day, totals=totals, **progress)
