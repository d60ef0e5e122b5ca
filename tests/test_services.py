"""
Unit tests for ProgressService.

These tests need no database: they exercise the macro summing and the
classification of a daily total against its target range.
"""

import pytest

from domain.enums import ProgressStatus
from domain.schemas import IngredientResponse, MacroRange
from services.progress_service import ProgressService


def _progress(current, low=None, high=None):
    target = MacroRange(min=low, max=high) if (low is not None or high is not None) else None
    return ProgressService.calculate_macro_progress(current, target)


# ============================================================================
# macro_totals
# ============================================================================


def test_macro_totals_multiplies_by_quantity():
    ingredients = [
        IngredientResponse(id=1, name="Egg", quantity=2, carbs=0.6, fat=5, protein=6, kcal=70),
        IngredientResponse(
            id=2, name="Rice", quantity=1.5, carbs=23, fat=0.9, protein=2.7, kcal=111,
            macro_unit="per_100g",
        ),
    ]

    totals = ProgressService.macro_totals(ingredients)

    assert totals.carbs == pytest.approx(1.2 + 34.5)
    assert totals.fat == pytest.approx(10 + 1.35)
    assert totals.protein == pytest.approx(12 + 4.05)
    assert totals.kcal == pytest.approx(140 + 166.5)


def test_macro_totals_empty():
    totals = ProgressService.macro_totals([])
    assert (totals.carbs, totals.fat, totals.protein, totals.kcal) == (0, 0, 0, 0)


# ============================================================================
# calculate_macro_progress
# ============================================================================


class TestCalculateMacroProgress:
    def test_no_target(self):
        result = _progress(80)
        assert result.status == ProgressStatus.NO_TARGET
        assert result.percentage == 0
        assert result.current == 80

    def test_below_min(self):
        result = _progress(50, low=100, high=200)
        assert result.status == ProgressStatus.BELOW_MIN
        assert result.percentage == pytest.approx(50)
        assert (result.min, result.max) == (100, 200)

    def test_within_range_is_position_in_range(self):
        result = _progress(150, low=100, high=200)
        assert result.status == ProgressStatus.WITHIN_RANGE
        assert result.percentage == pytest.approx(50)

    def test_within_range_on_bounds(self):
        assert _progress(100, low=100, high=200).percentage == pytest.approx(0)
        assert _progress(200, low=100, high=200).percentage == pytest.approx(100)

    def test_above_max_adds_overshoot(self):
        result = _progress(130, low=100, high=100)
        assert result.status == ProgressStatus.ABOVE_MAX
        assert result.percentage == pytest.approx(130)

    def test_above_max_capped_at_150(self):
        assert _progress(500, high=100).percentage == pytest.approx(150)

    def test_lone_min_reached(self):
        result = _progress(150, low=100)
        assert result.status == ProgressStatus.WITHIN_RANGE
        assert result.percentage == pytest.approx(110)

    def test_lone_min_capped_at_120(self):
        assert _progress(1000, low=100).percentage == pytest.approx(120)

    def test_lone_max_not_exceeded(self):
        result = _progress(50, high=200)
        assert result.status == ProgressStatus.WITHIN_RANGE
        assert result.percentage == pytest.approx(25)

    def test_equal_bounds(self):
        result = _progress(100, low=100, high=100)
        assert result.status == ProgressStatus.WITHIN_RANGE
        assert result.percentage == pytest.approx(100)

    def test_zero_bounds_do_not_divide_by_zero(self):
        assert _progress(0, low=0).percentage == pytest.approx(100)
        assert _progress(10, high=0).status == ProgressStatus.ABOVE_MAX
        assert _progress(0, high=0).percentage == pytest.approx(100)
