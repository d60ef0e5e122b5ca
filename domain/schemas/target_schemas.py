import datetime as dt
from typing import Optional
from pydantic import Field

from domain.enums import ProgressStatus
from domain.schemas.base import CamelModel


class MacroRange(CamelModel):
    """Optional lower and upper bound for one macro"""

    min: Optional[float] = Field(default=None, ge=0)
    max: Optional[float] = Field(default=None, ge=0)


class DailyTargetsCreate(CamelModel):
    """Schema for creating or replacing daily targets"""

    carbs: Optional[MacroRange] = None
    fat: Optional[MacroRange] = None
    protein: Optional[MacroRange] = None
    kcal: Optional[MacroRange] = None


class DailyTargetsResponse(DailyTargetsCreate):
    """Stored daily targets"""

    id: int
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None


class MacroTotals(CamelModel):
    """Summed macros"""

    carbs: float = 0
    fat: float = 0
    protein: float = 0
    kcal: float = 0


class MacroProgress(CamelModel):
    """Progress of one macro against its target range"""

    current: float
    min: Optional[float] = None
    max: Optional[float] = None
    percentage: float
    status: ProgressStatus


class DailyProgressResponse(CamelModel):
    """Macro totals for one day compared against the current targets"""

    date: dt.date
    totals: MacroTotals
    carbs: MacroProgress
    fat: MacroProgress
    protein: MacroProgress
    kcal: MacroProgress
