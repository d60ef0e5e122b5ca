"""Daily macro target routes"""

import datetime as dt
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from typing import Optional

from domain.models import get_db_session
from domain.enums import MACROS
from domain.mappers import DailyTargetsMapper
from domain.schemas import (
    DailyTargetsCreate,
    DailyTargetsResponse,
    DailyProgressResponse,
)
from repositories import DailyTargetsRepository
from services.progress_service import ProgressService
from app.exceptions import NotFoundError, ServiceValidationError

router = APIRouter(prefix="/daily-targets", tags=["Daily Targets"])
logger = logging.getLogger("macrotracker.api.daily_targets")


def _check_ranges(targets: DailyTargetsCreate) -> None:
    for macro in MACROS:
        bounds = getattr(targets, macro)
        if bounds is None or bounds.min is None or bounds.max is None:
            continue
        if bounds.min > bounds.max:
            raise ServiceValidationError(f"{macro}: min must not exceed max")


@router.get("", response_model=DailyTargetsResponse)
def get_daily_targets(db: Session = Depends(get_db_session)):
    """The targets currently in effect"""
    targets = DailyTargetsRepository(db).get_current()
    if targets is None:
        raise NotFoundError("Daily targets not set")
    return DailyTargetsMapper.to_response(targets)


@router.get("/progress", response_model=DailyProgressResponse)
def get_daily_progress(
    date: Optional[dt.date] = Query(
        default=None, description="Day to summarize (YYYY-MM-DD, UTC); defaults to today"
    ),
    db: Session = Depends(get_db_session),
):
    """
    Macro totals of every meal on the given day and how they compare with the
    current targets.

    Each macro reports a status of below_min, above_max, within_range or
    no_target along with a percentage suitable for a progress bar.
    """
    day = date or dt.datetime.now(dt.timezone.utc).date()
    return ProgressService.daily_progress(db, day)


@router.post("", response_model=DailyTargetsResponse, status_code=status.HTTP_201_CREATED)
def create_daily_targets(targets: DailyTargetsCreate, db: Session = Depends(get_db_session)):
    _check_ranges(targets)
    created = DailyTargetsRepository(db).create_targets(targets)
    return DailyTargetsMapper.to_response(created)


@router.put("/{targets_id}", response_model=DailyTargetsResponse)
def update_daily_targets(
    targets_id: int, targets: DailyTargetsCreate, db: Session = Depends(get_db_session)
):
    _check_ranges(targets)
    updated = DailyTargetsRepository(db).update_targets(targets_id, targets)
    if updated is None:
        raise NotFoundError("Daily targets not found")
    return DailyTargetsMapper.to_response(updated)


@router.delete("/{targets_id}")
def delete_daily_targets(targets_id: int, db: Session = Depends(get_db_session)):
    DailyTargetsRepository(db).delete(targets_id)
    return {"message": "Daily targets deleted successfully"}
