"""
Daily Targets Repository - Data access for daily macro target ranges
"""

from typing import Optional
from sqlalchemy import select, update, func
from sqlalchemy.orm import Session

from domain.models import DailyTargets
from domain.mappers import DailyTargetsMapper
from domain.schemas import DailyTargetsCreate
from repositories.base import BaseRepository


class DailyTargetsRepository(BaseRepository[DailyTargets]):
    """Repository for daily targets"""

    def __init__(self, db: Session):
        super().__init__(db, DailyTargets)

    def get_current(self) -> Optional[DailyTargets]:
        """The most recently updated targets, if any were saved"""
        stmt = (
            select(DailyTargets)
            .order_by(DailyTargets.updated_at.desc(), DailyTargets.id.desc())
            .limit(1)
        )
        with self.storage_guard():
            return self.db.scalars(stmt).first()

    def create_targets(self, payload: DailyTargetsCreate) -> DailyTargets:
        return self.create(DailyTargets(**DailyTargetsMapper.to_columns(payload)))

    def update_targets(
        self, targets_id: int, payload: DailyTargetsCreate
    ) -> Optional[DailyTargets]:
        """Replace every bound and bump updated_at. None if the row does not exist."""
        with self.storage_guard():
            result = self.execute_write(
                update(DailyTargets)
                .where(DailyTargets.id == targets_id)
                .values(**DailyTargetsMapper.to_columns(payload), updated_at=func.now())
            )
            if result.rowcount == 0:
                self.db.rollback()
                return None
            self.db.commit()
        return self.get_by_id(targets_id)
