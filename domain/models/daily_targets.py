"""
Daily macro targets. Every bound is optional.
"""

from sqlalchemy import Column, Integer, Numeric, TIMESTAMP
from sqlalchemy.sql import func

from domain.models.database import Base


def _bound_column():
    return Column(Numeric(8, 2, asdecimal=False), nullable=True)


class DailyTargets(Base):
    """Min/max ranges for each macro over one day"""

    __tablename__ = "daily_targets"

    id = Column(Integer, primary_key=True, autoincrement=True)
    carbs_min = _bound_column()
    carbs_max = _bound_column()
    fat_min = _bound_column()
    fat_max = _bound_column()
    protein_min = _bound_column()
    protein_max = _bound_column()
    kcal_min = _bound_column()
    kcal_max = _bound_column()
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now())

    def __repr__(self):
        return f"<DailyTargets(id={self.id})>"
