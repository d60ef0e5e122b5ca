"""
Reusable templates: ingredient templates and meal templates built from them.
"""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    Numeric,
    TIMESTAMP,
    ForeignKey,
    CheckConstraint,
)
from sqlalchemy.sql import func

from domain.models.database import Base, MACRO_UNIT_CONSTRAINT


def _macro_column():
    return Column(Numeric(8, 2, asdecimal=False), nullable=False, default=0, server_default="0")


class IngredientTemplate(Base):
    """Named macro profile that meals and meal templates can be built from"""

    __tablename__ = "ingredient_templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    carbs = _macro_column()
    fat = _macro_column()
    protein = _macro_column()
    kcal = _macro_column()
    macro_unit = Column(String(20), nullable=False, default="per_unit", server_default="per_unit")
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now())

    __table_args__ = (
        CheckConstraint(
            "macro_unit IN ('per_unit', 'per_100g')", name=MACRO_UNIT_CONSTRAINT
        ),
    )

    def __repr__(self):
        return f"<IngredientTemplate(id={self.id}, name='{self.name}')>"


class MealTemplate(Base):
    """A reusable meal composed of ingredient templates"""

    __tablename__ = "meal_templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    created_at = Column(TIMESTAMP, server_default=func.now())
    updated_at = Column(TIMESTAMP, server_default=func.now())

    def __repr__(self):
        return f"<MealTemplate(id={self.id}, name='{self.name}')>"


class MealTemplateIngredient(Base):
    """Junction between meal templates and ingredient templates, with quantity"""

    __tablename__ = "meal_template_ingredients"

    meal_template_id = Column(
        Integer, ForeignKey("meal_templates.id", ondelete="CASCADE"), primary_key=True
    )
    ingredient_template_id = Column(
        Integer,
        ForeignKey("ingredient_templates.id", ondelete="CASCADE"),
        primary_key=True,
    )
    quantity = Column(
        Numeric(8, 2, asdecimal=False), nullable=False, default=1, server_default="1"
    )
