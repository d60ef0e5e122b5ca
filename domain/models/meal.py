"""
Meal and logged-ingredient models.

Ingredient rows are owned by a single meal: every meal create or update inserts
fresh rows and links them through meal_ingredients.
"""

from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey

from domain.models.database import Base


def _macro_column(default=0):
    return Column(Numeric(8, 2, asdecimal=False), nullable=False, default=default, server_default=str(default))


class Meal(Base):
    """A logged meal"""

    __tablename__ = "meals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    datetime = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Meal(id={self.id}, name='{self.name}')>"


class Ingredient(Base):
    """An ingredient as eaten in one meal"""

    __tablename__ = "ingredients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    quantity = _macro_column(default=1)
    carbs = _macro_column()
    fat = _macro_column()
    protein = _macro_column()
    kcal = _macro_column()
    macro_unit = Column(String(20), nullable=False, default="per_unit", server_default="per_unit")

    def __repr__(self):
        return f"<Ingredient(id={self.id}, name='{self.name}')>"


class MealIngredient(Base):
    """Junction between meals and their ingredient rows"""

    __tablename__ = "meal_ingredients"

    meal_id = Column(
        Integer, ForeignKey("meals.id", ondelete="CASCADE"), primary_key=True
    )
    ingredient_id = Column(
        Integer, ForeignKey("ingredients.id", ondelete="CASCADE"), primary_key=True
    )
