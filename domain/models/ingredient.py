"""
Ingredient model - nutritional reference table.
Meal ingredients point at these rows; the values are per serving.
"""

from sqlalchemy import Column, Integer, Float, String, Text, TIMESTAMP, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class Ingredient(Base):
    """Nutritional reference row, shared by every user's meals"""

    __tablename__ = "ingredients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text)
    serving_size = Column(Float)  # grams
    calories = Column(Float, nullable=False, default=0)
    carbohydrates = Column(Float, nullable=False, default=0)
    fat = Column(Float, nullable=False, default=0)
    protein = Column(Float, nullable=False, default=0)

    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    meal_ingredients = relationship("MealIngredient", back_populates="ingredient")

    __table_args__ = (UniqueConstraint("name", name="uq_ingredient_name"),)

    def __repr__(self):
        return f"<Ingredient(id={self.id}, name='{self.name}')>"
