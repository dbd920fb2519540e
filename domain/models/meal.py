"""
Meal and meal ingredient models.
"""

from sqlalchemy import (
    Column,
    Integer,
    Float,
    String,
    Text,
    TIMESTAMP,
    ForeignKey,
    CheckConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class Meal(Base):
    """A named collection of ingredient servings owned by one user"""

    __tablename__ = "meals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(255), nullable=False)
    description = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    user = relationship("User", back_populates="meals")
    meal_ingredients = relationship(
        "MealIngredient",
        back_populates="meal",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="MealIngredient.id",
    )

    def __repr__(self):
        return f"<Meal(id={self.id}, user_id={self.user_id}, name='{self.name}')>"


class MealIngredient(Base):
    """Join row linking a meal to an ingredient with a servings quantity"""

    __tablename__ = "meal_ingredients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    meal_id = Column(
        Integer,
        ForeignKey("meals.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    ingredient_id = Column(
        Integer,
        ForeignKey("ingredients.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    servings = Column(Float, nullable=False, default=1)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    meal = relationship("Meal", back_populates="meal_ingredients")
    ingredient = relationship("Ingredient", back_populates="meal_ingredients")

    __table_args__ = (
        CheckConstraint("servings > 0", name="ck_meal_ingredient_servings_positive"),
    )

    def __repr__(self):
        return (
            f"<MealIngredient(id={self.id}, meal_id={self.meal_id}, "
            f"ingredient_id={self.ingredient_id}, servings={self.servings})>"
        )
