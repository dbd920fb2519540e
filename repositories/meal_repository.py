"""
Meal Repository - Data access layer for meals and their ingredient rows
"""

from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from repositories.base import BaseRepository
from domain.models import Meal, MealIngredient


class MealRepository(BaseRepository[Meal]):
    """Repository for meal data access"""

    def __init__(self, db: Session):
        super().__init__(db, Meal)

    def get_by_user_id(self, user_id: int) -> List[Meal]:
        """Get all meals owned by a user, oldest first"""
        return (
            self.db.query(Meal)
            .filter(Meal.user_id == user_id)
            .order_by(Meal.id)
            .all()
        )

    def get_with_ingredients(self, meal_id: int) -> Optional[Meal]:
        """Get a meal with its meal ingredients and their ingredients loaded"""
        return (
            self.db.query(Meal)
            .options(
                selectinload(Meal.meal_ingredients).selectinload(
                    MealIngredient.ingredient
                )
            )
            .filter(Meal.id == meal_id)
            .first()
        )


class MealIngredientRepository(BaseRepository[MealIngredient]):
    """Repository for meal ingredient (join row) data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealIngredient)

    def get_by_meal_id(self, meal_id: int) -> List[MealIngredient]:
        """Get all ingredient rows of a meal"""
        return (
            self.db.query(MealIngredient)
            .filter(MealIngredient.meal_id == meal_id)
            .order_by(MealIngredient.id)
            .all()
        )

    def get_in_meal(self, meal_id: int, meal_ingredient_id: int) -> Optional[MealIngredient]:
        """Get a meal ingredient only if it belongs to the given meal"""
        return (
            self.db.query(MealIngredient)
            .filter(
                MealIngredient.id == meal_ingredient_id,
                MealIngredient.meal_id == meal_id,
            )
            .first()
        )

    def create_for_meal(
        self, meal_id: int, ingredient_id: int, servings: float
    ) -> MealIngredient:
        """Insert a new meal ingredient row"""
        row = MealIngredient(
            meal_id=meal_id, ingredient_id=ingredient_id, servings=servings
        )
        return self.create(row)
