from typing import List
from sqlalchemy.orm import Session
import logging

from domain.models import Meal, User
from domain.schemas.meal_schemas import MealCreate, MealUpdate, MealResponse
from repositories import MealRepository

logger = logging.getLogger("mealtracker.meal")


class MealService:
    """Business logic for meals. Ownership is enforced before these are called."""

    @staticmethod
    def list_meals(db: Session, user: User) -> List[Meal]:
        return MealRepository(db).get_by_user_id(user.id)

    @staticmethod
    def get_meal_detail(db: Session, meal: Meal) -> Meal:
        """Reload a meal with its ingredient rows for the detail view"""
        return MealRepository(db).get_with_ingredients(meal.id)

    @staticmethod
    def create_meal(db: Session, user: User, payload: MealCreate) -> Meal:
        meal = MealRepository(db).create(
            Meal(user_id=user.id, name=payload.name, description=payload.description)
        )
        logger.info(f"meal_created id={meal.id} user_id={user.id}")
        return meal

    @staticmethod
    def update_meal(db: Session, meal: Meal, payload: MealUpdate) -> Meal:
        changes = payload.model_dump(exclude_unset=True)
        for key, value in changes.items():
            setattr(meal, key, value)
        meal = MealRepository(db).update(meal)
        logger.info(f"meal_updated id={meal.id} fields={sorted(changes)}")
        return meal

    @staticmethod
    def delete_meal(db: Session, meal: Meal) -> MealResponse:
        """Delete a meal and, by cascade, its meal ingredients"""
        snapshot = MealResponse.model_validate(meal)
        MealRepository(db).delete(meal)
        logger.info(f"meal_deleted id={snapshot.id} user_id={snapshot.user_id}")
        return snapshot
