from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from domain.models import Meal, MealIngredient
from domain.schemas.meal_ingredient_schemas import (
    MealIngredientCreate,
    MealIngredientUpdate,
    MealIngredientResponse,
)
from repositories import IngredientRepository, MealIngredientRepository
from app.exceptions import ServiceValidationError

logger = logging.getLogger("mealtracker.meal_ingredient")


class MealIngredientService:
    """
    Business logic for a meal's ingredient rows.

    The meal passed in has already been resolved and checked for ownership
    by the request guards; these methods only validate references and write.
    """

    @staticmethod
    def _ensure_ingredient_exists(db: Session, ingredient_id: int) -> None:
        if not IngredientRepository(db).exists(ingredient_id):
            raise ServiceValidationError(
                f"Ingredient {ingredient_id} does not exist",
                details={"ingredientId": ingredient_id},
            )

    @staticmethod
    def list_for_meal(db: Session, meal: Meal) -> List[MealIngredient]:
        return MealIngredientRepository(db).get_by_meal_id(meal.id)

    @staticmethod
    def create(db: Session, meal: Meal, payload: MealIngredientCreate) -> MealIngredient:
        """
        Add an ingredient to a meal.

        Raises:
            ServiceValidationError: if the ingredient does not exist
        """
        MealIngredientService._ensure_ingredient_exists(db, payload.ingredient_id)

        try:
            row = MealIngredientRepository(db).create_for_meal(
                meal_id=meal.id,
                ingredient_id=payload.ingredient_id,
                servings=payload.servings,
            )
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"meal_ingredient_create_failed meal_id={meal.id} error={e.orig}")
            raise ServiceValidationError("Meal ingredient violates a constraint")

        logger.info(
            f"meal_ingredient_created id={row.id} meal_id={meal.id} "
            f"ingredient_id={row.ingredient_id} servings={row.servings}"
        )
        return row

    @staticmethod
    def update(
        db: Session, row: MealIngredient, payload: MealIngredientUpdate
    ) -> MealIngredient:
        """Change the ingredient reference and/or servings in place"""
        row_id = row.id
        if payload.ingredient_id is not None:
            MealIngredientService._ensure_ingredient_exists(db, payload.ingredient_id)
            row.ingredient_id = payload.ingredient_id
        if payload.servings is not None:
            row.servings = payload.servings

        try:
            row = MealIngredientRepository(db).update(row)
        except IntegrityError as e:
            db.rollback()
            logger.warning(f"meal_ingredient_update_failed id={row_id} error={e.orig}")
            raise ServiceValidationError("Meal ingredient violates a constraint")

        logger.info(
            f"meal_ingredient_updated id={row.id} meal_id={row.meal_id} "
            f"ingredient_id={row.ingredient_id} servings={row.servings}"
        )
        return row

    @staticmethod
    def delete(db: Session, row: MealIngredient) -> MealIngredientResponse:
        """Remove a row and return it as it was before deletion"""
        snapshot = MealIngredientResponse.model_validate(row)
        MealIngredientRepository(db).delete(row)
        logger.info(f"meal_ingredient_deleted id={snapshot.id} meal_id={snapshot.meal_id}")
        return snapshot
