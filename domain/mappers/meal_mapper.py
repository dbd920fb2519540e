"""
Meal domain mappers.
Handles transformation between meal ORM models and response DTOs.
"""

from domain.models import Meal
from domain.schemas.ingredient_schemas import IngredientResponse
from domain.schemas.meal_schemas import (
    MealDetailResponse,
    MealIngredientDetail,
    NutritionTotals,
)


class MealMapper:
    """Mapper for meal-related transformations."""

    @staticmethod
    def totals(meal: Meal) -> NutritionTotals:
        """Nutrition of a whole meal: per-serving values scaled by servings and summed"""
        totals = {"calories": 0.0, "carbohydrates": 0.0, "fat": 0.0, "protein": 0.0}
        for row in meal.meal_ingredients:
            for key in totals:
                totals[key] += row.servings * (getattr(row.ingredient, key) or 0.0)
        return NutritionTotals(**{k: round(v, 2) for k, v in totals.items()})

    @staticmethod
    def to_detail_response(meal: Meal) -> MealDetailResponse:
        """
        Convert a Meal with loaded meal ingredients to MealDetailResponse.

        Args:
            meal: Meal ORM instance; meal_ingredients and their ingredient are read

        Returns:
            MealDetailResponse including nutrition totals
        """
        return MealDetailResponse(
            id=meal.id,
            user_id=meal.user_id,
            name=meal.name,
            description=meal.description,
            created_at=meal.created_at,
            updated_at=meal.updated_at,
            meal_ingredients=[
                MealIngredientDetail(
                    id=row.id,
                    ingredient_id=row.ingredient_id,
                    servings=row.servings,
                    ingredient=IngredientResponse.model_validate(row.ingredient),
                )
                for row in meal.meal_ingredients
            ],
            totals=MealMapper.totals(meal),
        )
