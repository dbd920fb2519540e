from pydantic import Field, model_validator
from typing import Optional, List
from datetime import datetime

from domain.schemas.base import CamelModel
from domain.schemas.ingredient_schemas import IngredientResponse


class MealCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class MealUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None

    @model_validator(mode="after")
    def require_a_change(self):
        if self.name is None and self.description is None:
            raise ValueError("Provide name and/or description")
        return self


class MealResponse(CamelModel):
    id: int
    user_id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class NutritionTotals(CamelModel):
    """Sum of servings * per-serving values over a meal's ingredients"""

    calories: float = 0.0
    carbohydrates: float = 0.0
    fat: float = 0.0
    protein: float = 0.0


class MealIngredientDetail(CamelModel):
    id: int
    ingredient_id: int
    servings: float
    ingredient: IngredientResponse


class MealDetailResponse(MealResponse):
    meal_ingredients: List[MealIngredientDetail] = []
    totals: NutritionTotals
