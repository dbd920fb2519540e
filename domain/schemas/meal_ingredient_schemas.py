from pydantic import Field, model_validator
from typing import Optional

from domain.schemas.base import CamelModel, MAX_ID


class MealIngredientCreate(CamelModel):
    """Body of POST /meals/{mealId}/meal-ingredients; mealId comes from the path"""

    ingredient_id: int = Field(..., gt=0, le=MAX_ID, description="Referenced ingredient ID")
    servings: float = Field(..., gt=0, description="Number of servings in the meal")


class MealIngredientUpdate(CamelModel):
    """Body of PUT /meals/{mealId}/meal-ingredients/{id}"""

    ingredient_id: Optional[int] = Field(None, gt=0, le=MAX_ID)
    servings: Optional[float] = Field(None, gt=0)

    @model_validator(mode="after")
    def require_a_change(self):
        if self.ingredient_id is None and self.servings is None:
            raise ValueError("Provide ingredientId and/or servings")
        return self


class MealIngredientResponse(CamelModel):
    id: int
    meal_id: int
    ingredient_id: int
    servings: float
