"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.base import CamelModel
from domain.schemas.user_schemas import (
    UserCreate,
    UserResponse,
    LoginRequest,
    TokenResponse,
)
from domain.schemas.ingredient_schemas import (
    IngredientCreate,
    IngredientUpdate,
    IngredientResponse,
)
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealDetailResponse,
    MealIngredientDetail,
    NutritionTotals,
)
from domain.schemas.meal_ingredient_schemas import (
    MealIngredientCreate,
    MealIngredientUpdate,
    MealIngredientResponse,
)

__all__ = [
    "CamelModel",
    # User schemas
    "UserCreate",
    "UserResponse",
    "LoginRequest",
    "TokenResponse",
    # Ingredient schemas
    "IngredientCreate",
    "IngredientUpdate",
    "IngredientResponse",
    # Meal schemas
    "MealCreate",
    "MealUpdate",
    "MealResponse",
    "MealDetailResponse",
    "MealIngredientDetail",
    "NutritionTotals",
    # Meal ingredient schemas
    "MealIngredientCreate",
    "MealIngredientUpdate",
    "MealIngredientResponse",
]
