"""Services package - Business logic layer"""

from services.auth_service import AuthService, TokenPayload
from services.user_service import UserService
from services.ingredient_service import IngredientService
from services.meal_service import MealService
from services.meal_ingredient_service import MealIngredientService

__all__ = [
    "AuthService",
    "TokenPayload",
    "UserService",
    "IngredientService",
    "MealService",
    "MealIngredientService",
]
