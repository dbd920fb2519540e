"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.ingredient_repository import IngredientRepository
from repositories.meal_repository import MealRepository, MealIngredientRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "IngredientRepository",
    "MealRepository",
    "MealIngredientRepository",
]
