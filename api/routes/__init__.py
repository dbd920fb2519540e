"""API routes package"""

from . import auth, users, ingredients, meals, meal_ingredients, health

__all__ = ["auth", "users", "ingredients", "meals", "meal_ingredients", "health"]
