"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    build_engine,
    init_database,
    get_db_session,
)
from domain.models.user import User
from domain.models.ingredient import Ingredient
from domain.models.meal import Meal, MealIngredient

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "build_engine",
    "init_database",
    "get_db_session",
    # Models
    "User",
    "Ingredient",
    "Meal",
    "MealIngredient",
]
