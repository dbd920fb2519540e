"""
Ingredient Repository - Data access layer for the nutritional reference table
"""

from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from domain.models import Ingredient, MealIngredient
from repositories.base import BaseRepository


class IngredientRepository(BaseRepository[Ingredient]):
    """Repository for ingredient reference data"""

    def __init__(self, db: Session):
        super().__init__(db, Ingredient)

    def get_by_name(self, name: str) -> Optional[Ingredient]:
        """Get ingredient by name (case-insensitive)"""
        normalized_name = name.lower().strip()
        return (
            self.db.query(Ingredient)
            .filter(func.lower(Ingredient.name) == normalized_name)
            .first()
        )

    def list_ordered(self, skip: int = 0, limit: int = 100) -> List[Ingredient]:
        """List ingredients alphabetically"""
        return (
            self.db.query(Ingredient)
            .order_by(Ingredient.name)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def count_references(self, ingredient_id: int) -> int:
        """Number of meal ingredient rows pointing at this ingredient"""
        return (
            self.db.query(func.count(MealIngredient.id))
            .filter(MealIngredient.ingredient_id == ingredient_id)
            .scalar()
        )
