"""Ingredient service - nutritional reference data management."""

from typing import List
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from domain.models import Ingredient
from domain.schemas.ingredient_schemas import (
    IngredientCreate,
    IngredientUpdate,
    IngredientResponse,
)
from repositories import IngredientRepository
from app.exceptions import ConflictError, NotFoundError

logger = logging.getLogger("mealtracker.ingredient")


class IngredientService:
    """Business logic for the ingredient catalog. Writes are admin-only at the route level."""

    @staticmethod
    def list_ingredients(db: Session, skip: int = 0, limit: int = 100) -> List[Ingredient]:
        return IngredientRepository(db).list_ordered(skip=skip, limit=limit)

    @staticmethod
    def get_ingredient(db: Session, ingredient_id: int) -> Ingredient:
        ingredient = IngredientRepository(db).get_by_id(ingredient_id)
        if not ingredient:
            raise NotFoundError(f"Ingredient {ingredient_id} not found")
        return ingredient

    @staticmethod
    def create_ingredient(db: Session, payload: IngredientCreate) -> Ingredient:
        repo = IngredientRepository(db)
        if repo.get_by_name(payload.name):
            raise ConflictError(f"Ingredient '{payload.name}' already exists")

        try:
            ingredient = repo.create(Ingredient(**payload.model_dump()))
        except IntegrityError:
            db.rollback()
            raise ConflictError(f"Ingredient '{payload.name}' already exists")

        logger.info(f"ingredient_created id={ingredient.id} name={ingredient.name!r}")
        return ingredient

    @staticmethod
    def update_ingredient(
        db: Session, ingredient_id: int, payload: IngredientUpdate
    ) -> Ingredient:
        repo = IngredientRepository(db)
        ingredient = IngredientService.get_ingredient(db, ingredient_id)

        changes = payload.model_dump(exclude_unset=True)
        new_name = changes.get("name")
        if new_name and new_name.lower() != ingredient.name.lower():
            clash = repo.get_by_name(new_name)
            if clash and clash.id != ingredient.id:
                raise ConflictError(f"Ingredient '{new_name}' already exists")

        for key, value in changes.items():
            setattr(ingredient, key, value)

        try:
            ingredient = repo.update(ingredient)
        except IntegrityError:
            db.rollback()
            raise ConflictError(f"Ingredient '{new_name}' already exists")

        logger.info(f"ingredient_updated id={ingredient.id} fields={sorted(changes)}")
        return ingredient

    @staticmethod
    def delete_ingredient(db: Session, ingredient_id: int) -> IngredientResponse:
        """Delete an ingredient no meal refers to; returns a snapshot of the deleted row"""
        repo = IngredientRepository(db)
        ingredient = IngredientService.get_ingredient(db, ingredient_id)

        references = repo.count_references(ingredient_id)
        if references:
            raise ConflictError(
                f"Ingredient {ingredient_id} is used by {references} meal ingredient(s)",
                details={"references": references},
            )

        snapshot = IngredientResponse.model_validate(ingredient)
        repo.delete(ingredient)
        logger.info(f"ingredient_deleted id={ingredient_id}")
        return snapshot
