"""Meal ingredient routes, nested under /meals/{meal_id}"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from api.dependencies import (
    get_db,
    get_owned_meal,
    get_meal_ingredient,
    get_meal_ingredient_for_update,
)
from domain.models import Meal, MealIngredient
from domain.schemas.meal_ingredient_schemas import (
    MealIngredientCreate,
    MealIngredientUpdate,
    MealIngredientResponse,
)
from services.meal_ingredient_service import MealIngredientService

router = APIRouter(prefix="/meals", tags=["Meal Ingredients"])


@router.get(
    "/{meal_id}/meal-ingredients", response_model=List[MealIngredientResponse]
)
def list_meal_ingredients(
    meal: Meal = Depends(get_owned_meal), db: Session = Depends(get_db)
):
    """List the ingredient rows of a meal owned by the caller"""
    rows = MealIngredientService.list_for_meal(db, meal)
    return [MealIngredientResponse.model_validate(r) for r in rows]


@router.get(
    "/{meal_id}/meal-ingredients/{meal_ingredient_id}",
    response_model=MealIngredientResponse,
)
def get_meal_ingredient_route(row: MealIngredient = Depends(get_meal_ingredient)):
    return MealIngredientResponse.model_validate(row)


@router.post("/{meal_id}/meal-ingredients", response_model=MealIngredientResponse)
def create_meal_ingredient(
    payload: MealIngredientCreate,
    meal: Meal = Depends(get_owned_meal),
    db: Session = Depends(get_db),
):
    """
    Add an ingredient to a meal.

    The meal id comes from the path; the body carries ingredientId and servings.
    Responds 200 with the created row.
    """
    row = MealIngredientService.create(db, meal, payload)
    return MealIngredientResponse.model_validate(row)


@router.put(
    "/{meal_id}/meal-ingredients/{meal_ingredient_id}",
    response_model=MealIngredientResponse,
)
def update_meal_ingredient(
    payload: MealIngredientUpdate,
    row: MealIngredient = Depends(get_meal_ingredient_for_update),
    db: Session = Depends(get_db),
):
    """Change the ingredient and/or servings of a row; the id is kept"""
    row = MealIngredientService.update(db, row, payload)
    return MealIngredientResponse.model_validate(row)


@router.delete(
    "/{meal_id}/meal-ingredients/{meal_ingredient_id}",
    response_model=MealIngredientResponse,
)
def delete_meal_ingredient(
    row: MealIngredient = Depends(get_meal_ingredient),
    db: Session = Depends(get_db),
):
    """Delete a row and echo it back as it was before deletion"""
    return MealIngredientService.delete(db, row)
