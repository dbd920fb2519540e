"""Meal routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from api.dependencies import get_db, get_current_user, get_user_meal
from domain.mappers import MealMapper
from domain.models import Meal, User
from domain.schemas.meal_schemas import (
    MealCreate,
    MealUpdate,
    MealResponse,
    MealDetailResponse,
)
from services.meal_service import MealService

router = APIRouter(prefix="/meals", tags=["Meals"])


@router.get("", response_model=List[MealResponse])
def list_meals(
    current_user: User = Depends(get_current_user), db: Session = Depends(get_db)
):
    """All meals owned by the caller"""
    meals = MealService.list_meals(db, current_user)
    return [MealResponse.model_validate(m) for m in meals]


@router.get("/{meal_id}", response_model=MealDetailResponse)
def get_meal(meal: Meal = Depends(get_user_meal), db: Session = Depends(get_db)):
    """A meal with its ingredient rows and nutrition totals"""
    return MealMapper.to_detail_response(MealService.get_meal_detail(db, meal))


@router.post("", response_model=MealResponse)
def create_meal(
    payload: MealCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    meal = MealService.create_meal(db, current_user, payload)
    return MealResponse.model_validate(meal)


@router.put("/{meal_id}", response_model=MealResponse)
def update_meal(
    payload: MealUpdate,
    meal: Meal = Depends(get_user_meal),
    db: Session = Depends(get_db),
):
    meal = MealService.update_meal(db, meal, payload)
    return MealResponse.model_validate(meal)


@router.delete("/{meal_id}", response_model=MealResponse)
def delete_meal(meal: Meal = Depends(get_user_meal), db: Session = Depends(get_db)):
    """Delete a meal together with its meal ingredients"""
    return MealService.delete_meal(db, meal)
