"""Ingredient catalog routes"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from api.dependencies import get_db, get_current_user, require_admin
from api.validators import resource_id
from domain.models import User
from domain.schemas.ingredient_schemas import (
    IngredientCreate,
    IngredientUpdate,
    IngredientResponse,
)
from services.ingredient_service import IngredientService

router = APIRouter(prefix="/ingredients", tags=["Ingredients"])


@router.get("", response_model=List[IngredientResponse])
def list_ingredients(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """List ingredients alphabetically"""
    items = IngredientService.list_ingredients(db, skip=skip, limit=limit)
    return [IngredientResponse.model_validate(i) for i in items]


@router.get("/{ingredient_id}", response_model=IngredientResponse)
def get_ingredient(
    ingredient_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    ingredient = IngredientService.get_ingredient(
        db, resource_id(ingredient_id, "Ingredient")
    )
    return IngredientResponse.model_validate(ingredient)


@router.post("", response_model=IngredientResponse)
def create_ingredient(
    payload: IngredientCreate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Add an ingredient to the catalog (admin only)"""
    ingredient = IngredientService.create_ingredient(db, payload)
    return IngredientResponse.model_validate(ingredient)


@router.put("/{ingredient_id}", response_model=IngredientResponse)
def update_ingredient(
    ingredient_id: str,
    payload: IngredientUpdate,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    ingredient = IngredientService.update_ingredient(
        db, resource_id(ingredient_id, "Ingredient"), payload
    )
    return IngredientResponse.model_validate(ingredient)


@router.delete("/{ingredient_id}", response_model=IngredientResponse)
def delete_ingredient(
    ingredient_id: str,
    admin: User = Depends(require_admin),
    db: Session = Depends(get_db),
):
    """Delete an unused ingredient (admin only); 409 while meals still use it"""
    return IngredientService.delete_ingredient(
        db, resource_id(ingredient_id, "Ingredient")
    )
