"""
API dependencies for dependency injection.

The request guards below run before body validation, so a request is
rejected for auth, ownership or path problems before its payload is looked at.
"""

from typing import Generator, Optional
import logging

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import ForbiddenError, NotFoundError, ServiceValidationError
from api.validators import parent_id, parse_id, resource_id
from domain.models import get_db_session, Meal, MealIngredient, User
from repositories import MealRepository, MealIngredientRepository
from services.auth_service import AuthService

logger = logging.getLogger("mealtracker.api.guards")


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_current_user(
    token: Optional[str] = Header(None, alias=settings.auth_header_name),
    db: Session = Depends(get_db),
) -> User:
    """Authenticate the request from its token header (401 on failure)"""
    return AuthService.get_user_from_token(db, token)


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.admin:
        raise ForbiddenError("Admin privileges required")
    return current_user


def ensure_owner(meal: Meal, user: User) -> None:
    if meal.user_id != user.id:
        logger.warning(f"ownership_denied meal_id={meal.id} user_id={user.id}")
        raise ForbiddenError("You do not own this meal")


def get_user_meal(
    meal_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Meal:
    """Meal addressed directly by /meals/{meal_id}: 404 when malformed or missing"""
    mid = resource_id(meal_id, "Meal")
    meal = MealRepository(db).get_by_id(mid)
    if not meal:
        raise NotFoundError(f"Meal {mid} not found")
    ensure_owner(meal, current_user)
    return meal


def get_owned_meal(
    meal_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> Meal:
    """Parent meal of a nested route: 400 when malformed or missing, 403 if not owned"""
    mid = parent_id(meal_id, "Meal")
    meal = MealRepository(db).get_by_id(mid)
    if not meal:
        raise ServiceValidationError(f"Meal {mid} not found", code="PARENT_NOT_FOUND")
    ensure_owner(meal, current_user)
    return meal


def get_meal_ingredient(
    meal_ingredient_id: str,
    meal: Meal = Depends(get_owned_meal),
    db: Session = Depends(get_db),
) -> MealIngredient:
    """Meal ingredient within an owned meal (GET, DELETE): 404 when malformed or missing"""
    mi_id = resource_id(meal_ingredient_id, "Meal ingredient")
    row = MealIngredientRepository(db).get_in_meal(meal.id, mi_id)
    if not row:
        raise NotFoundError(f"Meal ingredient {mi_id} not found")
    return row


def get_meal_ingredient_for_update(
    meal_id: str,
    meal_ingredient_id: str,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db),
) -> MealIngredient:
    """
    Guard chain for PUT, which checks in a different order than GET/DELETE:
    ownership (when the meal resolves), then the child id (404), then the
    parent meal id (400), then that the child belongs to the meal (404).
    """
    meal = None
    mid = parse_id(meal_id)
    if mid is not None:
        meal = MealRepository(db).get_by_id(mid)
        if meal:
            ensure_owner(meal, current_user)

    mi_id = resource_id(meal_ingredient_id, "Meal ingredient")
    row = MealIngredientRepository(db).get_by_id(mi_id)
    if not row:
        raise NotFoundError(f"Meal ingredient {mi_id} not found")

    if meal is None:
        mid = parent_id(meal_id, "Meal")
        raise ServiceValidationError(f"Meal {mid} not found", code="PARENT_NOT_FOUND")

    if row.meal_id != meal.id:
        raise NotFoundError(f"Meal ingredient {mi_id} not found")
    return row
