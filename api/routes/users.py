"""User registration and profile routes"""

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from app.config import settings
from api.dependencies import get_db, get_current_user
from domain.models import User
from domain.schemas.user_schemas import UserCreate, UserResponse
from services.user_service import UserService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse)
def register_user(
    payload: UserCreate, response: Response, db: Session = Depends(get_db)
):
    """Register a user; the session token is returned in the auth header"""
    user, token = UserService.register(db, payload)
    response.headers[settings.auth_header_name] = token
    return UserResponse.model_validate(user)


@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    return UserResponse.model_validate(current_user)
