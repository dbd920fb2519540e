"""Login route"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from api.dependencies import get_db
from domain.schemas.user_schemas import LoginRequest, TokenResponse
from services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("", response_model=TokenResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """Exchange email and password for an access token"""
    user = AuthService.authenticate(db, payload.email, payload.password)
    return TokenResponse(token=AuthService.create_access_token(user))
