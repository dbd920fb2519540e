from typing import Tuple
from sqlalchemy.orm import Session
import logging

from domain.models import User
from domain.schemas.user_schemas import UserCreate
from repositories import UserRepository
from services.auth_service import AuthService
from app.exceptions import ConflictError

logger = logging.getLogger("mealtracker.user")


class UserService:
    """Business logic for user registration"""

    @staticmethod
    def register(db: Session, payload: UserCreate) -> Tuple[User, str]:
        """
        Register a new (non-admin) user.

        Returns:
            (user, token) so the caller can hand the session token straight back

        Raises:
            ConflictError: if the email is already registered
        """
        user_repo = UserRepository(db)
        if user_repo.get_by_email(payload.email):
            raise ConflictError(f"User with email {payload.email} already exists")

        user = user_repo.create_user(
            username=payload.username,
            email=payload.email,
            password_digest=AuthService.hash_password(payload.password),
            calories=payload.calories,
        )
        logger.info(f"user_registered user_id={user.id}")
        return user, AuthService.create_access_token(user)
