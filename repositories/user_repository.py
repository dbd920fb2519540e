"""
User Repository - Data access layer for user accounts
"""

from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import User
from app.exceptions import ConflictError


class UserRepository(BaseRepository[User]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)"""
        return (
            self.db.query(User)
            .filter(func.lower(User.email) == email.lower().strip())
            .first()
        )

    def create_user(
        self,
        username: str,
        email: str,
        password_digest: str,
        calories: Optional[int] = None,
        admin: bool = False,
    ) -> User:
        """Create a new user"""
        user = User(
            username=username,
            email=email,
            password_digest=password_digest,
            calories=calories,
            admin=admin,
        )
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"User with email {email} already exists")
