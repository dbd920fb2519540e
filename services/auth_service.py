"""Authentication: password hashing, token issue and token decoding.

Tokens are HS256 JWTs carrying the user id in ``sub``. They are sent back
by clients in the ``x-auth-token`` header.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

import bcrypt
from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError
from pydantic import BaseModel
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import User
from repositories import UserRepository

logger = logging.getLogger("mealtracker.auth")


class TokenPayload(BaseModel):
    """Decoded access token claims"""

    sub: str  # user id
    exp: datetime
    iat: datetime
    username: Optional[str] = None
    admin: bool = False

    @property
    def user_id(self) -> int:
        return int(self.sub)


class AuthService:
    """Credential checks and token handling"""

    @staticmethod
    def hash_password(password: str) -> str:
        salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def verify_password(password: str, password_digest: str) -> bool:
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"), password_digest.encode("utf-8")
            )
        except ValueError:
            # digest is not a bcrypt hash
            return False

    @staticmethod
    def create_access_token(
        user: User, expires_delta: Optional[timedelta] = None
    ) -> str:
        """
        Issue a signed access token for a user.

        Args:
            user: the authenticated user
            expires_delta: custom lifetime; defaults to settings.jwt_expire_minutes

        Returns:
            Encoded JWT string
        """
        if expires_delta is None:
            expires_delta = timedelta(minutes=settings.jwt_expire_minutes)

        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "username": user.username,
            "admin": bool(user.admin),
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(
            payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm
        )

    @staticmethod
    def decode_token(token: str) -> TokenPayload:
        """
        Decode and validate an access token.

        Raises:
            UnauthorizedError: if the token is expired, tampered with or malformed
        """
        try:
            claims = jwt.decode(
                token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
            )
            payload = TokenPayload(**claims)
            if not payload.sub.isdigit():
                raise ValueError(f"subject is not a user id: {payload.sub!r}")
            return payload
        except ExpiredSignatureError as e:
            logger.debug(f"token_expired error={e}")
            raise UnauthorizedError("Token has expired", code="TOKEN_EXPIRED") from e
        except (JWTError, ValueError, TypeError) as e:
            logger.warning(f"token_invalid error={e}")
            raise UnauthorizedError("Invalid token", code="TOKEN_INVALID") from e

    @staticmethod
    def get_user_from_token(db: Session, token: Optional[str]) -> User:
        """Resolve the user a token was issued to"""
        if not token or not token.strip():
            raise UnauthorizedError(
                "Access denied. No token provided.", code="TOKEN_MISSING"
            )

        payload = AuthService.decode_token(token.strip())
        user = UserRepository(db).get_by_id(payload.user_id)
        if not user:
            logger.warning(f"token_user_missing user_id={payload.user_id}")
            raise UnauthorizedError("Invalid token", code="TOKEN_INVALID")
        return user

    @staticmethod
    def authenticate(db: Session, email: str, password: str) -> User:
        """Check login credentials; the same error is raised for unknown email and bad password"""
        user = UserRepository(db).get_by_email(email)
        if not user or not AuthService.verify_password(password, user.password_digest):
            logger.info(f"login_failed email={email}")
            raise UnauthorizedError("Invalid email or password", code="INVALID_CREDENTIALS")

        logger.info(f"login_succeeded user_id={user.id}")
        return user
