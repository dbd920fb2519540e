from pydantic import EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from domain.schemas.base import CamelModel


class UserCreate(CamelModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)
    calories: Optional[int] = Field(None, ge=0, le=20000)

    @field_validator("email")
    def normalize_email(cls, v):
        return v.lower().strip()


class UserResponse(CamelModel):
    id: int
    username: str
    email: str
    admin: bool
    calories: Optional[int] = None
    created_at: Optional[datetime] = None


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator("email")
    def normalize_email(cls, v):
        return v.lower().strip()


class TokenResponse(CamelModel):
    token: str
