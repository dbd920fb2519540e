"""
User account model.
"""

from sqlalchemy import Boolean, Column, Integer, String, TIMESTAMP, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from domain.models.database import Base


class User(Base):
    """User account; owns meals"""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_digest = Column(String(255), nullable=False)
    admin = Column(Boolean, nullable=False, default=False)
    calories = Column(Integer)  # daily calorie target
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    # Relationships
    meals = relationship(
        "Meal",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        CheckConstraint("calories IS NULL OR calories >= 0", name="ck_user_calories_nonneg"),
    )

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
