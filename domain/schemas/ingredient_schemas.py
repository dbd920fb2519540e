from pydantic import Field, field_validator
from typing import Optional

from domain.schemas.base import CamelModel


class IngredientCreate(CamelModel):
    """Per-serving nutritional values for a reference ingredient"""

    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    serving_size: Optional[float] = Field(None, gt=0, description="Serving size in grams")
    calories: float = Field(0, ge=0)
    carbohydrates: float = Field(0, ge=0)
    fat: float = Field(0, ge=0)
    protein: float = Field(0, ge=0)

    @field_validator("name")
    def normalize_name(cls, v):
        return v.strip()


class IngredientUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    serving_size: Optional[float] = Field(None, gt=0)
    calories: Optional[float] = Field(None, ge=0)
    carbohydrates: Optional[float] = Field(None, ge=0)
    fat: Optional[float] = Field(None, ge=0)
    protein: Optional[float] = Field(None, ge=0)

    @field_validator("name")
    def normalize_name(cls, v):
        return v.strip() if v is not None else v


class IngredientResponse(CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    serving_size: Optional[float] = None
    calories: float
    carbohydrates: float
    fat: float
    protein: float
