"""Path parameter validators.

Identifiers are positive integers that fit a 32-bit signed column. A parent
resource named in the path (the meal in /meals/{meal_id}/meal-ingredients)
that is malformed is a bad request; the resource a route addresses that is
malformed is simply not found.
"""

import re
from typing import Optional

from app.exceptions import NotFoundError, ServiceValidationError
from domain.schemas.base import MAX_ID

_ID_PATTERN = re.compile(r"[0-9]+")


def parse_id(value: Optional[str]) -> Optional[int]:
    """Return the integer id for ``value`` or None when it is not a valid id"""
    if value is None or not _ID_PATTERN.fullmatch(value):
        return None
    parsed = int(value)
    if parsed < 1 or parsed > MAX_ID:
        return None
    return parsed


def parent_id(value: Optional[str], resource: str = "Meal") -> int:
    parsed = parse_id(value)
    if parsed is None:
        raise ServiceValidationError(
            f"Invalid {resource} ID: {value!r}", code="INVALID_PARENT_ID"
        )
    return parsed


def resource_id(value: Optional[str], resource: str) -> int:
    parsed = parse_id(value)
    if parsed is None:
        raise NotFoundError(f"{resource} {value!r} not found", code="INVALID_ID")
    return parsed
