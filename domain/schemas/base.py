"""Shared schema configuration.

The public API speaks camelCase (``mealId``, ``ingredientId``) while the
models and services use snake_case attributes.
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

# Identifiers are stored in 32-bit signed integer columns
MAX_ID = 2_147_483_647


class CamelModel(BaseModel):
    """Base schema that reads snake_case attributes and emits camelCase JSON"""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
        "allow_inf_nan": False,
    }
