"""
Shared building blocks for the API I/O models.

All request and response models use camelCase field names on the wire and
accept snake_case names as well. Money amounts are ``Decimal`` internally and
rendered as JSON numbers.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

Money = Annotated[
    Decimal,
    PlainSerializer(lambda value: float(value), return_type=float, when_used="json"),
]

# Largest value a 64-bit integer key column holds
MAX_ID = 2**63 - 1

EntityId = Annotated[int, Field(le=MAX_ID)]


class ApiModel(BaseModel):
    """Base model for every API schema."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
