"""
Order I/O models for API requests and responses.

An order request lists the products and quantities to buy; prices are taken
from the products at creation time and echoed back per line.
"""

from __future__ import annotations

from typing import Annotated, List

from pydantic import Field, StringConstraints

from .common import ApiModel, EntityId, Money


class OrderItemCreate(ApiModel):
    """One requested order line."""

    product_id: EntityId = Field(description="Product to buy")
    quantity: int = Field(ge=1, description="Units to buy, at least 1")


class OrderCreate(ApiModel):
    """Schema for placing an order."""

    user_id: EntityId = Field(description="Customer placing the order")
    items: List[OrderItemCreate] = Field(min_length=1, description="Order lines, at least one")


class OrderStatusPatch(ApiModel):
    """Schema for changing the status of an order."""

    status: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = Field(
        description="Target status: PAID or CANCELLED", examples=["PAID"]
    )


class OrderItemRead(ApiModel):
    """Schema for reading an order line."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: Money
    line_total: Money


class OrderRead(ApiModel):
    """Schema for reading an order with its lines."""

    id: int
    user_id: int
    status: str
    total: Money
    items: List[OrderItemRead]
