"""
Product I/O models for API requests and responses.

Prices must be strictly positive with at most two decimal places. Patch
requests only change the fields that are present in the body.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Optional

from pydantic import Field, StringConstraints

from .common import ApiModel, EntityId, Money

ProductName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)]
Sku = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=40)]
Price = Annotated[Decimal, Field(gt=0, max_digits=12, decimal_places=2)]


class ProductCreate(ApiModel):
    """Schema for creating a product."""

    name: ProductName = Field(description="Product name", examples=["Laptop"])
    sku: Sku = Field(description="Stock keeping unit, unique per product", examples=["SKU-LAPTOP-001"])
    price: Price = Field(description="Unit price", examples=["999.99"])
    stock: int = Field(default=0, ge=0, description="Units in stock")
    category_id: EntityId = Field(description="Identifier of the owning category")


class ProductPatch(ApiModel):
    """Schema for partially updating a product."""

    name: Optional[ProductName] = None
    sku: Optional[Sku] = None
    price: Optional[Price] = None
    stock: Optional[int] = Field(default=None, ge=0)
    category_id: Optional[EntityId] = None


class ProductRead(ApiModel):
    """Schema for reading a product, including its category's name."""

    id: int
    name: str
    sku: str
    price: Money
    stock: int
    category_id: int
    category_name: str
