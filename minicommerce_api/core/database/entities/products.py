"""
Product entity models.

Products belong to exactly one category and carry a unique SKU, a price and
the number of units in stock.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from ..base import Base, utc_now


class ProductBase(Base):
    """Base fields for a product."""

    name: str = Field(min_length=1, max_length=120, description="Product name")
    sku: str = Field(min_length=1, max_length=40, description="Stock keeping unit, unique per product")
    price: Decimal = Field(gt=0, max_digits=12, decimal_places=2, description="Unit price")
    stock: int = Field(default=0, ge=0, description="Units available for ordering")
    category_id: int = Field(foreign_key="categories.id", index=True, description="Owning category")


class Product(ProductBase, table=True):
    """Persistent catalog item.

    Table: products
    """

    __tablename__ = "products"
    __table_args__ = (UniqueConstraint("sku", name="uk_products_sku"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, nullable=False)

    def __repr__(self) -> str:
        return f"Product(id={self.id}, sku={self.sku}, stock={self.stock})"
