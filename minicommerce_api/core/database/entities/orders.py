"""
Order entity models.

An order is placed by a user and holds one or more order items. Each item
freezes the unit price of its product at the moment the order was created.

Order status follows a small state machine: ``CREATED`` may move to ``PAID``
or ``CANCELLED``; both of those are terminal.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional

from sqlmodel import Field

from ..base import Base, utc_now


class OrderStatus(str, Enum):
    """Lifecycle status of an order."""

    CREATED = "CREATED"
    PAID = "PAID"
    CANCELLED = "CANCELLED"

    @classmethod
    def allowed(cls) -> List[str]:
        """Names of every status, in declaration order."""
        return [status.value for status in cls]

    @property
    def is_terminal(self) -> bool:
        return self is not OrderStatus.CREATED


class OrderBase(Base):
    """Base fields for an order."""

    user_id: int = Field(foreign_key="users.id", index=True, description="Customer who placed the order")
    status: str = Field(default=OrderStatus.CREATED.value, max_length=16, description="Order status")
    total: Decimal = Field(default=Decimal("0.00"), ge=0, max_digits=12, decimal_places=2)


class Order(OrderBase, table=True):
    """Persistent customer order.

    Table: orders
    """

    __tablename__ = "orders"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, nullable=False)

    @property
    def order_status(self) -> OrderStatus:
        return OrderStatus(self.status)

    def __repr__(self) -> str:
        return f"Order(id={self.id}, user_id={self.user_id}, status={self.status}, total={self.total})"


class OrderItemBase(Base):
    """Base fields for an order line."""

    order_id: Optional[int] = Field(default=None, foreign_key="orders.id", ondelete="CASCADE", index=True)
    product_id: int = Field(foreign_key="products.id", index=True)
    quantity: int = Field(ge=1)
    unit_price: Decimal = Field(max_digits=12, decimal_places=2)
    line_total: Decimal = Field(max_digits=12, decimal_places=2)


class OrderItem(OrderItemBase, table=True):
    """Persistent order line.

    Table: order_items
    """

    __tablename__ = "order_items"

    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utc_now, nullable=False)
