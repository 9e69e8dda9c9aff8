"""
Order repository implementation.

Provides data access for orders and their items. An order, its items and the
stock it takes are written in a single transaction; deleting an order removes
its items first.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from sqlalchemy import delete as sa_delete
from sqlalchemy import update as sa_update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import select

from ..entities.orders import Order, OrderItem
from ..entities.products import Product
from .base import SQLModelRepository

OrderLine = Tuple[OrderItem, str]


class InsufficientStockError(Exception):
    """Raised when a stock decrement would take a product below zero."""

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Insufficient stock for product {product_id}")
        self.product_id = product_id


class OrderRepository(SQLModelRepository[Order]):
    """Repository for order data access operations using SQLModel."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session for database operations
        """
        super().__init__(session, Order)

    async def create_with_items(
        self,
        order: Order,
        items: Sequence[OrderItem],
        stock_decrements: Optional[Mapping[int, int]] = None,
    ) -> Order:
        """Persist an order together with its items in one transaction.

        Each stock decrement is a guarded ``UPDATE`` that only matches while the
        product still has enough stock. Nothing is written unless every
        decrement matches.

        Args:
            order: Order to insert
            items: Items to attach to the order
            stock_decrements: Quantity to take from each product, keyed by product id

        Returns:
            The persisted order

        Raises:
            InsufficientStockError: a product no longer has the requested stock
        """
        decrements = dict(stock_decrements or {})
        self.session.add(order)
        try:
            await self.session.flush()
        except IntegrityError:
            await self.session.rollback()
            raise

        for product_id, quantity in decrements.items():
            stmt = (
                sa_update(Product)
                .where(Product.id == product_id, Product.stock >= quantity)
                .values(stock=Product.stock - quantity)
                .execution_options(synchronize_session=False)
            )
            result = await self.session.execute(stmt)
            if result.rowcount != 1:
                await self.session.rollback()
                raise InsufficientStockError(product_id)

        for item in items:
            item.order_id = order.id
            self.session.add(item)
        await self.commit()
        await self.session.refresh(order)

        # Loaded products still hold the stock read before the update
        for product_id in decrements:
            await self.session.get(Product, product_id, populate_existing=True)
        return order

    async def get_lines(self, order_id: int) -> List[OrderLine]:
        """Get the items of one order together with the product names.

        Args:
            order_id: Order identifier

        Returns:
            ``(item, product_name)`` pairs in insertion order
        """
        lines = await self.get_lines_for_orders([order_id])
        return lines.get(order_id, [])

    async def get_lines_for_orders(self, order_ids: Iterable[int]) -> Dict[int, List[OrderLine]]:
        """Get the items of many orders in one query.

        Args:
            order_ids: Order identifiers

        Returns:
            Mapping of order id to its ``(item, product_name)`` pairs
        """
        ids = list(order_ids)
        grouped: Dict[int, List[OrderLine]] = defaultdict(list)
        if not ids:
            return grouped
        stmt = (
            select(OrderItem, Product.name)
            .join(Product, Product.id == OrderItem.product_id)
            .where(OrderItem.order_id.in_(ids))
            .order_by(OrderItem.id)
        )
        result = await self.session.execute(stmt)
        for item, product_name in result.all():
            grouped[item.order_id].append((item, product_name))
        return grouped

    async def delete(self, entity_id: int) -> bool:
        order = await self.get_by_id(entity_id)
        if order is None:
            return False
        await self.session.execute(sa_delete(OrderItem).where(OrderItem.order_id == entity_id))
        await self.session.delete(order)
        await self.commit()
        return True
