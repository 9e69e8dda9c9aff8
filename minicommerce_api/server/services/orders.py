"""
Order service.

Placing an order checks every requested line against the current stock,
freezes each product's price on its line and decrements the stock, all in a
single transaction. Status changes follow ``CREATED -> PAID | CANCELLED``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from minicommerce_api.core.database.entities.orders import Order, OrderItem, OrderStatus
from minicommerce_api.core.database.entities.products import Product
from minicommerce_api.core.database.repositories.orders import InsufficientStockError, OrderLine, OrderRepository
from minicommerce_api.core.database.repositories.products import ProductRepository
from minicommerce_api.core.database.repositories.users import UserRepository
from minicommerce_api.core.errors import BadRequestError, ConflictError, NotFoundError
from minicommerce_api.core.logging_config import get_logger
from minicommerce_api.core.models.io.orders import OrderCreate, OrderItemRead, OrderRead, OrderStatusPatch

logger = get_logger(__name__)

CENT = Decimal("0.01")


def to_read(order: Order, lines: List[OrderLine]) -> OrderRead:
    return OrderRead(
        id=order.id,
        user_id=order.user_id,
        status=order.status,
        total=order.total,
        items=[
            OrderItemRead(
                product_id=item.product_id,
                product_name=product_name,
                quantity=item.quantity,
                unit_price=item.unit_price,
                line_total=item.line_total,
            )
            for item, product_name in lines
        ],
    )


class OrderService:
    """Place, read, transition and delete orders."""

    def __init__(self, session: AsyncSession) -> None:
        self.repository = OrderRepository(session)
        self.users = UserRepository(session)
        self.products = ProductRepository(session)

    async def create(self, payload: OrderCreate) -> OrderRead:
        """Place an order for a user.

        Lines are checked in request order. Stock is only touched once every
        line has passed, and each decrement is re-checked by the database
        when it is written, so a rejected order leaves all products unchanged.
        The same product may appear on several lines; each line draws from
        what the previous ones left.

        Raises:
            NotFoundError: unknown user or product
            BadRequestError: non-positive quantity or insufficient stock
        """
        if await self.users.get_by_id(payload.user_id) is None:
            raise NotFoundError("User not found")

        products: Dict[int, Product] = {}
        remaining: Dict[int, int] = {}
        items: List[OrderItem] = []
        total = Decimal("0.00")

        for line in payload.items:
            product = products.get(line.product_id)
            if product is None:
                product = await self.products.get_by_id(line.product_id)
                if product is None:
                    raise NotFoundError(f"Product not found: {line.product_id}")
                products[product.id] = product
                remaining[product.id] = product.stock

            if line.quantity <= 0:
                raise BadRequestError("Quantity must be >= 1")
            if remaining[product.id] < line.quantity:
                raise BadRequestError(f"Insufficient stock for product {product.id}")
            remaining[product.id] -= line.quantity

            unit_price = Decimal(product.price).quantize(CENT)
            line_total = (unit_price * line.quantity).quantize(CENT)
            items.append(
                OrderItem(
                    product_id=product.id,
                    quantity=line.quantity,
                    unit_price=unit_price,
                    line_total=line_total,
                )
            )
            total += line_total

        decrements = {product_id: product.stock - remaining[product_id] for product_id, product in products.items()}
        order = Order(user_id=payload.user_id, status=OrderStatus.CREATED.value, total=total)
        try:
            order = await self.repository.create_with_items(order, items, decrements)
        except InsufficientStockError as e:
            # Stock moved between the check above and the write
            raise BadRequestError(f"Insufficient stock for product {e.product_id}") from None
        logger.info(f"Created order {order.id} for user {order.user_id}: {len(items)} item(s), total {total}")
        return to_read(order, await self.repository.get_lines(order.id))

    async def list(self) -> List[OrderRead]:
        orders = await self.repository.list()
        lines = await self.repository.get_lines_for_orders(order.id for order in orders)
        return [to_read(order, lines.get(order.id, [])) for order in orders]

    async def get(self, order_id: int) -> OrderRead:
        order = await self._require(order_id)
        return to_read(order, await self.repository.get_lines(order.id))

    async def patch_status(self, order_id: int, payload: OrderStatusPatch) -> OrderRead:
        """Move an order out of ``CREATED``.

        Raises:
            NotFoundError: unknown order
            BadRequestError: unknown target status, or target ``CREATED``
            ConflictError: the order already reached a terminal status
        """
        order = await self._require(order_id)

        try:
            target = OrderStatus(payload.status.strip().upper())
        except ValueError:
            raise BadRequestError(f"Invalid status. Allowed: {', '.join(OrderStatus.allowed())}") from None

        current = order.order_status
        if current.is_terminal:
            raise ConflictError(f"Order status cannot be changed after it is {current.value}")
        if target is OrderStatus.CREATED:
            raise BadRequestError("Order is already CREATED")

        order.status = target.value
        order = await self.repository.update(order)
        logger.info(f"Order {order.id} moved to {order.status}")
        return to_read(order, await self.repository.get_lines(order.id))

    async def delete(self, order_id: int) -> None:
        if not await self.repository.delete(order_id):
            raise NotFoundError("Order not found")
        logger.info(f"Deleted order {order_id}")

    async def _require(self, order_id: int) -> Order:
        order = await self.repository.get_by_id(order_id)
        if order is None:
            raise NotFoundError("Order not found")
        return order
