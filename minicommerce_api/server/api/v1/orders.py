"""
Order Endpoints.

Placing an order reserves stock and freezes prices; its status can then be
moved once, from CREATED to PAID or CANCELLED.
"""

from typing import List

from fastapi import APIRouter, Response, status

from minicommerce_api.core.models.io.errors import ApiError
from minicommerce_api.core.models.io.orders import OrderCreate, OrderRead, OrderStatusPatch
from minicommerce_api.server.api.v1.params import IdPath
from minicommerce_api.server.core import constant
from minicommerce_api.server.services.deps import OrderServiceDep

router = APIRouter(tags=["orders"])


@router.post(
    "",
    response_model=OrderRead,
    status_code=status.HTTP_201_CREATED,
    summary="Place Order",
    description=(
        "Place an order for a user. Every line is checked against the product's stock; "
        "if any line fails, nothing is ordered and no stock changes."
    ),
    response_description="The created order with its lines; its URL is returned in the Location header.",
    responses={
        400: {"model": ApiError, "description": "Validation failed, bad quantity or insufficient stock"},
        404: {"model": ApiError, "description": "User or product not found"},
    },
)
async def create_order(payload: OrderCreate, response: Response, service: OrderServiceDep) -> OrderRead:
    """
    Place a new order.

    - **userId**: Customer placing the order.
    - **items**: At least one ``{productId, quantity}`` line.

    Each line's unit price is the product's current price; the order total
    is the sum of the line totals. The new order is ``CREATED``.
    """
    order = await service.create(payload)
    response.headers["Location"] = f"{constant.API_PREFIX}/orders/{order.id}"
    return order


@router.get(
    "",
    response_model=List[OrderRead],
    summary="List Orders",
    description="Retrieve every order with its lines, ordered by id.",
)
async def list_orders(service: OrderServiceDep) -> List[OrderRead]:
    return await service.list()


@router.get(
    "/{order_id}",
    response_model=OrderRead,
    summary="Get Order",
    description="Retrieve a single order with its lines.",
    responses={404: {"model": ApiError, "description": "Order not found"}},
)
async def get_order(order_id: IdPath, service: OrderServiceDep) -> OrderRead:
    return await service.get(order_id)


@router.patch(
    "/{order_id}",
    response_model=OrderRead,
    summary="Change Order Status",
    description="Move a CREATED order to PAID or CANCELLED. Both are final.",
    responses={
        400: {"model": ApiError, "description": "Invalid status or order already CREATED"},
        404: {"model": ApiError, "description": "Order not found"},
        409: {"model": ApiError, "description": "Order status can no longer change"},
    },
)
async def patch_order_status(order_id: IdPath, payload: OrderStatusPatch, service: OrderServiceDep) -> OrderRead:
    """
    Change the status of an order.

    - **status**: ``PAID`` or ``CANCELLED``; case and surrounding blanks are ignored.
    """
    return await service.patch_status(order_id, payload)


@router.delete(
    "/{order_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Order",
    description="Delete an order together with its lines.",
    responses={404: {"model": ApiError, "description": "Order not found"}},
)
async def delete_order(order_id: IdPath, service: OrderServiceDep) -> Response:
    await service.delete(order_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
