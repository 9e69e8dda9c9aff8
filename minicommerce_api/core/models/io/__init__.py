"""
API I/O models.

Pydantic schemas describing the request bodies accepted and the response
bodies produced by the HTTP API, one module per resource.
"""

from .categories import CategoryCreate, CategoryRead, CategoryUpdate
from .errors import ApiError, FieldViolation
from .orders import OrderCreate, OrderItemCreate, OrderItemRead, OrderRead, OrderStatusPatch
from .products import ProductCreate, ProductPatch, ProductRead
from .reviews import ReviewCreate, ReviewPatch, ReviewRead
from .users import UserCreate, UserRead, UserUpdate

__all__ = [
    "ApiError",
    "CategoryCreate",
    "CategoryRead",
    "CategoryUpdate",
    "FieldViolation",
    "OrderCreate",
    "OrderItemCreate",
    "OrderItemRead",
    "OrderRead",
    "OrderStatusPatch",
    "ProductCreate",
    "ProductPatch",
    "ProductRead",
    "ReviewCreate",
    "ReviewPatch",
    "ReviewRead",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
