"""
Business services of the Mini Commerce API.

Each service wraps the repositories of one resource, enforces the business
rules and returns API response models. Rule violations are raised as
``minicommerce_api.core.errors`` exceptions.
"""

from .categories import CategoryService
from .orders import OrderService
from .products import ProductService
from .reviews import ReviewService
from .users import UserService

__all__ = [
    "CategoryService",
    "OrderService",
    "ProductService",
    "ReviewService",
    "UserService",
]
