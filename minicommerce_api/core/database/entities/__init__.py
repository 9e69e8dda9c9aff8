"""
Database entity models.

Each module holds the SQLModel table classes of one business area:

- users: shop customers
- categories: product groupings with unique slugs
- products: catalog items
- orders: orders, order items and the order status enum
- reviews: product reviews
"""

from .categories import Category
from .orders import Order, OrderItem, OrderStatus
from .products import Product
from .reviews import Review
from .users import User

__all__ = [
    "Category",
    "Order",
    "OrderItem",
    "OrderStatus",
    "Product",
    "Review",
    "User",
]
