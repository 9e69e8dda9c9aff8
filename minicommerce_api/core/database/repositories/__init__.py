"""
Database repository layer using SQLModel.

Each module provides type-safe data access operations for its SQLModel
entities, built on the shared ``SQLModelRepository`` CRUD implementation.

Modules:
- base: Repository interface, shared CRUD implementation and QueryBuilder
- users: User repository
- categories: Category repository
- products: Product repository
- orders: Order and order item repository
- reviews: Review repository
"""

from .base import AsyncBaseRepository, QueryBuilder, SQLModelRepository
from .categories import CategoryRepository
from .orders import InsufficientStockError, OrderRepository
from .products import ProductRepository
from .reviews import ReviewRepository
from .users import UserRepository

__all__ = [
    "AsyncBaseRepository",
    "CategoryRepository",
    "InsufficientStockError",
    "OrderRepository",
    "ProductRepository",
    "QueryBuilder",
    "ReviewRepository",
    "SQLModelRepository",
    "UserRepository",
]
