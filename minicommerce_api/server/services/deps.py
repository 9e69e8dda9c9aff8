"""
Service Dependencies.

Provides request-scoped service instances bound to the request's database
session for API endpoints.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from minicommerce_api.core.database import get_session

from .categories import CategoryService
from .orders import OrderService
from .products import ProductService
from .reviews import ReviewService
from .users import UserService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_user_service(session: SessionDep) -> UserService:
    return UserService(session)


def get_category_service(session: SessionDep) -> CategoryService:
    return CategoryService(session)


def get_product_service(session: SessionDep) -> ProductService:
    return ProductService(session)


def get_order_service(session: SessionDep) -> OrderService:
    return OrderService(session)


def get_review_service(session: SessionDep) -> ReviewService:
    return ReviewService(session)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
CategoryServiceDep = Annotated[CategoryService, Depends(get_category_service)]
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
OrderServiceDep = Annotated[OrderService, Depends(get_order_service)]
ReviewServiceDep = Annotated[ReviewService, Depends(get_review_service)]
