"""
Category Endpoints.

CRUD operations for product categories. Each category gets a URL slug
derived from its name.
"""

from typing import List

from fastapi import APIRouter, Response, status

from minicommerce_api.core.models.io.categories import CategoryCreate, CategoryRead, CategoryUpdate
from minicommerce_api.core.models.io.errors import ApiError
from minicommerce_api.server.api.v1.params import IdPath
from minicommerce_api.server.core import constant
from minicommerce_api.server.services.deps import CategoryServiceDep

router = APIRouter(tags=["categories"])


@router.post(
    "",
    response_model=CategoryRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Category",
    description="Create a category. Its slug is computed from the trimmed name.",
    response_description="The created category; its URL is returned in the Location header.",
    responses={
        400: {"model": ApiError, "description": "Validation failed"},
        409: {"model": ApiError, "description": "Category already exists"},
    },
)
async def create_category(payload: CategoryCreate, response: Response, service: CategoryServiceDep) -> CategoryRead:
    """
    Create a new category.

    - **name**: Category name, up to 80 characters. ``"Home & Garden"``
      gets the slug ``home-garden``.
    """
    category = await service.create(payload)
    response.headers["Location"] = f"{constant.API_PREFIX}/categories/{category.id}"
    return category


@router.get(
    "",
    response_model=List[CategoryRead],
    summary="List Categories",
    description="Retrieve every category ordered by id.",
)
async def list_categories(service: CategoryServiceDep) -> List[CategoryRead]:
    return await service.list()


@router.get(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Get Category",
    description="Retrieve a single category by id.",
    responses={404: {"model": ApiError, "description": "Category not found"}},
)
async def get_category(category_id: IdPath, service: CategoryServiceDep) -> CategoryRead:
    return await service.get(category_id)


@router.put(
    "/{category_id}",
    response_model=CategoryRead,
    summary="Rename Category",
    description="Rename a category; the slug is recomputed from the new name.",
    responses={
        400: {"model": ApiError, "description": "Validation failed"},
        404: {"model": ApiError, "description": "Category not found"},
        409: {"model": ApiError, "description": "Category already exists"},
    },
)
async def update_category(category_id: IdPath, payload: CategoryUpdate, service: CategoryServiceDep) -> CategoryRead:
    return await service.update(category_id, payload)


@router.delete(
    "/{category_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Category",
    description="Delete a category that holds no products.",
    responses={
        404: {"model": ApiError, "description": "Category not found"},
        409: {"model": ApiError, "description": "Category has products"},
    },
)
async def delete_category(category_id: IdPath, service: CategoryServiceDep) -> Response:
    """
    Delete a category.

    Products are never deleted implicitly: move or delete them first.
    """
    await service.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
