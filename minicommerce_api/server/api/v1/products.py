"""
Product Endpoints.

CRUD operations for the product catalog, with an optional category filter
on the listing.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, Response, status

from minicommerce_api.core.models.io.common import MAX_ID
from minicommerce_api.core.models.io.errors import ApiError
from minicommerce_api.core.models.io.products import ProductCreate, ProductPatch, ProductRead
from minicommerce_api.server.api.v1.params import IdPath
from minicommerce_api.server.core import constant
from minicommerce_api.server.services.deps import ProductServiceDep

router = APIRouter(tags=["products"])


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Product",
    description="Add a product to a category. The SKU must be unique.",
    response_description="The created product; its URL is returned in the Location header.",
    responses={
        400: {"model": ApiError, "description": "Validation failed"},
        404: {"model": ApiError, "description": "Category not found"},
        409: {"model": ApiError, "description": "SKU already exists"},
    },
)
async def create_product(payload: ProductCreate, response: Response, service: ProductServiceDep) -> ProductRead:
    """
    Create a new product.

    - **name**: Product name, up to 120 characters.
    - **sku**: Unique stock keeping unit, up to 40 characters.
    - **price**: Unit price, greater than zero, two decimals at most.
    - **stock**: Units in stock, defaults to 0.
    - **categoryId**: Owning category.
    """
    product = await service.create(payload)
    response.headers["Location"] = f"{constant.API_PREFIX}/products/{product.id}"
    return product


@router.get(
    "",
    response_model=List[ProductRead],
    summary="List Products",
    description="Retrieve every product ordered by id, optionally only those of one category.",
)
async def list_products(
    service: ProductServiceDep,
    category_id: Optional[int] = Query(
        default=None, alias="categoryId", le=MAX_ID, description="Only list this category"
    ),
) -> List[ProductRead]:
    return await service.list(category_id)


@router.get(
    "/{product_id}",
    response_model=ProductRead,
    summary="Get Product",
    description="Retrieve a single product by id.",
    responses={404: {"model": ApiError, "description": "Product not found"}},
)
async def get_product(product_id: IdPath, service: ProductServiceDep) -> ProductRead:
    return await service.get(product_id)


@router.patch(
    "/{product_id}",
    response_model=ProductRead,
    summary="Update Product",
    description="Change some fields of a product; fields missing from the body are left as they are.",
    responses={
        400: {"model": ApiError, "description": "Validation failed"},
        404: {"model": ApiError, "description": "Product or category not found"},
        409: {"model": ApiError, "description": "SKU already exists"},
    },
)
async def patch_product(product_id: IdPath, payload: ProductPatch, service: ProductServiceDep) -> ProductRead:
    return await service.patch(product_id, payload)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Product",
    description="Delete a product that is not referenced by any order or review.",
    responses={
        404: {"model": ApiError, "description": "Product not found"},
        409: {"model": ApiError, "description": "Product is still referenced"},
    },
)
async def delete_product(product_id: IdPath, service: ProductServiceDep) -> Response:
    await service.delete(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
