"""
User Endpoints.

CRUD operations for the customers of the shop. E-mail addresses are unique
and stored lower-cased.
"""

from typing import List

from fastapi import APIRouter, Response, status

from minicommerce_api.core.models.io.errors import ApiError
from minicommerce_api.core.models.io.users import UserCreate, UserRead, UserUpdate
from minicommerce_api.server.api.v1.params import IdPath
from minicommerce_api.server.core import constant
from minicommerce_api.server.services.deps import UserServiceDep

router = APIRouter(tags=["users"])


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    description="Register a new user. The e-mail address is trimmed, lower-cased and must be unique.",
    response_description="The created user; its URL is returned in the Location header.",
    responses={
        400: {"model": ApiError, "description": "Validation failed"},
        409: {"model": ApiError, "description": "Email already exists"},
    },
)
async def create_user(payload: UserCreate, response: Response, service: UserServiceDep) -> UserRead:
    """
    Create a new user.

    - **name**: Display name, up to 80 characters.
    - **email**: Valid e-mail address, up to 200 characters.
    """
    user = await service.create(payload)
    response.headers["Location"] = f"{constant.API_PREFIX}/users/{user.id}"
    return user


@router.get(
    "",
    response_model=List[UserRead],
    summary="List Users",
    description="Retrieve every user ordered by id.",
)
async def list_users(service: UserServiceDep) -> List[UserRead]:
    return await service.list()


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get User",
    description="Retrieve a single user by id.",
    responses={404: {"model": ApiError, "description": "User not found"}},
)
async def get_user(user_id: IdPath, service: UserServiceDep) -> UserRead:
    return await service.get(user_id)


@router.put(
    "/{user_id}",
    response_model=UserRead,
    summary="Replace User",
    description="Replace the name and e-mail address of a user.",
    responses={
        400: {"model": ApiError, "description": "Validation failed"},
        404: {"model": ApiError, "description": "User not found"},
        409: {"model": ApiError, "description": "Email already exists"},
    },
)
async def update_user(user_id: IdPath, payload: UserUpdate, service: UserServiceDep) -> UserRead:
    """
    Replace a user.

    Both fields are required. The uniqueness of the e-mail address is only
    checked when it differs from the current one.
    """
    return await service.update(user_id, payload)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete User",
    description="Delete a user. Users that still own orders or reviews cannot be deleted.",
    responses={
        404: {"model": ApiError, "description": "User not found"},
        409: {"model": ApiError, "description": "User is still referenced"},
    },
)
async def delete_user(user_id: IdPath, service: UserServiceDep) -> Response:
    await service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
