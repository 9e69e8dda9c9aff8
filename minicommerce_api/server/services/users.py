"""
User service.

E-mail addresses are stored trimmed and lower-cased and must be unique.
"""

from __future__ import annotations

from typing import List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from minicommerce_api.core.database.entities.users import User
from minicommerce_api.core.database.repositories.users import UserRepository
from minicommerce_api.core.errors import ConflictError, NotFoundError
from minicommerce_api.core.logging_config import get_logger
from minicommerce_api.core.models.io.users import UserCreate, UserRead, UserUpdate

logger = get_logger(__name__)

EMAIL_EXISTS = "Email already exists"


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserService:
    """Create, read, replace and delete users."""

    def __init__(self, session: AsyncSession) -> None:
        self.repository = UserRepository(session)

    async def create(self, payload: UserCreate) -> UserRead:
        email = normalize_email(payload.email)
        if await self.repository.exists_by_email(email):
            raise ConflictError(EMAIL_EXISTS)
        try:
            user = await self.repository.create(User(name=payload.name.strip(), email=email))
        except IntegrityError as e:
            raise ConflictError(EMAIL_EXISTS) from e
        logger.info(f"Created user {user.id}")
        return UserRead.model_validate(user)

    async def list(self) -> List[UserRead]:
        return [UserRead.model_validate(user) for user in await self.repository.list()]

    async def get(self, user_id: int) -> UserRead:
        return UserRead.model_validate(await self._require(user_id))

    async def update(self, user_id: int, payload: UserUpdate) -> UserRead:
        """Replace name and e-mail of a user.

        Uniqueness is only checked when the normalized e-mail actually changes.
        """
        user = await self._require(user_id)
        email = normalize_email(payload.email)
        if email != user.email and await self.repository.exists_by_email(email):
            raise ConflictError(EMAIL_EXISTS)
        user.name = payload.name.strip()
        user.email = email
        try:
            user = await self.repository.update(user)
        except IntegrityError as e:
            raise ConflictError(EMAIL_EXISTS) from e
        return UserRead.model_validate(user)

    async def delete(self, user_id: int) -> None:
        if not await self.repository.delete(user_id):
            raise NotFoundError("User not found")
        logger.info(f"Deleted user {user_id}")

    async def _require(self, user_id: int) -> User:
        user = await self.repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user
