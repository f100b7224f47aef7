from functools import lru_cache
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from account_api.core.repositories import BaseRepository
from account_api.api.v1.models import User as UserModel


class UserRepository(BaseRepository[UserModel]):
    """
    Repository for User entity.

    Details and roles are loaded with every user through the relationship
    loaders declared on the model, so callers always get them materialized.
    """
    def __init__(self):
        super().__init__(UserModel)

    async def find_by_username_or_email(self, db: AsyncSession, username: str, email: str) -> Optional[UserModel]:
        """Single disjunctive lookup used by the duplicate check on create."""
        result = await db.execute(
            select(self.model).where(or_(self.model.username == username, self.model.email == email))
        )
        return result.scalars().first()

    async def get_by_username(self, db: AsyncSession, username: str) -> Optional[UserModel]:
        result = await db.execute(select(self.model).where(self.model.username == username))
        return result.scalars().first()

    async def get_by_email(self, db: AsyncSession, email: str) -> Optional[UserModel]:
        result = await db.execute(select(self.model).where(self.model.email == email))
        return result.scalars().first()

    async def get_by_email_and_status(self, db: AsyncSession, email: str, status: str) -> Optional[UserModel]:
        result = await db.execute(
            select(self.model).where(self.model.email == email, self.model.status == status)
        )
        return result.scalars().first()


@lru_cache()
def get_user_repository() -> UserRepository:
    return UserRepository()
