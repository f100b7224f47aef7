from functools import lru_cache
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from account_api.api.v1.models import Role as RoleModel
from account_api.core.repositories import BaseRepository


class RoleRepository(BaseRepository[RoleModel]):
    """
    Repository for Role entity.
    """
    def __init__(self):
        super().__init__(RoleModel)

    async def get_by_name(self, db: AsyncSession, name: str) -> Optional[RoleModel]:
        """Exact, case-sensitive match on the role name."""
        result = await db.execute(select(self.model).filter(self.model.name == name))
        return result.scalars().first()


@lru_cache()
def get_role_repository() -> RoleRepository:
    """Dependency injector for RoleRepository."""
    return RoleRepository()
