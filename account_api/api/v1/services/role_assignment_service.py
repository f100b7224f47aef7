import logging
from functools import lru_cache
from typing import Dict, Optional, Tuple

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from account_api.core.models import ConflictError, NotFoundError
from account_api.api.v1.models import Role as RoleModel, Status, User as UserModel
from account_api.api.v1.repositories import (
    RoleRepository,
    UserRepository,
    get_role_repository,
    get_user_repository,
)

logger = logging.getLogger(__name__)


class RoleAssignmentService:
    """
    Attach and detach roles on users.

    Membership is decided by role name, not by row identity.
    """

    def __init__(self, user_repository: UserRepository, role_repository: RoleRepository):
        self.user_repository = user_repository
        self.role_repository = role_repository

    async def _resolve(self, db: AsyncSession, user_id: Optional[int], role_id: Optional[int]) -> Tuple[UserModel, RoleModel]:
        user = await self.user_repository.get_by_id_and_status(db, user_id, Status.ACTIVE.value)
        if user is None:
            raise NotFoundError("user not exists")

        role = await self.role_repository.get_by_id_and_status(db, role_id, Status.ACTIVE.value)
        if role is None:
            raise NotFoundError("role not exists")

        return user, role

    @staticmethod
    def roles_by_name(user: UserModel) -> Dict[str, RoleModel]:
        return {role.name: role for role in user.roles}

    async def set_role_to_user(self, db: AsyncSession, user_id: Optional[int], role_id: Optional[int]) -> UserModel:
        user, role = await self._resolve(db, user_id, role_id)

        if role.name in self.roles_by_name(user):
            raise ConflictError(f"user already has the role {role.name}")

        user.roles.append(role)
        user = await self.user_repository.save(db, user)
        logger.info("Role %s attached to user %s", role.name, user.id)
        return user

    async def unset_role_to_user(self, db: AsyncSession, user_id: Optional[int], role_id: Optional[int]) -> UserModel:
        user, role = await self._resolve(db, user_id, role_id)

        if role.name not in self.roles_by_name(user):
            raise ConflictError(f"user does not have the role {role.name}")

        for held in [r for r in user.roles if r.name == role.name]:
            user.roles.remove(held)
        user = await self.user_repository.save(db, user)
        logger.info("Role %s detached from user %s", role.name, user.id)
        return user


@lru_cache()
def get_role_assignment_service(
        user_repository: UserRepository = Depends(get_user_repository),
        role_repository: RoleRepository = Depends(get_role_repository),
) -> RoleAssignmentService:
    return RoleAssignmentService(user_repository, role_repository)
