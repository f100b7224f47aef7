import logging
from functools import lru_cache
from typing import Any, List, Mapping, Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from account_api.core.helpers import merge_fields, only_request_fields
from account_api.core.models import ConflictError, NotFoundError, ValidationError
from account_api.api.v1.models import Role as RoleModel, Status
from account_api.api.v1.repositories import RoleRepository, get_role_repository
from account_api.api.v1.schemas import RoleCreate
from .lifecycle import validate_status

logger = logging.getLogger(__name__)

ROLE_UPDATE_FIELDS = ("name", "description", "status")


class RoleService:

    def __init__(self, role_repository: RoleRepository):
        self.role_repository = role_repository

    async def get(self, db: AsyncSession, role_id: Optional[int], status: Optional[str]) -> RoleModel:
        if not role_id:
            raise ValidationError("id must be sent")
        status = validate_status(status)

        role = await self.role_repository.get_by_id_and_status(db, role_id, status)
        if role is None:
            raise NotFoundError("role not exists")
        return role

    async def get_all(self, db: AsyncSession, status: Optional[str]) -> List[RoleModel]:
        status = validate_status(status)
        return await self.role_repository.get_all_by_status(db, status)

    async def create(self, db: AsyncSession, role_in: RoleCreate) -> RoleModel:
        if await self.role_repository.get_by_name(db, role_in.name):
            raise ConflictError(f"role {role_in.name} already exists")

        role = RoleModel(
            name=role_in.name,
            description=role_in.description,
            status=Status.ACTIVE.value,
        )
        role = await self.role_repository.save(db, role)
        logger.info("Role %s created with id %s", role.name, role.id)
        return role

    async def update(self, db: AsyncSession, role_id: Optional[int], patch: Optional[Mapping[str, Any]]) -> RoleModel:
        fields = only_request_fields(patch, ROLE_UPDATE_FIELDS)
        if not role_id or not fields:
            raise ValidationError("all params must be sent")
        if fields.get("status"):
            fields["status"] = validate_status(fields["status"])

        role = await self.role_repository.get_by_id(db, role_id)
        if role is None:
            raise NotFoundError(f"role with id={role_id} not exists")

        merge_fields(role, fields, ROLE_UPDATE_FIELDS)
        role.touch()
        return await self.role_repository.save(db, role)

    async def delete(self, db: AsyncSession, role_id: Optional[int]) -> bool:
        if not role_id:
            raise ValidationError("all params must be sent")

        role = await self.role_repository.get_by_id(db, role_id)
        if role is None:
            raise NotFoundError(f"role with id={role_id} not exists")

        await self.role_repository.delete(db, role)
        logger.info("Role %s dropped", role_id)
        return True


@lru_cache()
def get_role_service(role_repository: RoleRepository = Depends(get_role_repository)) -> RoleService:
    return RoleService(role_repository)
