from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from account_api.api.v1.models import RoleType, Status
from account_api.api.v1.schemas import (
    DeletedResponse,
    NewRoleResponse,
    Role,
    RoleCreate,
    RoleListResponse,
    RoleResponse,
    RoleUpdate,
    TokenPayload,
    UpdateRoleResponse,
)
from account_api.api.v1.services import RoleService, get_role_service
from account_api.core.security import require_roles
from account_api.db import get_session

prefix = "/roles"
router = APIRouter(prefix=prefix)

AdminUser = Annotated[TokenPayload, Depends(require_roles(RoleType.ADMINISTRADOR))]
Session = Annotated[AsyncSession, Depends(get_session)]
Roles = Annotated[RoleService, Depends(get_role_service)]


@router.get("/status/{role_status}", response_model=RoleListResponse)
async def read_roles_by_status(role_status: str, current_user: AdminUser, db: Session, role_service: Roles):
    roles = await role_service.get_all(db, role_status)
    return RoleListResponse(roles=[Role.model_validate(r) for r in roles], total=len(roles))


@router.get("", response_model=RoleListResponse)
async def read_roles(current_user: AdminUser, db: Session, role_service: Roles):
    """List ACTIVE roles, ordered by id."""
    roles = await role_service.get_all(db, Status.ACTIVE.value)
    return RoleListResponse(roles=[Role.model_validate(r) for r in roles], total=len(roles))


@router.get("/{role_id}/status/{role_status}", response_model=RoleResponse)
async def read_role_by_status(role_id: int, role_status: str, current_user: AdminUser, db: Session, role_service: Roles):
    role = await role_service.get(db, role_id, role_status)
    return RoleResponse(role=Role.model_validate(role))


@router.get("/{role_id}", response_model=RoleResponse)
async def read_role(role_id: int, current_user: AdminUser, db: Session, role_service: Roles):
    """Get an ACTIVE role by id."""
    role = await role_service.get(db, role_id, Status.ACTIVE.value)
    return RoleResponse(role=Role.model_validate(role))


@router.post("", response_model=NewRoleResponse, status_code=status.HTTP_201_CREATED)
async def create_role(role_in: RoleCreate, current_user: AdminUser, db: Session, role_service: Roles):
    role = await role_service.create(db, role_in)
    return NewRoleResponse(new_role=Role.model_validate(role))


@router.put("/{role_id}", response_model=UpdateRoleResponse)
async def update_role(role_id: int, body: RoleUpdate, current_user: AdminUser, db: Session, role_service: Roles):
    role = await role_service.update(db, role_id, body.model_dump(exclude_unset=True))
    return UpdateRoleResponse(update_role=Role.model_validate(role))


@router.delete("/drop/{role_id}", response_model=DeletedResponse)
async def drop_role(role_id: int, current_user: AdminUser, db: Session, role_service: Roles):
    """Hard delete; links to users are removed with the role."""
    deleted = await role_service.delete(db, role_id)
    return DeletedResponse(deleted=deleted)


@router.delete("/{role_id}", response_model=UpdateRoleResponse)
async def deactivate_role(role_id: int, current_user: AdminUser, db: Session, role_service: Roles):
    """Soft delete: the role is marked INACTIVE."""
    role = await role_service.update(db, role_id, {"status": Status.INACTIVE.value})
    return UpdateRoleResponse(update_role=Role.model_validate(role))
