from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from account_api.api.v1.models import RoleType, Status
from account_api.api.v1.schemas import (
    DeletedResponse,
    EmailUpdate,
    NewUserResponse,
    ProfileUpdate,
    RestartPassword,
    TokenPayload,
    UpdateUserResponse,
    User,
    UserCreate,
    UserListResponse,
    UserResponse,
    UserUpdate,
)
from account_api.api.v1.services import (
    RoleAssignmentService,
    UserService,
    get_role_assignment_service,
    get_user_service,
)
from account_api.core.security import require_roles
from account_api.db import get_session

prefix = "/users"
router = APIRouter(prefix=prefix)

GeneralUser = Annotated[TokenPayload, Depends(require_roles(RoleType.GENERAL))]
AdminUser = Annotated[TokenPayload, Depends(require_roles(RoleType.ADMINISTRADOR))]
Session = Annotated[AsyncSession, Depends(get_session)]
Users = Annotated[UserService, Depends(get_user_service)]


@router.get("/status/{user_status}", response_model=UserListResponse)
async def read_users_by_status(user_status: str, current_user: GeneralUser, db: Session, user_service: Users):
    """List users with the given status, ordered by id."""
    users = await user_service.get_all(db, user_status)
    return UserListResponse(users=[User.model_validate(u) for u in users], total=len(users))


@router.get("", response_model=UserListResponse)
async def read_users(current_user: GeneralUser, db: Session, user_service: Users):
    """List ACTIVE users, ordered by id."""
    users = await user_service.get_all(db, Status.ACTIVE.value)
    return UserListResponse(users=[User.model_validate(u) for u in users], total=len(users))


@router.get("/{user_id}/status/{user_status}", response_model=UserResponse)
async def read_user_by_status(user_id: int, user_status: str, current_user: GeneralUser, db: Session, user_service: Users):
    user = await user_service.get(db, user_id, user_status)
    return UserResponse(user=User.model_validate(user))


@router.get("/{user_id}", response_model=UserResponse)
async def read_user(user_id: int, current_user: GeneralUser, db: Session, user_service: Users):
    """Get an ACTIVE user by id, with details and roles."""
    user = await user_service.get(db, user_id, Status.ACTIVE.value)
    return UserResponse(user=User.model_validate(user))


@router.post("", response_model=NewUserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_in: UserCreate, current_user: AdminUser, db: Session, user_service: Users):
    user = await user_service.create(db, user_in)
    return NewUserResponse(new_user=User.model_validate(user))


@router.put("/restart/password", response_model=UpdateUserResponse)
async def restart_password(body: RestartPassword, current_user: AdminUser, db: Session, user_service: Users):
    """Set a new password by email; the account is reactivated."""
    user = await user_service.restart_password(db, str(body.email), body.new_password)
    return UpdateUserResponse(update_user=User.model_validate(user))


@router.put("/email/{user_id}", response_model=UpdateUserResponse)
async def update_email(user_id: int, body: EmailUpdate, current_user: AdminUser, db: Session, user_service: Users):
    user = await user_service.update_email(db, user_id, str(body.email))
    return UpdateUserResponse(update_user=User.model_validate(user))


@router.put("/profile/{user_id}", response_model=UpdateUserResponse)
async def update_profile(user_id: int, body: ProfileUpdate, current_user: AdminUser, db: Session, user_service: Users):
    user = await user_service.update_profile(db, user_id, body.model_dump(exclude_unset=True))
    return UpdateUserResponse(update_user=User.model_validate(user))


@router.put("/{user_id}", response_model=UpdateUserResponse)
async def update_user(user_id: int, body: UserUpdate, current_user: AdminUser, db: Session, user_service: Users):
    """Partial update of username and status; empty values are ignored."""
    user = await user_service.update(db, user_id, body.model_dump(exclude_unset=True))
    return UpdateUserResponse(update_user=User.model_validate(user))


@router.delete("/drop/{user_id}", response_model=DeletedResponse)
async def drop_user(user_id: int, current_user: AdminUser, db: Session, user_service: Users):
    """Hard delete of the user, its details and its role links."""
    deleted = await user_service.delete(db, user_id)
    return DeletedResponse(deleted=deleted)


@router.delete("/{user_id}", response_model=UpdateUserResponse)
async def deactivate_user(user_id: int, current_user: AdminUser, db: Session, user_service: Users):
    """Soft delete: the user is marked INACTIVE."""
    user = await user_service.update(db, user_id, {"status": Status.INACTIVE.value})
    return UpdateUserResponse(update_user=User.model_validate(user))


@router.post("/setRole/{user_id}/{role_id}", response_model=UpdateUserResponse)
async def set_role_to_user(
        user_id: int,
        role_id: int,
        current_user: AdminUser,
        db: Session,
        role_assignment_service: Annotated[RoleAssignmentService, Depends(get_role_assignment_service)],
):
    user = await role_assignment_service.set_role_to_user(db, user_id, role_id)
    return UpdateUserResponse(update_user=User.model_validate(user))


@router.post("/unsetRole/{user_id}/{role_id}", response_model=UpdateUserResponse)
async def unset_role_to_user(
        user_id: int,
        role_id: int,
        current_user: AdminUser,
        db: Session,
        role_assignment_service: Annotated[RoleAssignmentService, Depends(get_role_assignment_service)],
):
    user = await role_assignment_service.unset_role_to_user(db, user_id, role_id)
    return UpdateUserResponse(update_user=User.model_validate(user))
