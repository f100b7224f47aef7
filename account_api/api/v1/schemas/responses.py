from typing import List

from account_api.core.schemas import BaseSchema
from .roles import Role
from .users import User


class UserResponse(BaseSchema):
    user: User


class UserListResponse(BaseSchema):
    users: List[User]
    total: int


class NewUserResponse(BaseSchema):
    new_user: User


class UpdateUserResponse(BaseSchema):
    update_user: User


class RoleResponse(BaseSchema):
    role: Role


class RoleListResponse(BaseSchema):
    roles: List[Role]
    total: int


class NewRoleResponse(BaseSchema):
    new_role: Role


class UpdateRoleResponse(BaseSchema):
    update_role: Role


class DeletedResponse(BaseSchema):
    deleted: bool = True
