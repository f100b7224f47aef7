from .roles import RoleCreate, RoleUpdate, Role
from .users import (
    UserBase,
    UserCreate,
    UserUpdate,
    EmailUpdate,
    RestartPassword,
    ProfileUpdate,
    UserDetails,
    User,
)
from .auth import Signin
from .token import DetailsClaims, TokenPayload, SigninResponse
from .responses import (
    UserResponse,
    UserListResponse,
    NewUserResponse,
    UpdateUserResponse,
    RoleResponse,
    RoleListResponse,
    NewRoleResponse,
    UpdateRoleResponse,
    DeletedResponse,
)

__all__ = [
    "RoleCreate",
    "RoleUpdate",
    "Role",
    "UserBase",
    "UserCreate",
    "UserUpdate",
    "EmailUpdate",
    "RestartPassword",
    "ProfileUpdate",
    "UserDetails",
    "User",
    "Signin",
    "DetailsClaims",
    "TokenPayload",
    "SigninResponse",
    "UserResponse",
    "UserListResponse",
    "NewUserResponse",
    "UpdateUserResponse",
    "RoleResponse",
    "RoleListResponse",
    "NewRoleResponse",
    "UpdateRoleResponse",
    "DeletedResponse",
]
