from .enums import Status, RoleType
from .user_role import user_roles
from .user_details import UserDetails
from .roles import Role
from .users import User


__all__ = [
    "Status",
    "RoleType",
    "user_roles",
    "UserDetails",
    "Role",
    "User",
]
