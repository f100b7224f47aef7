from .role_repository import RoleRepository, get_role_repository
from .user_details_repository import UserDetailsRepository, get_user_details_repository
from .user_repository import UserRepository, get_user_repository

__all__ = [
    "RoleRepository",
    "UserDetailsRepository",
    "UserRepository",
    "get_role_repository",
    "get_user_details_repository",
    "get_user_repository",
]
