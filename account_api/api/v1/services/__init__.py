from .lifecycle import ReactivationTrigger, reactivate, validate_status
from .user_service import UserService, get_user_service
from .role_service import RoleService, get_role_service
from .role_assignment_service import RoleAssignmentService, get_role_assignment_service
from .auth_service import AuthService, get_auth_service

__all__ = [
    "ReactivationTrigger",
    "reactivate",
    "validate_status",
    "UserService",
    "get_user_service",
    "RoleService",
    "get_role_service",
    "RoleAssignmentService",
    "get_role_assignment_service",
    "AuthService",
    "get_auth_service",
]
