from . import (
    auth,
    roles,
    users,
)

__all__ = [
    "auth",
    "roles",
    "users",
]
