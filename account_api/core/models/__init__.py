from .base import Base, TimestampedBase, utcnow
from .exceptions import (
    AccountError,
    ValidationError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    ConflictError,
)

__all__ = [
    "Base",
    "TimestampedBase",
    "utcnow",
    "AccountError",
    "ValidationError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "ConflictError",
]
