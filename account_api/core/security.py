import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession

from account_api.core.config import settings
from account_api.core.models import ForbiddenError, UnauthorizedError
from account_api.db import get_session
from account_api.api.v1.models import Status
from account_api.api.v1.repositories import UserRepository, get_user_repository
from account_api.api.v1.schemas import TokenPayload

logger = logging.getLogger(__name__)

# Password hashing setup
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=settings.BCRYPT_ROUNDS)

# Missing header yields None; get_current_user raises the 401
bearer_scheme = HTTPBearer(auto_error=False)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    if expires_delta:
        expire = now + expires_delta
    else:
        expire = now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    to_encode.update({"iat": now, "exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict:
    """Verify signature and expiry; any failure is an UnauthorizedError."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        raise UnauthorizedError("invalid or expired token") from e


# Validate JWT token
async def get_current_user(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
        db: AsyncSession = Depends(get_session),
        user_repository: UserRepository = Depends(get_user_repository),
) -> TokenPayload:
    """
    Resolve the request identity from the bearer token.

    The token must verify and its user must still exist as ACTIVE. The
    returned identity is the claim payload the token was issued with.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Unauthorized")

    payload = decode_token(credentials.credentials)

    user_id = payload.get("id")
    if not user_id:
        raise UnauthorizedError("invalid token payload")

    user = await user_repository.get_by_id_and_status(db, user_id, Status.ACTIVE)
    if user is None:
        raise UnauthorizedError("user not found or inactive")

    return TokenPayload.model_validate(payload)


class RoleGuard:
    """
    Route-level role check.

    Allows the request when no role is required, or when the identity holds
    at least one of the required role names.
    """

    def __init__(self, required_roles: Optional[Iterable[str]] = None):
        self.required_roles: List[str] = [
            getattr(role, "value", role) for role in (required_roles or [])
        ]

    def check(self, identity: TokenPayload) -> TokenPayload:
        if not self.required_roles:
            return identity

        if set(identity.roles or []) & set(self.required_roles):
            return identity

        logger.warning(
            "User %s denied: holds %s, route requires one of %s",
            identity.username, identity.roles, self.required_roles,
        )
        raise ForbiddenError("your role does not have permission")

    async def __call__(self, current_user: TokenPayload = Depends(get_current_user)) -> TokenPayload:
        return self.check(current_user)


def require_roles(*roles) -> RoleGuard:
    return RoleGuard(roles)
