"""
Authentication Router Module

Signup and signin endpoints. Both are public and rate limited per client
address; signin returns the bearer token used by every other router.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from account_api.api.v1.schemas import (
    NewUserResponse,
    Signin,
    SigninResponse,
    User,
    UserCreate,
)
from account_api.api.v1.services import AuthService, get_auth_service
from account_api.core.config import settings
from account_api.core.middlewares import limiter
from account_api.db import get_session

# Configure module logger
logger = logging.getLogger(__name__)

# Router configuration
PREFIX = "/auth"
router = APIRouter(
    prefix=PREFIX,
    responses={
        400: {"description": "Bad Request - Missing or invalid parameters"},
        429: {"description": "Too Many Requests - Rate limit exceeded"},
        500: {"description": "Internal Server Error"},
    },
)


@router.post(
    "/signup",
    response_model=NewUserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="Creates an ACTIVE account holding the GENERAL role",
)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def signup(
    request: Request,
    user_in: UserCreate,
    db: Annotated[AsyncSession, Depends(get_session)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> NewUserResponse:
    user = await auth_service.signup(db, user_in)
    return NewUserResponse(new_user=User.model_validate(user))


@router.post(
    "/signin",
    response_model=SigninResponse,
    summary="Authenticate a user",
    description="Verifies username or email plus password and issues a bearer token",
)
@limiter.limit(settings.AUTH_RATE_LIMIT)
async def signin(
    request: Request,
    credentials: Signin,
    db: Annotated[AsyncSession, Depends(get_session)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> SigninResponse:
    """
    Authenticate and return ``{token, user}``.

    An INACTIVE account with valid credentials is reactivated first.
    """
    token, payload = await auth_service.signin(db, credentials)
    logger.info("User %s signed in", payload.id)
    return SigninResponse(token=token, user=payload)
