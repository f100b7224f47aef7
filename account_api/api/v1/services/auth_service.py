import logging
from functools import lru_cache
from typing import Tuple

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from account_api.core.models import NotFoundError, UnauthorizedError, ValidationError
from account_api.core.security import create_access_token, verify_password
from account_api.api.v1.models import Status, User as UserModel
from account_api.api.v1.repositories import UserRepository, get_user_repository
from account_api.api.v1.schemas import DetailsClaims, Signin, TokenPayload, UserCreate
from .lifecycle import ReactivationTrigger, reactivate
from .user_service import UserService, get_user_service

logger = logging.getLogger(__name__)


class AuthService:

    def __init__(self, user_repository: UserRepository, user_service: UserService):
        self.user_repository = user_repository
        self.user_service = user_service

    async def signup(self, db: AsyncSession, user_in: UserCreate) -> UserModel:
        return await self.user_service.create(db, user_in)

    async def signin(self, db: AsyncSession, credentials: Signin) -> Tuple[str, TokenPayload]:
        """
        Verify credentials and issue a bearer token.

        Email takes precedence over username when both are sent. A correct
        password on an INACTIVE account reactivates it before the token is
        issued.
        """
        if credentials.email:
            user = await self.user_repository.get_by_email(db, credentials.email)
        elif credentials.username:
            user = await self.user_repository.get_by_username(db, credentials.username)
        else:
            raise ValidationError("username or email must be sent")

        if user is None:
            raise NotFoundError("user not exists")

        if not verify_password(credentials.password, user.password):
            logger.warning("Failed signin for user %s", user.id)
            raise UnauthorizedError("invalid credentials")

        if user.status != Status.ACTIVE.value:
            reactivate(user, ReactivationTrigger.SUCCESSFUL_AUTH)
            user = await self.user_repository.save(db, user)

        payload = self.build_payload(user)
        token = create_access_token(payload.model_dump())
        return token, payload

    @staticmethod
    def build_payload(user: UserModel) -> TokenPayload:
        return TokenPayload(
            id=user.id,
            email=user.email,
            username=user.username,
            roles=user.role_names,
            details=DetailsClaims.model_validate(user.details.to_claims()),
        )


@lru_cache()
def get_auth_service(
        user_repository: UserRepository = Depends(get_user_repository),
        user_service: UserService = Depends(get_user_service),
) -> AuthService:
    return AuthService(user_repository, user_service)
