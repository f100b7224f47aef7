import logging
from functools import lru_cache
from typing import Any, List, Mapping, Optional

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from account_api.core.helpers import merge_fields, only_request_fields
from account_api.core.models import ConflictError, NotFoundError, ValidationError
from account_api.core.security import get_password_hash
from account_api.api.v1.models import RoleType, Status, User as UserModel, UserDetails as UserDetailsModel
from account_api.api.v1.repositories import (
    RoleRepository,
    UserDetailsRepository,
    UserRepository,
    get_role_repository,
    get_user_details_repository,
    get_user_repository,
)
from account_api.api.v1.schemas import UserCreate
from .lifecycle import ReactivationTrigger, reactivate, validate_status

logger = logging.getLogger(__name__)

USER_UPDATE_FIELDS = ("username", "status")
PROFILE_UPDATE_FIELDS = ("name", "lastname")
DEFAULT_ROLE_NAME = RoleType.GENERAL.value


class UserService:

    def __init__(
            self,
            user_repository: UserRepository,
            role_repository: RoleRepository,
            user_details_repository: UserDetailsRepository,
    ):
        self.user_repository = user_repository
        self.role_repository = role_repository
        self.user_details_repository = user_details_repository

    async def get(self, db: AsyncSession, user_id: Optional[int], status: Optional[str]) -> UserModel:
        if not user_id:
            raise ValidationError("id must be sent")
        status = validate_status(status)

        user = await self.user_repository.get_by_id_and_status(db, user_id, status)
        if user is None:
            raise NotFoundError("user not exists")
        return user

    async def get_all(self, db: AsyncSession, status: Optional[str]) -> List[UserModel]:
        status = validate_status(status)
        return await self.user_repository.get_all_by_status(db, status)

    async def create(self, db: AsyncSession, user_in: UserCreate) -> UserModel:
        """
        Register a new ACTIVE account holding only the default role.

        The user, its empty details and the role link are written in a
        single commit.
        """
        existing = await self.user_repository.find_by_username_or_email(db, user_in.username, user_in.email)
        if existing:
            raise ConflictError("username or email already exists")

        default_role = await self.role_repository.get_by_name(db, DEFAULT_ROLE_NAME)
        if default_role is None:
            raise NotFoundError(f"default role {DEFAULT_ROLE_NAME} not found")

        user = UserModel(
            username=user_in.username,
            email=str(user_in.email),
            password=get_password_hash(user_in.password),
            status=Status.ACTIVE.value,
            details=UserDetailsModel(),
            roles=[default_role],
        )
        user = await self.user_repository.save(db, user)
        logger.info("User %s created with id %s", user.username, user.id)
        return user

    async def update(self, db: AsyncSession, user_id: Optional[int], patch: Optional[Mapping[str, Any]]) -> UserModel:
        fields = only_request_fields(patch, USER_UPDATE_FIELDS)
        if not user_id or not fields:
            raise ValidationError("all params must be sent correctly")
        if fields.get("status"):
            fields["status"] = validate_status(fields["status"])

        user = await self.user_repository.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError("user not exists")

        previous_status = user.status
        merge_fields(user, fields, USER_UPDATE_FIELDS)
        user.touch()
        user = await self.user_repository.save(db, user)

        if user.status != previous_status:
            logger.info("User %s status %s -> %s", user.id, previous_status, user.status)
        return user

    async def update_email(self, db: AsyncSession, user_id: Optional[int], email: Optional[str]) -> UserModel:
        if not user_id or not email:
            raise ValidationError("all params must be sent")

        user = await self.user_repository.get_by_id_and_status(db, user_id, Status.ACTIVE.value)
        if user is None:
            raise NotFoundError("user not exists")

        owner = await self.user_repository.get_by_email_and_status(db, email, Status.ACTIVE.value)
        if owner is not None and owner.id != user.id:
            raise ConflictError(f"user with {email} already exists")

        user.email = email
        user.touch()
        return await self.user_repository.save(db, user)

    async def restart_password(self, db: AsyncSession, email: Optional[str], new_password: Optional[str]) -> UserModel:
        """Set a new password for the account owning ``email`` and reactivate it."""
        if not email or not new_password:
            raise ValidationError("all params must be sent")

        user = await self.user_repository.get_by_email(db, email)
        if user is None:
            raise NotFoundError(f"user with {email} not exists")

        user.password = get_password_hash(new_password)
        reactivate(user, ReactivationTrigger.PASSWORD_RESET)
        return await self.user_repository.save(db, user)

    async def update_profile(self, db: AsyncSession, user_id: Optional[int], patch: Optional[Mapping[str, Any]]) -> UserModel:
        fields = only_request_fields(patch, PROFILE_UPDATE_FIELDS)
        if not user_id or not fields:
            raise ValidationError("all params must be sent correctly")

        user = await self.user_repository.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError("user not exists")

        details = await self.user_details_repository.get_by_id(db, user.detail_id)
        if details is None or details.id != user.detail_id:
            raise NotFoundError("details not exists")

        merge_fields(details, fields, PROFILE_UPDATE_FIELDS)
        user.touch()
        return await self.user_repository.save(db, user)

    async def delete(self, db: AsyncSession, user_id: Optional[int]) -> bool:
        """Hard delete; owned details and role links go with the user."""
        if not user_id:
            raise ValidationError("all params must be sent")

        user = await self.user_repository.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError(f"user with id={user_id} not exists")

        await self.user_repository.delete(db, user)
        logger.info("User %s dropped", user_id)
        return True


@lru_cache()
def get_user_service(
        user_repository: UserRepository = Depends(get_user_repository),
        role_repository: RoleRepository = Depends(get_role_repository),
        user_details_repository: UserDetailsRepository = Depends(get_user_details_repository),
) -> UserService:
    return UserService(user_repository, role_repository, user_details_repository)
