from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr, Field

from account_api.core.schemas import BaseSchema
from .roles import Role


class UserBase(BaseSchema):
    username: str = Field(..., min_length=1, max_length=25)
    email: EmailStr


class UserCreate(UserBase):
    """Payload for signup and for admin-side user creation."""
    password: str = Field(..., min_length=1)


class UserUpdate(BaseSchema):
    """
    Partial update of the account itself.

    Only username and status are honored; any other key in the body is
    ignored. Empty values keep what is stored.
    """
    username: Optional[str] = Field(None, max_length=25)
    status: Optional[str] = None


class EmailUpdate(BaseSchema):
    email: EmailStr


class RestartPassword(BaseSchema):
    email: EmailStr
    new_password: str = Field(..., min_length=1)


class ProfileUpdate(BaseSchema):
    name: Optional[str] = Field(None, max_length=50)
    lastname: Optional[str] = None


class UserDetails(BaseSchema):
    id: int
    name: Optional[str] = None
    lastname: Optional[str] = None


class User(BaseSchema):
    """Output model. The password hash is never part of it."""
    id: int
    username: str
    email: str
    status: str
    created_at: datetime
    updated_at: datetime
    details: UserDetails
    roles: List[Role] = []
