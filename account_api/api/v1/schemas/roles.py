from datetime import datetime
from typing import Optional

from pydantic import Field

from account_api.core.schemas import BaseSchema


class RoleBase(BaseSchema):
    name: str = Field(..., min_length=1, max_length=20)
    description: str = Field(..., min_length=1)


class RoleCreate(RoleBase):
    pass


class RoleUpdate(BaseSchema):
    """Partial update. Empty values keep what is stored."""
    name: Optional[str] = Field(None, max_length=20)
    description: Optional[str] = None
    status: Optional[str] = None


class Role(BaseSchema):
    id: int
    name: str
    description: Optional[str] = None
    status: str
    created_at: datetime
    updated_at: datetime
