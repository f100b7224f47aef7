from typing import List, Optional

from account_api.core.schemas import BaseSchema


class DetailsClaims(BaseSchema):
    id: Optional[int] = None
    name: Optional[str] = None
    lastname: Optional[str] = None


class TokenPayload(BaseSchema):
    """Identity facts embedded in the bearer token."""
    id: int
    email: str
    username: str
    roles: List[str] = []
    details: DetailsClaims = DetailsClaims()


class SigninResponse(BaseSchema):
    token: str
    user: TokenPayload
