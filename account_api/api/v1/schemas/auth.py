from typing import Optional

from account_api.core.schemas import BaseSchema


class Signin(BaseSchema):
    """Either username or email identifies the account; email wins when both are sent."""
    username: Optional[str] = None
    email: Optional[str] = None
    password: str
