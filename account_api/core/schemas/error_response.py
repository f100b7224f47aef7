from account_api.core.schemas.base import BaseSchema


class ErrorResponse(BaseSchema):
    status_code: int
    error: str
    message: str
