from account_api.core.schemas.base import BaseSchema
from account_api.core.schemas.error_response import ErrorResponse

__all__ = ["BaseSchema", "ErrorResponse"]
