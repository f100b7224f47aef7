from fastapi import Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from account_api.core.config import settings

# Shared by the auth router decorators and the app state
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """Render rate limit rejections in the common error envelope."""
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content={
            "statusCode": status.HTTP_429_TOO_MANY_REQUESTS,
            "error": "Too Many Requests",
            "message": f"Rate limit exceeded: {exc.detail}",
        },
    )
