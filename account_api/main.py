import logging
import traceback
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from account_api.core.bootstrap import bootstrap_app
from account_api.core.config import settings
from account_api.core.middlewares import (
    limiter,
    rate_limit_exceeded_handler,
    request_logging_middleware,
    security_headers_middleware,
)
from account_api.core.models import AccountError
from account_api.core.schemas import ErrorResponse
from account_api.db import db_manager
from account_api.db.seed import seed_default_roles

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.DEBUG else logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Create the schema and default roles on startup; dispose of the engine
    on shutdown.
    """
    logger.info("Starting application...")

    logger.info("Creating database tables...")
    await db_manager.create_all()

    if settings.SEED_DEFAULT_ROLES:
        async with db_manager.async_session_factory() as session:
            await seed_default_roles(session)

    yield

    logger.info("Shutting down application...")
    await db_manager.disconnect()
    logger.info("Database engine disposed.")


app = FastAPI(
    title=settings.PROJECT_NAME,
    debug=settings.DEBUG,
    version=settings.VERSION,
    lifespan=lifespan,
)

# Add rate limiter state to app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

origins = [
    settings.FRONTEND_URL
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Authorization", "Content-Type"],
    max_age=600,
)


def error_body(status_code: int, message: str) -> dict:
    return ErrorResponse(
        status_code=status_code,
        error=HTTPStatus(status_code).phrase,
        message=message,
    ).model_dump(by_alias=True)


@app.exception_handler(AccountError)
async def account_error_handler(request: Request, exc: AccountError):
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.status_code, exc.message))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(status.HTTP_400_BAD_REQUEST, message),
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler with security considerations.
    """
    tb = traceback.format_exc()

    # Log the full error server-side
    logger.error("Unhandled exception: %s", exc, exc_info=True)

    response_content = error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    # Only include traceback outside production
    if settings.ENVIRONMENT.upper() not in ("PRODUCTION", "PROD"):
        response_content["traceback"] = tb

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=response_content,
    )

# Security headers middleware
app.middleware("http")(security_headers_middleware)

# Request logging middleware
app.middleware("http")(request_logging_middleware)


bootstrap_app(app)


# Health check endpoint (useful for monitoring)
@app.get("/health", tags=["health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": settings.VERSION}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0",
                port=8000,
                log_level="debug" if settings.DEBUG else "info"
        )
