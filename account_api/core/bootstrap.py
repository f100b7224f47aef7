import logging

from fastapi import FastAPI

from account_api.api.v1.routers import auth, roles, users
from account_api.core.config import settings

logger = logging.getLogger(__name__)


def bootstrap_app(app: FastAPI) -> None:
    prefix = settings.API_PREFIX

    app.include_router(auth.router, prefix=prefix, tags=["Authentication"])
    app.include_router(users.router, prefix=prefix, tags=["Users"])
    app.include_router(roles.router, prefix=prefix, tags=["Roles"])
    logger.info("Routers registered under prefix '%s'", prefix or "/")
