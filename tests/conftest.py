"""
Shared fixtures.

Every test gets its own in-memory SQLite database with the default roles
seeded. API tests talk to the app through httpx with the session
dependency pointed at that database.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ASYNC_DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SEED_DEFAULT_ROLES", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from account_api.api.v1.models import RoleType  # noqa: E402
from account_api.api.v1.repositories import (  # noqa: E402
    RoleRepository,
    UserDetailsRepository,
    UserRepository,
)
from account_api.api.v1.schemas import UserCreate  # noqa: E402
from account_api.api.v1.services import (  # noqa: E402
    AuthService,
    RoleAssignmentService,
    RoleService,
    UserService,
)
from account_api.db import DatabaseManager, get_session  # noqa: E402
from account_api.db.seed import seed_default_roles  # noqa: E402
from account_api.main import app  # noqa: E402


@pytest_asyncio.fixture
async def test_db():
    manager = DatabaseManager(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await manager.create_all()
    async with manager.async_session_factory() as session:
        await seed_default_roles(session)
    yield manager
    await manager.disconnect()


@pytest_asyncio.fixture
async def session(test_db):
    async with test_db.async_session_factory() as session:
        yield session


@pytest.fixture
def user_repository():
    return UserRepository()


@pytest.fixture
def role_repository():
    return RoleRepository()


@pytest.fixture
def user_service(user_repository, role_repository):
    return UserService(user_repository, role_repository, UserDetailsRepository())


@pytest.fixture
def role_service(role_repository):
    return RoleService(role_repository)


@pytest.fixture
def role_assignment_service(user_repository, role_repository):
    return RoleAssignmentService(user_repository, role_repository)


@pytest.fixture
def auth_service(user_repository, user_service):
    return AuthService(user_repository, user_service)


@pytest.fixture
def make_user(user_service):
    async def _make_user(db, username="ana", email="ana@example.com", password="secret"):
        return await user_service.create(db, UserCreate(username=username, email=email, password=password))
    return _make_user


@pytest_asyncio.fixture
async def client(test_db):
    async def override_get_session():
        async with test_db.async_session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def admin_headers(test_db, client, make_user, role_repository, role_assignment_service):
    """Bearer header for an ACTIVE user holding GENERAL and ADMINISTRADOR."""
    async with test_db.async_session_factory() as db:
        admin = await make_user(db, username="admin", email="admin@example.com", password="admin-pass")
        admin_role = await role_repository.get_by_name(db, RoleType.ADMINISTRADOR.value)
        await role_assignment_service.set_role_to_user(db, admin.id, admin_role.id)

    response = await client.post("/auth/signin", json={"username": "admin", "password": "admin-pass"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
