"""
Tests for signup delegation and signin.
"""

import pytest

from account_api.api.v1.models import Status
from account_api.api.v1.schemas import Signin, UserCreate
from account_api.core.models import ConflictError, NotFoundError, UnauthorizedError, ValidationError
from account_api.core.security import decode_token

pytestmark = pytest.mark.asyncio


class TestSignup:

    async def test_signup_creates_general_user(self, session, auth_service):
        user = await auth_service.signup(session, UserCreate(username="ana", email="ana@example.com", password="secret"))
        assert user.role_names == ["GENERAL"]
        assert user.status == Status.ACTIVE.value

    async def test_signup_conflict_passes_through(self, session, auth_service, make_user):
        await make_user(session)
        with pytest.raises(ConflictError):
            await auth_service.signup(session, UserCreate(username="ana", email="new@example.com", password="x"))


class TestSignin:

    async def test_signin_by_username_issues_token(self, session, auth_service, make_user):
        ana = await make_user(session)

        token, payload = await auth_service.signin(session, Signin(username="ana", password="secret"))
        assert payload.id == ana.id
        assert payload.roles == ["GENERAL"]
        assert payload.details.id == ana.detail_id

        claims = decode_token(token)
        assert claims["username"] == "ana"
        assert claims["email"] == "ana@example.com"
        assert claims["details"] == {"id": ana.detail_id, "name": None, "lastname": None}

    async def test_email_takes_precedence(self, session, auth_service, make_user):
        await make_user(session)
        await make_user(session, username="bob", email="bob@example.com", password="bob-pass")

        _, payload = await auth_service.signin(
            session, Signin(username="ana", email="bob@example.com", password="bob-pass")
        )
        assert payload.username == "bob"

    async def test_missing_identifier(self, session, auth_service):
        with pytest.raises(ValidationError):
            await auth_service.signin(session, Signin(password="secret"))
        with pytest.raises(ValidationError):
            await auth_service.signin(session, Signin(username="", email="", password="secret"))

    async def test_unknown_user(self, session, auth_service):
        with pytest.raises(NotFoundError):
            await auth_service.signin(session, Signin(email="nobody@example.com", password="x"))

    async def test_wrong_password_leaves_account_unchanged(self, session, auth_service, make_user, user_service):
        ana = await make_user(session)
        await user_service.update(session, ana.id, {"status": "INACTIVE"})

        with pytest.raises(UnauthorizedError):
            await auth_service.signin(session, Signin(username="ana", password="wrong"))

        assert (await user_service.get(session, ana.id, "INACTIVE")).id == ana.id

    async def test_inactive_account_is_reactivated(self, session, auth_service, make_user, user_service):
        ana = await make_user(session)
        await user_service.update(session, ana.id, {"status": "INACTIVE"})

        token, payload = await auth_service.signin(session, Signin(username="ana", password="secret"))
        assert token
        assert (await user_service.get(session, ana.id, "ACTIVE")).status == Status.ACTIVE.value
