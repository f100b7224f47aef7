"""
Tests for password hashing, token issue/verification and the role guard.
"""

from datetime import timedelta

import pytest
from jose import jwt

from account_api.api.v1.models import RoleType
from account_api.api.v1.schemas import TokenPayload
from account_api.core.models import ForbiddenError, UnauthorizedError
from account_api.core.security import (
    RoleGuard,
    create_access_token,
    decode_token,
    get_password_hash,
    require_roles,
    verify_password,
)


def identity(*roles):
    return TokenPayload(id=1, email="ana@example.com", username="ana", roles=list(roles))


class TestPasswordHasher:

    def test_hash_is_salted_and_verifies(self):
        first = get_password_hash("secret")
        second = get_password_hash("secret")
        assert first != second
        assert first != "secret"
        assert verify_password("secret", first)
        assert not verify_password("wrong", first)


class TestTokenIssuer:

    def test_round_trip_keeps_claims(self):
        token = create_access_token({"id": 7, "username": "ana", "roles": ["GENERAL"]})
        payload = decode_token(token)
        assert payload["id"] == 7
        assert payload["roles"] == ["GENERAL"]
        assert "exp" in payload and "iat" in payload

    def test_expired_token_is_rejected(self):
        token = create_access_token({"id": 7}, expires_delta=timedelta(seconds=-5))
        with pytest.raises(UnauthorizedError):
            decode_token(token)

    def test_foreign_signature_is_rejected(self):
        token = jwt.encode({"id": 7}, "another-secret", algorithm="HS256")
        with pytest.raises(UnauthorizedError):
            decode_token(token)

    def test_garbage_is_rejected(self):
        with pytest.raises(UnauthorizedError):
            decode_token("not-a-token")


class TestRoleGuard:

    def test_no_required_roles_allows_anyone(self):
        assert RoleGuard().check(identity()) is not None
        assert RoleGuard([]).check(identity("GENERAL")) is not None

    def test_intersection_allows(self):
        guard = require_roles(RoleType.ADMINISTRADOR, RoleType.GENERAL)
        assert guard.check(identity("GENERAL")).username == "ana"

    def test_disjoint_roles_are_forbidden(self):
        guard = require_roles(RoleType.ADMINISTRADOR)
        with pytest.raises(ForbiddenError):
            guard.check(identity("GENERAL"))

    def test_enum_and_plain_names_are_equivalent(self):
        assert require_roles(RoleType.GENERAL).required_roles == require_roles("GENERAL").required_roles
