"""
Tests for the role lifecycle.
"""

import pytest

from account_api.api.v1.models import Status
from account_api.api.v1.schemas import RoleCreate
from account_api.core.models import ConflictError, NotFoundError, ValidationError

pytestmark = pytest.mark.asyncio


class TestRoleService:

    async def test_default_roles_are_seeded(self, session, role_service):
        roles = await role_service.get_all(session, "ACTIVE")
        assert {r.name for r in roles} == {"GENERAL", "ADMINISTRADOR"}

    async def test_create_and_get(self, session, role_service):
        role = await role_service.create(session, RoleCreate(name="AUDITOR", description="Reads logs"))

        assert role.status == Status.ACTIVE.value
        fetched = await role_service.get(session, role.id, "ACTIVE")
        assert fetched.name == "AUDITOR"

    async def test_duplicate_name_conflicts(self, session, role_service):
        with pytest.raises(ConflictError):
            await role_service.create(session, RoleCreate(name="GENERAL", description="again"))

    async def test_name_match_is_case_sensitive(self, session, role_service):
        role = await role_service.create(session, RoleCreate(name="general", description="lower"))
        assert role.name == "general"

    async def test_update_merges_and_skips_empty(self, session, role_service):
        role = await role_service.create(session, RoleCreate(name="AUDITOR", description="Reads logs"))

        updated = await role_service.update(session, role.id, {"description": "Reads everything", "name": ""})
        assert updated.name == "AUDITOR"
        assert updated.description == "Reads everything"

    async def test_soft_delete(self, session, role_service):
        role = await role_service.create(session, RoleCreate(name="AUDITOR", description="Reads logs"))

        await role_service.update(session, role.id, {"status": "INACTIVE"})
        with pytest.raises(NotFoundError):
            await role_service.get(session, role.id, "ACTIVE")
        assert (await role_service.get(session, role.id, "INACTIVE")).id == role.id

    @pytest.mark.parametrize("patch", [{}, {"users": []}, {"status": "GONE"}])
    async def test_invalid_update(self, session, role_service, patch):
        role = await role_service.create(session, RoleCreate(name="AUDITOR", description="Reads logs"))
        with pytest.raises(ValidationError):
            await role_service.update(session, role.id, patch)

    async def test_rename_to_existing_name_conflicts(self, session, role_service):
        role = await role_service.create(session, RoleCreate(name="AUDITOR", description="Reads logs"))
        with pytest.raises(ConflictError):
            await role_service.update(session, role.id, {"name": "GENERAL"})

    async def test_drop(self, session, role_service, role_repository):
        role = await role_service.create(session, RoleCreate(name="AUDITOR", description="Reads logs"))

        assert await role_service.delete(session, role.id) is True
        assert await role_repository.get_by_id(session, role.id) is None
        with pytest.raises(NotFoundError):
            await role_service.delete(session, role.id)
