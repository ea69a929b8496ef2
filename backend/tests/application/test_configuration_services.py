"""Unit tests for the configuration, user and API services."""

import pytest
from application.services import (
    ApiHeaderService,
    ApiService,
    NewExternalUser,
    RoleService,
    UserService,
    ViewService,
    ViewUpdate,
)
from domain.entities import Role
from domain.enums import PlanValidation, RoleScope
from domain.errors import ErrorKind, ManagementError


class TestRoleService:
    """Test role management."""

    @pytest.fixture
    def service(self, role_repository):
        return RoleService(role_repository)

    @pytest.mark.asyncio
    async def test_create_role(self, service):
        role = await service.create(RoleScope.API, "reviewer", permissions={"API_DEFINITION": ["R"]})
        assert role.name == "REVIEWER"
        assert role.scope == RoleScope.API

    @pytest.mark.asyncio
    async def test_duplicate_role_in_scope_is_refused(self, service):
        await service.create(RoleScope.API, "OWNER")
        with pytest.raises(ManagementError) as exc_info:
            await service.create(RoleScope.API, "owner")
        error = exc_info.value.error
        assert error.kind is ErrorKind.ROLE_ALREADY_EXISTS
        assert error.http_status == 400
        assert error.parameters == {"scope": "API", "name": "OWNER"}
        assert error.message == "Role [API,OWNER] already exists."

    @pytest.mark.asyncio
    async def test_same_name_in_other_scope_is_allowed(self, service):
        await service.create(RoleScope.API, "OWNER")
        role = await service.create(RoleScope.APPLICATION, "OWNER")
        assert role.scope == RoleScope.APPLICATION

    @pytest.mark.asyncio
    async def test_single_default_role_per_scope(self, service):
        first = await service.create(RoleScope.API, "USER", default_role=True)
        second = await service.create(RoleScope.API, "READER", default_role=True)
        roles = {role.name: role for role in await service.find_by_scope(RoleScope.API)}
        assert roles[second.name].default_role is True
        assert roles[first.name].default_role is False

    @pytest.mark.asyncio
    async def test_system_role_cannot_be_deleted(self, service, role_repository):
        await role_repository.create(Role(scope=RoleScope.API, name="PRIMARY_OWNER", system=True))
        with pytest.raises(ManagementError) as exc_info:
            await service.delete(RoleScope.API, "primary_owner")
        assert exc_info.value.kind is ErrorKind.ROLE_DELETION_FORBIDDEN

    @pytest.mark.asyncio
    async def test_delete_unknown_role(self, service):
        with pytest.raises(ManagementError) as exc_info:
            await service.delete(RoleScope.API, "ghost")
        assert exc_info.value.kind is ErrorKind.ROLE_NOT_FOUND


class TestUserService:
    """Test user provisioning."""

    @pytest.fixture
    def service(self, user_repository):
        return UserService(user_repository, "DEFAULT")

    @pytest.mark.asyncio
    async def test_create_external_user(self, service):
        user = await service.create_external(
            NewExternalUser(source="ldap", source_id="jdoe", firstname="John", lastname="Doe")
        )
        assert user.username == "jdoe"
        assert user.display_name == "John Doe"

    @pytest.mark.asyncio
    async def test_duplicate_external_user(self, service):
        new_user = NewExternalUser(source="ldap", source_id="jdoe")
        await service.create_external(new_user)
        with pytest.raises(ManagementError) as exc_info:
            await service.create_external(new_user)
        error = exc_info.value.error
        assert error.kind is ErrorKind.USER_ALREADY_EXISTS
        assert error.parameters["user"] == "jdoe"
        assert error.parameters["environment"] == "DEFAULT"
        assert error.message == "A user [jdoe] already exists for environment DEFAULT."

    @pytest.mark.asyncio
    async def test_same_reference_from_other_source(self, service):
        await service.create_external(NewExternalUser(source="ldap", source_id="jdoe"))
        user = await service.create_external(NewExternalUser(source="github", source_id="jdoe"))
        assert user.source == "github"

    @pytest.mark.asyncio
    async def test_get_unknown_user(self, service):
        with pytest.raises(ManagementError) as exc_info:
            await service.get("missing")
        assert exc_info.value.kind is ErrorKind.USER_NOT_FOUND


class TestViewService:
    """Test portal views."""

    @pytest.fixture
    def service(self, view_repository):
        return ViewService(view_repository)

    @pytest.mark.asyncio
    async def test_create_appends_views(self, service):
        first = await service.create("Payments")
        second = await service.create("Open Data")
        assert (first.order, second.order) == (0, 1)
        assert second.key == "open-data"

    @pytest.mark.asyncio
    async def test_duplicate_key_is_refused(self, service):
        await service.create("Open Data")
        with pytest.raises(ManagementError) as exc_info:
            await service.create("open data")
        assert exc_info.value.kind is ErrorKind.VIEW_ALREADY_EXISTS
        assert exc_info.value.error.parameters == {"view": "open-data"}

    @pytest.mark.asyncio
    async def test_default_view_is_created_once(self, service):
        first = await service.create_default_view()
        second = await service.create_default_view()
        assert first.id == second.id
        assert first.key == "all"
        assert first.default_view is True
        assert len(await service.find_all()) == 1

    @pytest.mark.asyncio
    async def test_get_by_key(self, service):
        view = await service.create("Payments")
        assert (await service.get("payments")).id == view.id

    @pytest.mark.asyncio
    async def test_reorder_with_update_many(self, service):
        a = await service.create("A")
        b = await service.create("B")
        await service.update_many([
            ViewUpdate(id=a.id, name="A", order=1),
            ViewUpdate(id=b.id, name="B", order=0),
        ])
        assert [view.name for view in await service.find_all()] == ["B", "A"]

    @pytest.mark.asyncio
    async def test_picture_of_view_without_picture(self, service):
        view = await service.create("Payments")
        assert await service.get_picture(view.id) is None

    @pytest.mark.asyncio
    async def test_delete_unknown_view(self, service):
        with pytest.raises(ManagementError) as exc_info:
            await service.delete("ghost")
        assert exc_info.value.kind is ErrorKind.VIEW_NOT_FOUND


class TestApiHeaderService:
    """Test API header ordering."""

    @pytest.fixture
    def service(self, api_header_repository):
        return ApiHeaderService(api_header_repository)

    async def _names(self, service):
        return [(h.name, h.order) for h in await service.find_all()]

    @pytest.mark.asyncio
    async def test_headers_are_appended(self, service):
        await service.create("Version", "${api.version}")
        await service.create("Owner", "${api.owner}")
        assert await self._names(service) == [("Version", 1), ("Owner", 2)]

    @pytest.mark.asyncio
    async def test_move_header_to_front(self, service):
        await service.create("A", "a")
        await service.create("B", "b")
        c = await service.create("C", "c")
        await service.update(c.id, "C", "c2", order=1)
        assert await self._names(service) == [("C", 1), ("A", 2), ("B", 3)]

    @pytest.mark.asyncio
    async def test_delete_closes_the_gap(self, service):
        await service.create("A", "a")
        b = await service.create("B", "b")
        await service.create("C", "c")
        await service.delete(b.id)
        assert await self._names(service) == [("A", 1), ("C", 2)]

    @pytest.mark.asyncio
    async def test_unknown_header(self, service):
        with pytest.raises(ManagementError) as exc_info:
            await service.get("ghost")
        assert exc_info.value.kind is ErrorKind.API_HEADER_NOT_FOUND


class TestApiService:
    """Test APIs and plans."""

    @pytest.fixture
    def service(self, api_repository, plan_repository):
        return ApiService(api_repository, plan_repository)

    @pytest.mark.asyncio
    async def test_create_api_and_plan(self, service):
        api = await service.create("Payments", "1.0", owner_id="publisher")
        plan = await service.create_plan(api.id, "Free", validation=PlanValidation.AUTO)
        assert plan.api_id == api.id
        assert [p.id for p in await service.find_plans(api.id)] == [plan.id]

    @pytest.mark.asyncio
    async def test_plan_of_unknown_api(self, service):
        with pytest.raises(ManagementError) as exc_info:
            await service.create_plan("ghost", "Free")
        assert exc_info.value.kind is ErrorKind.API_NOT_FOUND

    @pytest.mark.asyncio
    async def test_find_all_sorted_by_name(self, service):
        await service.create("zeta", "1.0", owner_id="p")
        await service.create("Alpha", "1.0", owner_id="p")
        assert [api.name for api in await service.find_all()] == ["Alpha", "zeta"]
