"""Unit tests for the list use cases."""

import pytest
import pytest_asyncio
from application.services import ApplicationService, SubscriptionAggregator
from application.use_cases import (
    ListEnvironmentApplicationsUseCase,
    ListSubscriptionsUseCase,
    ListUserApplicationsUseCase,
)
from domain.entities import User
from domain.enums import ApplicationStatus, SubscriptionStatus
from domain.errors import ErrorKind, ManagementError


@pytest.fixture
def application_service(application_repository, subscription_repository):
    return ApplicationService(application_repository, subscription_repository)


@pytest_asyncio.fixture
async def seeded_applications(application_repository, make_application):
    apps = [
        make_application("Zebra", "app1"),
        make_application("Alpha", "app2"),
        make_application("mango", "app3"),
        make_application("Foreign", "app4", owner_id="user-2"),
    ]
    for app in apps:
        await application_repository.create(app)
    return apps


class TestListUserApplications:
    """Test the portal listing of applications."""

    @pytest.fixture
    def use_case(self, application_service, subscription_repository):
        return ListUserApplicationsUseCase(
            application_service, SubscriptionAggregator(subscription_repository)
        )

    @pytest.mark.asyncio
    async def test_default_order_is_name(self, use_case, application_repository, make_application):
        for app in (make_application("Zebra", "app1"), make_application("alpha", "app2")):
            await application_repository.create(app)

        result = await use_case.execute("user-1")

        assert [app.id for app in result.applications] == ["app2", "app1"]
        assert result.metadata == {}

    @pytest.mark.asyncio
    async def test_descending_name_keeps_ascending_order(
        self, use_case, application_repository, make_application
    ):
        for app in (make_application("Alpha", "app2"), make_application("Zebra", "app1")):
            await application_repository.create(app)

        result = await use_case.execute("user-1", order="-name")

        assert [app.id for app in result.applications] == ["app2", "app1"]

    @pytest.mark.asyncio
    async def test_order_by_subscriptions(
        self, use_case, application_repository, subscription_repository,
        make_application, make_subscription,
    ):
        for app in (
            make_application("Zebra", "app1"),
            make_application("Alpha", "app2"),
            make_application("Foreign", "app4", owner_id="user-2"),
        ):
            await application_repository.create(app)
        for subscription in (
            make_subscription("app1"),
            make_subscription("app1", SubscriptionStatus.PAUSED),
            make_subscription("app4"),
        ):
            await subscription_repository.create(subscription)

        descending = await use_case.execute("user-1", order="-nbSubscriptions")
        ascending = await use_case.execute("user-1", order="nbSubscriptions")

        assert [app.id for app in descending.applications] == ["app1", "app2"]
        assert [app.id for app in ascending.applications] == ["app2", "app1"]
        assert descending.metadata == {"subscriptions": {"app1": 2, "app2": 0}}


class TestListEnvironmentApplications:
    """Test the management listing of applications."""

    @pytest.fixture
    def use_case(self, application_service):
        return ListEnvironmentApplicationsUseCase(application_service)

    @pytest.mark.asyncio
    async def test_admin_sees_every_application(self, use_case, application_repository, make_application):
        for app in (make_application("B", owner_id="u1"), make_application("a", owner_id="u2")):
            await application_repository.create(app)
        apps = await use_case.execute("admin", is_admin=True)
        assert [app.name for app in apps] == ["a", "B"]

    @pytest.mark.asyncio
    async def test_admin_can_list_archived(self, use_case, application_repository, make_application):
        archived = make_application("Old", status=ApplicationStatus.ARCHIVED)
        await application_repository.create(archived)
        await application_repository.create(make_application("New"))
        apps = await use_case.execute("admin", is_admin=True, status=ApplicationStatus.ARCHIVED)
        assert [app.id for app in apps] == [archived.id]

    @pytest.mark.asyncio
    async def test_user_cannot_list_archived(self, use_case):
        with pytest.raises(ManagementError) as exc_info:
            await use_case.execute("user-1", is_admin=False, status=ApplicationStatus.ARCHIVED)
        assert exc_info.value.kind is ErrorKind.FORBIDDEN_ACCESS

    @pytest.mark.asyncio
    async def test_user_sees_own_applications(self, use_case, application_repository, make_application):
        await application_repository.create(make_application("Mine", owner_id="user-1"))
        await application_repository.create(make_application("Theirs", owner_id="user-2"))
        apps = await use_case.execute("user-1", is_admin=False)
        assert [app.name for app in apps] == ["Mine"]


class TestListSubscriptions:
    """Test the portal subscription search."""

    @pytest.fixture
    def use_case(
        self, subscription_repository, application_repository,
        api_repository, plan_repository, user_repository, api_with_plans,
    ):
        api, auto_plan, manual_plan = api_with_plans
        api_repository.items[api.id] = api
        plan_repository.items.update({auto_plan.id: auto_plan, manual_plan.id: manual_plan})
        user_repository.items["user-1"] = User(
            id="user-1", source="ldap", source_id="jdoe", firstname="John", lastname="Doe"
        )
        return ListSubscriptionsUseCase(
            subscription_repository, application_repository,
            api_repository, plan_repository, user_repository,
        )

    @pytest.mark.asyncio
    async def test_user_without_applications(self, use_case, subscription_repository):
        subscriptions, names = await use_case.execute("nobody")
        assert subscriptions == []
        assert names == {}
        assert subscription_repository.searches == []

    @pytest.mark.asyncio
    async def test_searches_every_owned_application(
        self, use_case, seeded_applications, subscription_repository, make_subscription
    ):
        for subscription in (
            make_subscription("app1", plan_id="plan-auto"),
            make_subscription("app4", plan_id="plan-auto"),
        ):
            await subscription_repository.create(subscription)

        subscriptions, names = await use_case.execute("user-1")

        assert [s.application_id for s in subscriptions] == ["app1"]
        assert names == {"app1": "Zebra", "app2": "Alpha", "app3": "mango"}

    @pytest.mark.asyncio
    async def test_status_filter(
        self, use_case, seeded_applications, subscription_repository, make_subscription
    ):
        await subscription_repository.create(make_subscription("app1", SubscriptionStatus.CLOSED))
        await subscription_repository.create(make_subscription("app2", SubscriptionStatus.PENDING))

        subscriptions, _ = await use_case.execute("user-1", statuses=[SubscriptionStatus.PENDING])

        assert [s.application_id for s in subscriptions] == ["app2"]

    @pytest.mark.asyncio
    async def test_single_application_filter_names_the_application(
        self, use_case, seeded_applications, subscription_repository, make_subscription
    ):
        await subscription_repository.create(make_subscription("app2", plan_id="plan-auto"))

        subscriptions, names = await use_case.execute("user-1", application_id="app2")

        assert [s.application_id for s in subscriptions] == ["app2"]
        assert names == {"app2": "Alpha"}

    @pytest.mark.asyncio
    async def test_foreign_application_is_forbidden(self, use_case, seeded_applications):
        with pytest.raises(ManagementError) as exc_info:
            await use_case.execute("user-1", application_id="app4")
        assert exc_info.value.kind is ErrorKind.FORBIDDEN_ACCESS

    @pytest.mark.asyncio
    async def test_resolve_names(self, use_case, make_subscription):
        subscription = make_subscription("app1", plan_id="plan-auto", subscribed_by="user-1")
        names = await use_case.resolve_names([subscription])
        assert names == {"api-1": "Payments", "plan-auto": "Free", "user-1": "John Doe"}

    @pytest.mark.asyncio
    async def test_unresolved_references_are_left_out(self, use_case, make_subscription):
        subscription = make_subscription("app1", plan_id="ghost", api_id="ghost-api", subscribed_by="ghost-user")
        assert await use_case.resolve_names([subscription]) == {}
