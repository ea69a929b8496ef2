"""Integration tests for the SQLAlchemy repositories on in-memory SQLite."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from domain.entities import Api, ApiHeader, Application, Plan, Role, Subscription, User, View
from domain.enums import ApplicationStatus, PlanValidation, RoleScope, SubscriptionStatus
from domain.value_objects import (
    ApplicationSettings,
    OAuthClientSettings,
    SimpleApplicationSettings,
    SubscriptionQuery,
)
from infrastructure.database import models  # noqa: F401
from infrastructure.database.session import Base
from infrastructure.database.repositories import (
    SQLAlchemyApiHeaderRepository,
    SQLAlchemyApiRepository,
    SQLAlchemyApplicationRepository,
    SQLAlchemyPlanRepository,
    SQLAlchemyRoleRepository,
    SQLAlchemySubscriptionRepository,
    SQLAlchemyUserRepository,
    SQLAlchemyViewRepository,
)


@pytest_asyncio.fixture
async def session():
    """A session on a fresh in-memory database."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()


class TestApplicationRepository:
    """Test application persistence."""

    @pytest.mark.asyncio
    async def test_settings_round_trip(self, session):
        repo = SQLAlchemyApplicationRepository(session)
        settings = ApplicationSettings(
            app=SimpleApplicationSettings(type="mobile", client_id="client"),
            oauth=OAuthClientSettings(application_type="web", grant_types=("client_credentials",)),
        )
        created = await repo.create(
            Application(name="Mobile", owner_id="user-1", groups=["g1"], settings=settings)
        )

        loaded = await repo.get_by_id(created.id)

        assert loaded.name == "Mobile"
        assert loaded.groups == ["g1"]
        assert loaded.settings == settings
        assert loaded.status == ApplicationStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_find_by_owner_filters_status(self, session):
        repo = SQLAlchemyApplicationRepository(session)
        active = await repo.create(Application(name="Active", owner_id="user-1"))
        archived = await repo.create(Application(name="Archived", owner_id="user-1"))
        await repo.create(Application(name="Other", owner_id="user-2"))

        archived.archive()
        await repo.update(archived)

        assert [a.id for a in await repo.find_by_owner("user-1")] == [active.id]
        assert [a.id for a in await repo.find_by_owner("user-1", ApplicationStatus.ARCHIVED)] == [archived.id]
        assert len(await repo.find_all()) == 3
        assert len(await repo.find_all(ApplicationStatus.ACTIVE)) == 2

    @pytest.mark.asyncio
    async def test_get_unknown_returns_none(self, session):
        assert await SQLAlchemyApplicationRepository(session).get_by_id("missing") is None


class TestSubscriptionRepository:
    """Test the subscription search."""

    @pytest_asyncio.fixture
    async def seeded(self, session):
        applications = SQLAlchemyApplicationRepository(session)
        app1 = await applications.create(Application(id="app1", name="Zebra", owner_id="u"))
        app2 = await applications.create(Application(id="app2", name="Alpha", owner_id="u"))

        repo = SQLAlchemySubscriptionRepository(session)
        for application_id, status, api_id in (
            (app1.id, SubscriptionStatus.ACCEPTED, "api-1"),
            (app1.id, SubscriptionStatus.REJECTED, "api-1"),
            (app2.id, SubscriptionStatus.PAUSED, "api-2"),
            (app2.id, SubscriptionStatus.ACCEPTED, "api-1"),
        ):
            await repo.create(Subscription(
                application_id=application_id, plan_id="plan-1", api_id=api_id, status=status
            ))
        return repo

    @pytest.mark.asyncio
    async def test_search_by_applications_and_statuses(self, seeded):
        query = SubscriptionQuery(
            applications=frozenset({"app1", "app2"}),
            statuses=frozenset({SubscriptionStatus.ACCEPTED, SubscriptionStatus.PAUSED}),
        )
        subscriptions = await seeded.search(query)
        assert sorted(s.application_id for s in subscriptions) == ["app1", "app2", "app2"]

    @pytest.mark.asyncio
    async def test_search_by_api(self, seeded):
        subscriptions = await seeded.search(SubscriptionQuery(api="api-2"))
        assert [s.status for s in subscriptions] == [SubscriptionStatus.PAUSED]

    @pytest.mark.asyncio
    async def test_empty_application_set_matches_nothing(self, seeded):
        assert await seeded.search(SubscriptionQuery(applications=frozenset())) == []

    @pytest.mark.asyncio
    async def test_update_status(self, seeded):
        subscription = (await seeded.search(SubscriptionQuery(application="app1", statuses=frozenset({SubscriptionStatus.ACCEPTED}))))[0]
        subscription.close()
        await seeded.update(subscription)

        reloaded = await seeded.get_by_id(subscription.id)
        assert reloaded.status == SubscriptionStatus.CLOSED
        assert reloaded.closed_at is not None


class TestApiAndPlanRepositories:
    @pytest.mark.asyncio
    async def test_plans_of_api(self, session):
        apis = SQLAlchemyApiRepository(session)
        plans = SQLAlchemyPlanRepository(session)
        api = await apis.create(Api(name="Payments", version="2.0"))
        plan = await plans.create(Plan(api_id=api.id, name="Free", validation=PlanValidation.AUTO))

        assert [p.id for p in await plans.find_by_api(api.id)] == [plan.id]
        assert (await plans.get_by_id(plan.id)).is_auto_validated
        assert [a.name for a in await apis.find_all()] == ["Payments"]


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_get_by_source(self, session):
        repo = SQLAlchemyUserRepository(session)
        user = await repo.create(User(source="ldap", source_id="jdoe", firstname="John", lastname="Doe"))

        assert (await repo.get_by_source("ldap", "jdoe")).id == user.id
        assert await repo.get_by_source("github", "jdoe") is None


class TestConfigurationRepositories:
    @pytest.mark.asyncio
    async def test_role_by_scope_and_name(self, session):
        repo = SQLAlchemyRoleRepository(session)
        role = await repo.create(Role(scope=RoleScope.API, name="owner", permissions={"API_PLAN": ["C", "R"]}))

        loaded = await repo.get_by_scope_and_name(RoleScope.API, "OWNER")
        assert loaded.id == role.id
        assert loaded.permissions == {"API_PLAN": ["C", "R"]}
        assert await repo.get_by_scope_and_name(RoleScope.APPLICATION, "OWNER") is None

        assert await repo.delete(role.id) is True
        assert await repo.find_by_scope(RoleScope.API) == []

    @pytest.mark.asyncio
    async def test_view_by_key(self, session):
        repo = SQLAlchemyViewRepository(session)
        view = await repo.create(View(name="Open Data"))

        assert (await repo.get_by_key("open-data")).id == view.id
        assert await repo.delete(view.id) is True
        assert await repo.delete(view.id) is False

    @pytest.mark.asyncio
    async def test_api_headers_ordered(self, session):
        repo = SQLAlchemyApiHeaderRepository(session)
        await repo.create(ApiHeader(name="Second", value="2", order=2))
        await repo.create(ApiHeader(name="First", value="1", order=1))

        assert [h.name for h in await repo.find_all()] == ["First", "Second"]
