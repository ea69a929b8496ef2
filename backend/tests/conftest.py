"""Pytest configuration and shared fixtures."""

import os

# Must run before the database engine is created on first import.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

from typing import Optional

import pytest

from domain.entities import Api, ApiHeader, Application, Plan, Role, Subscription, User, View
from domain.enums import ApplicationStatus, PlanValidation, RoleScope, SubscriptionStatus
from domain.repositories import (
    IApiHeaderRepository,
    IApiRepository,
    IApplicationRepository,
    IPlanRepository,
    IRoleRepository,
    ISubscriptionRepository,
    IUserRepository,
    IViewRepository,
)
from domain.value_objects import SubscriptionQuery


# In-memory repositories

class InMemoryApplicationRepository(IApplicationRepository):
    def __init__(self, applications=()):
        self.items = {app.id: app for app in applications}

    async def create(self, application: Application) -> Application:
        self.items[application.id] = application
        return application

    async def get_by_id(self, application_id: str) -> Optional[Application]:
        return self.items.get(application_id)

    async def find_by_owner(self, owner_id, status=ApplicationStatus.ACTIVE):
        return [
            app for app in self.items.values()
            if app.owner_id == owner_id and (status is None or app.status == status)
        ]

    async def find_all(self, status=None):
        return [app for app in self.items.values() if status is None or app.status == status]

    async def update(self, application: Application) -> Application:
        self.items[application.id] = application
        return application


class InMemorySubscriptionRepository(ISubscriptionRepository):
    """Records every search query it receives."""

    def __init__(self, subscriptions=()):
        self.items = {s.id: s for s in subscriptions}
        self.searches: list[SubscriptionQuery] = []

    async def create(self, subscription: Subscription) -> Subscription:
        self.items[subscription.id] = subscription
        return subscription

    async def get_by_id(self, subscription_id: str) -> Optional[Subscription]:
        return self.items.get(subscription_id)

    async def search(self, query: SubscriptionQuery) -> list[Subscription]:
        self.searches.append(query)
        return [s for s in self.items.values() if query.matches(s)]

    async def update(self, subscription: Subscription) -> Subscription:
        self.items[subscription.id] = subscription
        return subscription


class InMemoryApiRepository(IApiRepository):
    def __init__(self, apis=()):
        self.items = {api.id: api for api in apis}

    async def create(self, api: Api) -> Api:
        self.items[api.id] = api
        return api

    async def get_by_id(self, api_id: str) -> Optional[Api]:
        return self.items.get(api_id)

    async def find_all(self) -> list[Api]:
        return list(self.items.values())


class InMemoryPlanRepository(IPlanRepository):
    def __init__(self, plans=()):
        self.items = {plan.id: plan for plan in plans}

    async def create(self, plan: Plan) -> Plan:
        self.items[plan.id] = plan
        return plan

    async def get_by_id(self, plan_id: str) -> Optional[Plan]:
        return self.items.get(plan_id)

    async def find_by_api(self, api_id: str) -> list[Plan]:
        return [plan for plan in self.items.values() if plan.api_id == api_id]


class InMemoryUserRepository(IUserRepository):
    def __init__(self, users=()):
        self.items = {user.id: user for user in users}

    async def create(self, user: User) -> User:
        self.items[user.id] = user
        return user

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return self.items.get(user_id)

    async def get_by_source(self, source: str, source_id: str) -> Optional[User]:
        for user in self.items.values():
            if user.source == source and user.source_id == source_id:
                return user
        return None

    async def find_all(self) -> list[User]:
        return list(self.items.values())


class InMemoryRoleRepository(IRoleRepository):
    def __init__(self, roles=()):
        self.items = {role.id: role for role in roles}

    async def create(self, role: Role) -> Role:
        self.items[role.id] = role
        return role

    async def get_by_id(self, role_id: str) -> Optional[Role]:
        return self.items.get(role_id)

    async def get_by_scope_and_name(self, scope: RoleScope, name: str) -> Optional[Role]:
        for role in self.items.values():
            if role.scope == scope and role.name == name.upper():
                return role
        return None

    async def find_by_scope(self, scope: RoleScope) -> list[Role]:
        return [role for role in self.items.values() if role.scope == scope]

    async def update(self, role: Role) -> Role:
        self.items[role.id] = role
        return role

    async def delete(self, role_id: str) -> bool:
        return self.items.pop(role_id, None) is not None


class InMemoryViewRepository(IViewRepository):
    def __init__(self, views=()):
        self.items = {view.id: view for view in views}

    async def create(self, view: View) -> View:
        self.items[view.id] = view
        return view

    async def get_by_id(self, view_id: str) -> Optional[View]:
        return self.items.get(view_id)

    async def get_by_key(self, key: str) -> Optional[View]:
        for view in self.items.values():
            if view.key == key:
                return view
        return None

    async def find_all(self) -> list[View]:
        return list(self.items.values())

    async def update(self, view: View) -> View:
        self.items[view.id] = view
        return view

    async def delete(self, view_id: str) -> bool:
        return self.items.pop(view_id, None) is not None


class InMemoryApiHeaderRepository(IApiHeaderRepository):
    def __init__(self, headers=()):
        self.items = {header.id: header for header in headers}

    async def create(self, header: ApiHeader) -> ApiHeader:
        self.items[header.id] = header
        return header

    async def get_by_id(self, header_id: str) -> Optional[ApiHeader]:
        return self.items.get(header_id)

    async def find_all(self) -> list[ApiHeader]:
        return sorted(self.items.values(), key=lambda h: h.order)

    async def update(self, header: ApiHeader) -> ApiHeader:
        self.items[header.id] = header
        return header

    async def delete(self, header_id: str) -> bool:
        return self.items.pop(header_id, None) is not None


# Entity factories

@pytest.fixture
def make_application():
    """Factory for applications owned by ``user-1`` unless told otherwise."""
    def _make(name: str, app_id: Optional[str] = None, owner_id: str = "user-1", **kwargs):
        if app_id is not None:
            kwargs["id"] = app_id
        return Application(name=name, owner_id=owner_id, **kwargs)
    return _make


@pytest.fixture
def make_subscription():
    """Factory for subscriptions to ``plan-1`` of ``api-1``."""
    def _make(application_id: str, status: SubscriptionStatus = SubscriptionStatus.ACCEPTED, **kwargs):
        kwargs.setdefault("plan_id", "plan-1")
        kwargs.setdefault("api_id", "api-1")
        return Subscription(application_id=application_id, status=status, **kwargs)
    return _make


@pytest.fixture
def api_with_plans():
    """An API with one auto-validated and one manual plan."""
    api = Api(id="api-1", name="Payments", version="2.0", owner_id="publisher")
    auto_plan = Plan(id="plan-auto", api_id=api.id, name="Free", validation=PlanValidation.AUTO)
    manual_plan = Plan(id="plan-manual", api_id=api.id, name="Gold", validation=PlanValidation.MANUAL)
    return api, auto_plan, manual_plan


@pytest.fixture
def subscription_repository():
    return InMemorySubscriptionRepository()


@pytest.fixture
def application_repository():
    return InMemoryApplicationRepository()


@pytest.fixture
def api_repository():
    return InMemoryApiRepository()


@pytest.fixture
def plan_repository():
    return InMemoryPlanRepository()


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def role_repository():
    return InMemoryRoleRepository()


@pytest.fixture
def view_repository():
    return InMemoryViewRepository()


@pytest.fixture
def api_header_repository():
    return InMemoryApiHeaderRepository()
