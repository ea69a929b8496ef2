"""Use case listing the subscriptions visible to a portal user."""

from typing import Iterable, Optional

from domain.entities import Subscription
from domain.enums import SubscriptionStatus
from domain.errors import ErrorKind, ManagementError
from domain.repositories import (
    IApiRepository,
    IApplicationRepository,
    IPlanRepository,
    ISubscriptionRepository,
    IUserRepository,
)
from domain.value_objects import SubscriptionQuery
from infrastructure.config import get_logger

NAMES_METADATA_KEY = "names"


class ListSubscriptionsUseCase:
    """Search subscriptions and resolve the display names they reference."""

    def __init__(
        self,
        subscription_repository: ISubscriptionRepository,
        application_repository: IApplicationRepository,
        api_repository: IApiRepository,
        plan_repository: IPlanRepository,
        user_repository: IUserRepository,
    ):
        self.subscription_repo = subscription_repository
        self.application_repo = application_repository
        self.api_repo = api_repository
        self.plan_repo = plan_repository
        self.user_repo = user_repository
        self.logger = get_logger(self.__class__.__name__)

    async def execute(
        self,
        user_id: str,
        api_id: Optional[str] = None,
        application_id: Optional[str] = None,
        statuses: Optional[Iterable[SubscriptionStatus]] = None,
    ) -> tuple[list[Subscription], dict[str, str]]:
        """
        Search the subscriptions of the user's applications.

        Without ``application_id`` the search covers every application the
        user owns; with it, the user must own that application.

        Args:
            user_id: Authenticated user
            api_id: Only subscriptions to this API
            application_id: Only subscriptions of this application
            statuses: Only subscriptions in these statuses (all when empty)

        Returns:
            Matching subscriptions, and the names of the applications
            searched keyed by id

        Raises:
            ManagementError: FORBIDDEN_ACCESS when the user does not own
                ``application_id``
        """
        names: dict[str, str] = {}

        if application_id is None:
            applications = await self.application_repo.find_by_owner(user_id)
            if not applications:
                return [], names
            names.update({app.id: app.name for app in applications})
            query = SubscriptionQuery(
                api=api_id,
                applications=frozenset(app.id for app in applications),
                statuses=frozenset(statuses or ()),
            )
        else:
            application = await self.application_repo.get_by_id(application_id)
            if application is None or not application.is_owned_by(user_id):
                raise ManagementError.of(ErrorKind.FORBIDDEN_ACCESS)
            names[application.id] = application.name
            query = SubscriptionQuery(
                api=api_id,
                application=application_id,
                statuses=frozenset(statuses or ()),
            )

        subscriptions = await self.subscription_repo.search(query)
        return subscriptions, names

    async def resolve_names(self, subscriptions: Iterable[Subscription]) -> dict[str, str]:
        """
        Map the APIs, plans and subscribers of subscriptions to display names.

        References that no longer resolve are left out.
        """
        names: dict[str, str] = {}
        for subscription in subscriptions:
            if subscription.api_id not in names:
                api = await self.api_repo.get_by_id(subscription.api_id)
                if api is not None:
                    names[api.id] = api.name
            if subscription.plan_id not in names:
                plan = await self.plan_repo.get_by_id(subscription.plan_id)
                if plan is not None:
                    names[plan.id] = plan.name
            subscriber = subscription.subscribed_by
            if subscriber and subscriber not in names:
                user = await self.user_repo.get_by_id(subscriber)
                if user is not None:
                    names[user.id] = user.display_name
                else:
                    self.logger.debug(f"Subscriber {subscriber} is not a registered user")
        return names
