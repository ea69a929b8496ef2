"""Subscription management service."""

from typing import Optional

from domain.entities import Plan, Subscription
from domain.errors import ErrorKind, ManagementError
from domain.repositories import (
    IApplicationRepository,
    IPlanRepository,
    ISubscriptionRepository,
)
from infrastructure.config import get_logger


class SubscriptionService:
    """Create, search and close subscriptions."""

    def __init__(
        self,
        subscription_repository: ISubscriptionRepository,
        application_repository: IApplicationRepository,
        plan_repository: IPlanRepository,
    ):
        self.subscription_repo = subscription_repository
        self.application_repo = application_repository
        self.plan_repo = plan_repository
        self.logger = get_logger(self.__class__.__name__)

    async def create(
        self,
        application_id: str,
        plan_id: str,
        user_id: str,
        request: Optional[str] = None,
    ) -> Subscription:
        """
        Subscribe an application to a plan.

        The subscription is accepted straight away when the plan is auto
        validated and stays pending otherwise.

        Args:
            application_id: Subscribing application, owned by the user
            plan_id: Plan to subscribe to
            user_id: Authenticated user
            request: Optional message for the API publisher

        Returns:
            Created Subscription

        Raises:
            ManagementError: APPLICATION_NOT_FOUND, FORBIDDEN_ACCESS or
                PLAN_NOT_FOUND
        """
        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            raise ManagementError.of(ErrorKind.APPLICATION_NOT_FOUND, application=application_id)
        if not application.is_owned_by(user_id):
            raise ManagementError.of(ErrorKind.FORBIDDEN_ACCESS)

        plan = await self._get_plan(plan_id)

        subscription = Subscription(
            application_id=application.id,
            plan_id=plan.id,
            api_id=plan.api_id,
            subscribed_by=user_id,
            request=request,
        )
        if plan.is_auto_validated:
            subscription.accept()

        created = await self.subscription_repo.create(subscription)
        self.logger.info(f"Subscription {created.id} created: {created}")
        return created

    async def get(self, subscription_id: str) -> Subscription:
        """
        Get a subscription.

        Raises:
            ManagementError: SUBSCRIPTION_NOT_FOUND
        """
        subscription = await self.subscription_repo.get_by_id(subscription_id)
        if subscription is None:
            raise ManagementError.of(ErrorKind.SUBSCRIPTION_NOT_FOUND, subscription=subscription_id)
        return subscription

    async def get_for_user(self, subscription_id: str, user_id: str) -> Subscription:
        """Get a subscription of an application the user owns."""
        subscription = await self.get(subscription_id)
        application = await self.application_repo.get_by_id(subscription.application_id)
        if application is None or not application.is_owned_by(user_id):
            raise ManagementError.of(ErrorKind.FORBIDDEN_ACCESS)
        return subscription

    async def close(self, subscription_id: str, user_id: str) -> Subscription:
        subscription = await self.get_for_user(subscription_id, user_id)
        subscription.close()
        closed = await self.subscription_repo.update(subscription)
        self.logger.info(f"Subscription {subscription_id} closed by {user_id}")
        return closed

    async def _get_plan(self, plan_id: str) -> Plan:
        plan = await self.plan_repo.get_by_id(plan_id)
        if plan is None:
            raise ManagementError.of(ErrorKind.PLAN_NOT_FOUND, plan=plan_id)
        return plan
