"""Use cases listing applications."""

from dataclasses import dataclass, field
from typing import Any, Optional

from application.services import ApplicationService, SubscriptionAggregator
from domain.entities import Application
from domain.enums import ApplicationStatus
from domain.errors import ErrorKind, ManagementError
from infrastructure.config import get_logger

ORDER_BY_SUBSCRIPTIONS = "nbSubscriptions"


@dataclass
class ApplicationList:
    """Ordered applications plus the metadata to merge in the list response."""

    applications: list[Application]
    metadata: dict[str, dict[str, Any]] = field(default_factory=dict)


class ListUserApplicationsUseCase:
    """List the applications of the authenticated portal user."""

    def __init__(
        self,
        application_service: ApplicationService,
        subscription_aggregator: SubscriptionAggregator,
    ):
        self.application_service = application_service
        self.aggregator = subscription_aggregator
        self.logger = get_logger(self.__class__.__name__)

    async def execute(self, user_id: str, order: str = "name") -> ApplicationList:
        """
        List the user's applications.

        Args:
            user_id: Authenticated user
            order: "name" or "nbSubscriptions", prefixed with "-" for
                descending order

        Returns:
            Ordered applications; when ordered by subscriptions, the metadata
            holds the subscription count of each application
        """
        applications = await self.application_service.find_by_user(user_id)
        ascending = not order.startswith("-")

        if ORDER_BY_SUBSCRIPTIONS in order:
            result = await self.aggregator.aggregate(applications, ascending)
            return ApplicationList(result.applications, result.metadata)

        # Descending name order is not applied; pending product decision.
        ordered = sorted(applications, key=lambda app: app.name.casefold())
        return ApplicationList(ordered)


class ListEnvironmentApplicationsUseCase:
    """List applications from the management console."""

    def __init__(self, application_service: ApplicationService):
        self.application_service = application_service
        self.logger = get_logger(self.__class__.__name__)

    async def execute(
        self,
        user_id: str,
        is_admin: bool,
        status: Optional[ApplicationStatus] = None,
    ) -> list[Application]:
        """
        Administrators see every application, other users their own ones.

        Raises:
            ManagementError: FORBIDDEN_ACCESS when a non administrator asks for
                archived applications
        """
        if status == ApplicationStatus.ARCHIVED and not is_admin:
            self.logger.warning(f"User {user_id} is not allowed to list archived applications")
            raise ManagementError.of(ErrorKind.FORBIDDEN_ACCESS)

        if is_admin:
            applications = await self.application_service.find_all(status)
        else:
            applications = await self.application_service.find_by_user(user_id)

        return sorted(applications, key=lambda app: app.name.casefold())
