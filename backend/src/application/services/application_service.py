"""Application management service."""

from typing import Optional

from domain.entities import Application
from domain.enums import ApplicationStatus, SubscriptionStatus
from domain.errors import ErrorKind, ManagementError
from domain.repositories import IApplicationRepository, ISubscriptionRepository
from domain.value_objects import ApplicationSettings, SubscriptionQuery
from infrastructure.config import get_logger


class ApplicationService:
    """Create, read, update and archive applications."""

    def __init__(
        self,
        application_repository: IApplicationRepository,
        subscription_repository: ISubscriptionRepository,
    ):
        self.application_repo = application_repository
        self.subscription_repo = subscription_repository
        self.logger = get_logger(self.__class__.__name__)

    async def create(
        self,
        owner_id: str,
        name: str,
        description: Optional[str] = None,
        groups: Optional[list[str]] = None,
        picture: Optional[str] = None,
        settings: Optional[ApplicationSettings] = None,
    ) -> Application:
        """
        Create an application owned by a user.

        Args:
            owner_id: Authenticated user creating the application
            name: Display name
            description: Optional description
            groups: Optional group ids
            picture: Optional data URI
            settings: Client settings, empty when omitted

        Returns:
            Created Application
        """
        application = Application(
            name=name,
            description=description,
            owner_id=owner_id,
            groups=list(groups or []),
            picture=picture,
            settings=settings or ApplicationSettings(),
        )
        created = await self.application_repo.create(application)
        self.logger.info(f"Application {created.id} created by {owner_id}")
        return created

    async def find_by_user(self, user_id: str) -> list[Application]:
        """Active applications visible to a user."""
        return await self.application_repo.find_by_owner(user_id, ApplicationStatus.ACTIVE)

    async def find_all(self, status: Optional[ApplicationStatus] = None) -> list[Application]:
        return await self.application_repo.find_all(status)

    async def get(self, application_id: str) -> Application:
        """
        Get an application.

        Raises:
            ManagementError: APPLICATION_NOT_FOUND
        """
        application = await self.application_repo.get_by_id(application_id)
        if application is None:
            raise ManagementError.of(ErrorKind.APPLICATION_NOT_FOUND, application=application_id)
        return application

    async def get_for_user(self, application_id: str, user_id: str) -> Application:
        """
        Get an application the user owns.

        Raises:
            ManagementError: APPLICATION_NOT_FOUND, or FORBIDDEN_ACCESS when
                the user is not the owner
        """
        application = await self.get(application_id)
        if not application.is_owned_by(user_id):
            raise ManagementError.of(ErrorKind.FORBIDDEN_ACCESS)
        return application

    async def update(
        self,
        application_id: str,
        user_id: str,
        name: str,
        description: Optional[str] = None,
        groups: Optional[list[str]] = None,
        picture: Optional[str] = None,
        settings: Optional[ApplicationSettings] = None,
    ) -> Application:
        application = await self.get_for_user(application_id, user_id)
        application.update(
            name=name,
            description=description,
            groups=list(groups or []),
            picture=picture,
            settings=settings or application.settings,
        )
        return await self.application_repo.update(application)

    async def archive(self, application_id: str, user_id: str) -> Application:
        """
        Archive an application and close its remaining subscriptions.

        Args:
            application_id: Application to archive
            user_id: Authenticated user, must be the owner

        Returns:
            Archived Application
        """
        application = await self.get_for_user(application_id, user_id)

        query = SubscriptionQuery(
            application=application.id,
            statuses=frozenset({
                SubscriptionStatus.PENDING,
                SubscriptionStatus.ACCEPTED,
                SubscriptionStatus.PAUSED,
            }),
        )
        for subscription in await self.subscription_repo.search(query):
            subscription.close()
            await self.subscription_repo.update(subscription)

        application.archive()
        archived = await self.application_repo.update(application)
        self.logger.info(f"Application {application_id} archived by {user_id}")
        return archived
