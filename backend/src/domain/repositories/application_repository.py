"""Application repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import Application
from domain.enums import ApplicationStatus


class IApplicationRepository(ABC):
    """
    Abstract repository interface for Application entity.

    This interface defines the contract for application persistence.
    Concrete implementations will be in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, application: Application) -> Application:
        """
        Create a new application.

        Args:
            application: Application entity to create

        Returns:
            Created Application
        """
        pass

    @abstractmethod
    async def get_by_id(self, application_id: str) -> Optional[Application]:
        """
        Retrieve an application by ID.

        Args:
            application_id: Application identifier

        Returns:
            Application if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_owner(
        self,
        owner_id: str,
        status: ApplicationStatus = ApplicationStatus.ACTIVE,
    ) -> list[Application]:
        """
        Retrieve the applications owned by a user.

        Args:
            owner_id: User identifier
            status: Only applications in this status

        Returns:
            Owned applications, in no particular order
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        status: Optional[ApplicationStatus] = None,
    ) -> list[Application]:
        """
        Retrieve every application, optionally restricted to one status.
        """
        pass

    @abstractmethod
    async def update(self, application: Application) -> Application:
        """
        Update an existing application.

        Args:
            application: Application entity with updated data

        Returns:
            Updated Application
        """
        pass
