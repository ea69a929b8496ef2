"""User repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import User


class IUserRepository(ABC):
    """
    Abstract repository interface for User entity.

    This interface defines the contract for user persistence.
    Concrete implementations will be in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user.

        Args:
            user: User entity to create

        Returns:
            Created User
        """
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """
        Retrieve a user by ID.

        Args:
            user_id: User identifier

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_source(self, source: str, source_id: str) -> Optional[User]:
        """
        Retrieve a user by its identity provider reference.

        Args:
            source: Identity provider name
            source_id: Reference of the user inside the provider

        Returns:
            User if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[User]:
        """Retrieve every user."""
        pass
