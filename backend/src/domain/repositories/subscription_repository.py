"""Subscription repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import Subscription
from domain.value_objects import SubscriptionQuery


class ISubscriptionRepository(ABC):
    """
    Abstract repository interface for Subscription entity.

    This interface defines the contract for subscription persistence.
    Concrete implementations will be in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, subscription: Subscription) -> Subscription:
        """
        Create a new subscription.

        Args:
            subscription: Subscription entity to create

        Returns:
            Created Subscription
        """
        pass

    @abstractmethod
    async def get_by_id(self, subscription_id: str) -> Optional[Subscription]:
        """
        Retrieve a subscription by ID.

        Args:
            subscription_id: Subscription identifier

        Returns:
            Subscription if found, None otherwise
        """
        pass

    @abstractmethod
    async def search(self, query: SubscriptionQuery) -> list[Subscription]:
        """
        Search subscriptions matching every criterion of the query.

        Args:
            query: Search criteria

        Returns:
            Matching subscriptions, most recent first
        """
        pass

    @abstractmethod
    async def update(self, subscription: Subscription) -> Subscription:
        """
        Update an existing subscription.

        Args:
            subscription: Subscription entity with updated data

        Returns:
            Updated Subscription
        """
        pass
