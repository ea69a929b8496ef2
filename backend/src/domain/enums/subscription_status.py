"""Lifecycle statuses of a subscription."""

from enum import Enum


class SubscriptionStatus(str, Enum):
    """Status of a link between an application and a plan."""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    PAUSED = "PAUSED"
    REJECTED = "REJECTED"
    CLOSED = "CLOSED"

    @property
    def is_live(self) -> bool:
        """Whether the subscription currently grants access to the API."""
        return self in (SubscriptionStatus.ACCEPTED, SubscriptionStatus.PAUSED)

    def __str__(self) -> str:
        return self.value
