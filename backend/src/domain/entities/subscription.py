"""Subscription entity linking an application to a plan."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from domain.enums import SubscriptionStatus
from domain.errors import ErrorKind, ManagementError


@dataclass
class Subscription:
    """
    Entity representing an application subscribed to an API plan.

    Attributes:
        id: Unique subscription identifier
        application_id: Subscribing application
        plan_id: Plan subscribed to
        api_id: API the plan belongs to
        status: Lifecycle status
        subscribed_by: Id of the user who requested the subscription
        request: Optional message sent with the request
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    application_id: str = ""
    plan_id: str = ""
    api_id: str = ""
    status: SubscriptionStatus = SubscriptionStatus.PENDING
    subscribed_by: Optional[str] = None
    request: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)
    processed_at: Optional[datetime] = None
    closed_at: Optional[datetime] = None

    def accept(self) -> None:
        """Accept the subscription request."""
        self.status = SubscriptionStatus.ACCEPTED
        self.processed_at = datetime.utcnow()
        self._mark_updated()

    def close(self) -> None:
        """
        Close the subscription.

        Raises:
            ManagementError: SUBSCRIPTION_NOT_CLOSABLE when it is already
                closed or was rejected
        """
        if self.status not in (
            SubscriptionStatus.PENDING,
            SubscriptionStatus.ACCEPTED,
            SubscriptionStatus.PAUSED,
        ):
            raise ManagementError.of(
                ErrorKind.SUBSCRIPTION_NOT_CLOSABLE,
                subscription=self.id,
                status=self.status.value,
            )
        self.status = SubscriptionStatus.CLOSED
        self.closed_at = datetime.utcnow()
        self._mark_updated()

    def _mark_updated(self) -> None:
        self.updated_at = datetime.utcnow()

    def __str__(self) -> str:
        return (
            f"Subscription(id={self.id}, application={self.application_id}, "
            f"plan={self.plan_id}, status={self.status.value})"
        )
