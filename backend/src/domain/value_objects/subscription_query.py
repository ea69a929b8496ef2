"""Search criteria for subscriptions."""

from dataclasses import dataclass, field
from typing import Optional

from domain.enums import SubscriptionStatus


@dataclass(frozen=True)
class SubscriptionQuery:
    """
    Immutable subscription search criteria.

    Unset criteria do not restrict the search. An empty ``applications`` set
    is a restriction that matches nothing.

    Attributes:
        api: Only subscriptions to this API
        application: Only subscriptions of this application
        applications: Only subscriptions of one of these applications
        plan: Only subscriptions to this plan
        statuses: Only subscriptions in one of these statuses
    """

    api: Optional[str] = None
    application: Optional[str] = None
    applications: Optional[frozenset[str]] = None
    plan: Optional[str] = None
    statuses: frozenset[SubscriptionStatus] = field(default_factory=frozenset)

    def matches(self, subscription) -> bool:
        """Check a subscription against every criterion."""
        if self.api is not None and subscription.api_id != self.api:
            return False
        if self.application is not None and subscription.application_id != self.application:
            return False
        if self.applications is not None and subscription.application_id not in self.applications:
            return False
        if self.plan is not None and subscription.plan_id != self.plan:
            return False
        if self.statuses and subscription.status not in self.statuses:
            return False
        return True
