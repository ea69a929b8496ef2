"""Order applications by their number of live subscriptions."""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable

from domain.entities import Application, Subscription
from domain.enums import SubscriptionStatus
from domain.repositories import ISubscriptionRepository
from domain.value_objects import SubscriptionQuery
from infrastructure.config import get_logger

COUNTED_STATUSES = frozenset({SubscriptionStatus.ACCEPTED, SubscriptionStatus.PAUSED})
SUBSCRIPTIONS_METADATA_KEY = "subscriptions"


@dataclass(frozen=True)
class CountedApplication:
    """An application paired with its subscription count, for one sort."""

    application: Application
    count: int


@dataclass
class AggregatedApplications:
    """
    Result of the aggregation.

    Attributes:
        applications: Applications in their final order
        metadata: ``{"subscriptions": {application_id: count}}``
    """

    applications: list[Application]
    metadata: dict[str, dict[str, int]]

    @property
    def counts(self) -> dict[str, int]:
        return self.metadata[SUBSCRIPTIONS_METADATA_KEY]


def _unique(applications: Iterable[Application]) -> list[Application]:
    seen: set[str] = set()
    result = []
    for application in applications:
        if application.id not in seen:
            seen.add(application.id)
            result.append(application)
    return result


def count_subscriptions(
    applications: Iterable[Application],
    subscriptions: Iterable[Subscription],
) -> dict[str, int]:
    """
    Count the live subscriptions of each application.

    Only ACCEPTED and PAUSED subscriptions of the given applications are
    counted. Every application gets an entry, 0 when nothing matched.
    """
    applications = _unique(applications)
    query = SubscriptionQuery(
        applications=frozenset(app.id for app in applications),
        statuses=COUNTED_STATUSES,
    )
    counter = Counter(s.application_id for s in subscriptions if query.matches(s))
    return {app.id: counter.get(app.id, 0) for app in applications}


def order_by_subscription_count(
    applications: Iterable[Application],
    counts: dict[str, int],
    ascending: bool = True,
) -> list[Application]:
    """
    Sort applications by subscription count.

    Equal counts are ordered by name, case-insensitive and ascending, whatever
    the direction of the count ordering.

    Args:
        applications: Applications to sort
        counts: Subscription count per application id (missing means 0)
        ascending: Direction of the count ordering

    Returns:
        A new list, each application appearing once
    """
    counted = [
        CountedApplication(app, counts.get(app.id, 0))
        for app in _unique(applications)
    ]
    # Two stable passes: the name order survives the count sort, reversed or not.
    counted.sort(key=lambda c: c.application.name.casefold())
    counted.sort(key=lambda c: c.count, reverse=not ascending)
    return [c.application for c in counted]


def aggregate_subscriptions(
    applications: Iterable[Application],
    subscriptions: Iterable[Subscription],
    ascending: bool = True,
) -> AggregatedApplications:
    """Count, order and build the metadata in one pass over fetched data."""
    applications = _unique(applications)
    counts = count_subscriptions(applications, subscriptions)
    return AggregatedApplications(
        applications=order_by_subscription_count(applications, counts, ascending),
        metadata={SUBSCRIPTIONS_METADATA_KEY: counts},
    )


class SubscriptionAggregator:
    """
    Orders a caller's applications by number of live subscriptions.

    Performs a single read-only subscription search; failures of the search
    are propagated untouched.
    """

    def __init__(self, subscription_repository: ISubscriptionRepository):
        self.subscription_repo = subscription_repository
        self.logger = get_logger(self.__class__.__name__)

    async def aggregate(
        self,
        applications: Iterable[Application],
        ascending: bool = True,
    ) -> AggregatedApplications:
        """
        Order applications by subscription count.

        Args:
            applications: Applications visible to the caller
            ascending: Direction of the count ordering

        Returns:
            Ordered applications and the subscriptions metadata
        """
        applications = _unique(applications)
        if not applications:
            return AggregatedApplications(applications=[], metadata={SUBSCRIPTIONS_METADATA_KEY: {}})

        query = SubscriptionQuery(
            applications=frozenset(app.id for app in applications),
            statuses=COUNTED_STATUSES,
        )
        subscriptions = await self.subscription_repo.search(query)
        self.logger.debug(
            f"Counted {len(subscriptions)} live subscriptions over {len(applications)} applications"
        )
        return aggregate_subscriptions(applications, subscriptions, ascending)
