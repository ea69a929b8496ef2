"""Application services - one per aggregate."""

from .subscription_aggregator import (
    SubscriptionAggregator,
    AggregatedApplications,
    CountedApplication,
    COUNTED_STATUSES,
    SUBSCRIPTIONS_METADATA_KEY,
    aggregate_subscriptions,
    count_subscriptions,
    order_by_subscription_count,
)
from .application_service import ApplicationService
from .subscription_service import SubscriptionService
from .api_service import ApiService
from .user_service import UserService, NewExternalUser
from .role_service import RoleService
from .view_service import ViewService, ViewUpdate
from .api_header_service import ApiHeaderService

__all__ = [
    "SubscriptionAggregator",
    "AggregatedApplications",
    "CountedApplication",
    "COUNTED_STATUSES",
    "SUBSCRIPTIONS_METADATA_KEY",
    "aggregate_subscriptions",
    "count_subscriptions",
    "order_by_subscription_count",
    "ApplicationService",
    "SubscriptionService",
    "ApiService",
    "UserService",
    "NewExternalUser",
    "RoleService",
    "ViewService",
    "ViewUpdate",
    "ApiHeaderService",
]
