"""Use cases - request level workflows composed from services."""

from .list_applications import (
    ApplicationList,
    ListUserApplicationsUseCase,
    ListEnvironmentApplicationsUseCase,
    ORDER_BY_SUBSCRIPTIONS,
)
from .list_subscriptions import ListSubscriptionsUseCase, NAMES_METADATA_KEY

__all__ = [
    "ApplicationList",
    "ListUserApplicationsUseCase",
    "ListEnvironmentApplicationsUseCase",
    "ORDER_BY_SUBSCRIPTIONS",
    "ListSubscriptionsUseCase",
    "NAMES_METADATA_KEY",
]
